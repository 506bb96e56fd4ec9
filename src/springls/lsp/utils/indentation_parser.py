"""
Line-based structural view of configuration documents.

Documents are frequently invalid while being edited, so completion and hover
never depend on a successful YAML parse. Instead every physical line is
reduced to its indentation width and an optional key token. Stack based
consumers (path resolution, the existing-keys fallback) only look at lines
that carry a key, so list items and scalar continuation lines never disturb
their indentation stack.
"""

import re
from typing import List, Optional

from .dialect import Dialect
from .models import DocumentLine

# A YAML mapping key: optional indentation, key characters, then a colon.
YAML_KEY_PATTERN = re.compile(r"^\s*([A-Za-z0-9._-]+):")


def split_lines(text: str) -> List[str]:
    """Split text into physical lines, dropping carriage returns."""
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


def leading_whitespace(line: str) -> int:
    return len(line) - len(line.lstrip(" \t"))


def is_structural(line: str) -> bool:
    """Blank and comment lines never take part in structure."""
    stripped = line.strip()
    return bool(stripped) and not stripped.startswith("#")


def extract_key(line: str, dialect: Dialect) -> Optional[str]:
    """Extract the key token of a single line for the given dialect."""
    if dialect is Dialect.YAML:
        match = YAML_KEY_PATTERN.match(line)
        return match.group(1) if match else None

    if "=" not in line:
        return None
    key = line.split("=", 1)[0].strip()
    return key or None


def parse_lines(text: str, dialect: Dialect) -> List[DocumentLine]:
    """
    Convert document text into its structural lines.

    Args:
        text: Full document text
        dialect: Syntax used to extract keys

    Returns:
        One DocumentLine per non-blank, non-comment line, in document order
    """
    result = []
    for number, line in enumerate(split_lines(text)):
        if not is_structural(line):
            continue
        result.append(
            DocumentLine(
                number=number,
                text=line,
                indent=leading_whitespace(line),
                key=extract_key(line, dialect),
            )
        )
    return result
