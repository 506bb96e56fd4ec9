"""
Cursor context resolution for springls.

Given the structural lines of a document and a cursor position, work out
which dotted path the cursor is nested under, what key fragment is being
typed and whether the cursor sits after a key/value separator.

The YAML ancestor chain is rebuilt with a single forward scan that keeps a
stack of (key, indent) pairs: each keyed line pops every entry indented at
least as deep as itself before being pushed. Once the lines above the cursor
are consumed, entries indented at or beyond the cursor line are dropped and
what remains is the chain of ancestors strictly above the cursor.
"""

import logging
import re
from typing import Iterable, List, Tuple

from .dialect import Dialect
from .indentation_parser import extract_key, leading_whitespace, split_lines, parse_lines, YAML_KEY_PATTERN
from .models import DocumentLine, PathContext

logger = logging.getLogger(__name__)

_YAML_KEY_RUN = re.compile(r"\s*([A-Za-z0-9._-]*)")
_PROPERTIES_TOKEN = re.compile(r"\s*(\S*)")

StackEntry = Tuple[str, int]


def push_line(stack: List[StackEntry], line: DocumentLine) -> None:
    """Apply one keyed line to an indentation stack in place."""
    while stack and stack[-1][1] >= line.indent:
        stack.pop()
    stack.append((line.key, line.indent))


def ancestor_stack(lines: Iterable[DocumentLine], before_line: int) -> List[StackEntry]:
    """
    Build the indentation stack from every keyed line above ``before_line``.

    Args:
        lines: Structural lines in document order
        before_line: 0-based line number; lines at or after it are ignored

    Returns:
        Stack of (key, indent) pairs, outermost first
    """
    stack: List[StackEntry] = []
    for line in lines:
        if line.number >= before_line:
            break
        if line.key is None:
            continue
        push_line(stack, line)
    return stack


def join_path(stack: Iterable[StackEntry]) -> str:
    return ".".join(key for key, _ in stack)


def _cursor_indent(line_text: str, column: int) -> int:
    if line_text.strip():
        return leading_whitespace(line_text)
    # Blank line: the cursor column is the only indentation signal.
    return min(len(line_text), column)


def _resolve_yaml(lines: List[DocumentLine], line_text: str, cursor_line: int, column: int) -> PathContext:
    before = line_text[:column]
    indent = _cursor_indent(line_text, column)

    stack = ancestor_stack(lines, cursor_line)
    while stack and stack[-1][1] >= indent:
        stack.pop()
    parent_path = join_path(stack)
    line_key = extract_key(line_text, Dialect.YAML)

    key_run = _YAML_KEY_RUN.fullmatch(before)
    if key_run:
        return PathContext(
            parent_path=parent_path,
            partial_text=key_run.group(1),
            is_value_position=False,
            indent=indent,
            is_key_position=True,
            line_key=line_key,
        )

    if ":" in before and not before.lstrip().startswith("#"):
        key_match = YAML_KEY_PATTERN.match(before)
        value_text = before[key_match.end():].lstrip() if key_match else ""
        return PathContext(
            parent_path=parent_path,
            partial_text="",
            is_value_position=True,
            indent=indent,
            is_key_position=False,
            line_key=key_match.group(1) if key_match else None,
            value_text=value_text,
        )

    # Mid-line in something that is neither a key nor a value (list item, comment).
    return PathContext(
        parent_path=parent_path,
        partial_text="",
        is_value_position=False,
        indent=indent,
        is_key_position=False,
        line_key=line_key,
    )


def _resolve_properties(line_text: str, column: int) -> PathContext:
    before = line_text[:column]
    indent = _cursor_indent(line_text, column)
    line_key = extract_key(line_text, Dialect.PROPERTIES)

    if before.lstrip().startswith("#"):
        return PathContext(
            parent_path="",
            partial_text="",
            is_value_position=False,
            indent=indent,
            is_key_position=False,
        )

    if "=" in before:
        key, value = before.split("=", 1)
        return PathContext(
            parent_path="",
            partial_text="",
            is_value_position=True,
            indent=indent,
            is_key_position=False,
            line_key=key.strip() or None,
            value_text=value.lstrip(),
        )

    token = _PROPERTIES_TOKEN.fullmatch(before)
    return PathContext(
        parent_path="",
        partial_text=token.group(1) if token else "",
        is_value_position=False,
        indent=indent,
        is_key_position=token is not None,
        line_key=line_key,
    )


def resolve(
    lines: List[DocumentLine],
    raw_lines: List[str],
    cursor_line: int,
    cursor_column: int,
    dialect: Dialect,
) -> PathContext:
    """
    Compute the PathContext for a cursor position.

    Args:
        lines: Structural lines from the indentation parser
        raw_lines: Physical lines of the document
        cursor_line: 0-based line of the cursor
        cursor_column: 0-based column of the cursor
        dialect: Document dialect

    Returns:
        The resolved PathContext. A cursor beyond the last line behaves like a
        blank line appended to the document.
    """
    line_text = raw_lines[cursor_line] if 0 <= cursor_line < len(raw_lines) else ""
    column = max(0, min(cursor_column, len(line_text)))

    if dialect is Dialect.YAML:
        context = _resolve_yaml(lines, line_text, cursor_line, column)
    else:
        context = _resolve_properties(line_text, column)

    logger.debug(f"Resolved context at {cursor_line}:{cursor_column}: {context}")
    return context


def resolve_text(text: str, cursor_line: int, cursor_column: int, dialect: Dialect) -> PathContext:
    """Convenience wrapper running the indentation parser and resolver on raw text."""
    return resolve(parse_lines(text, dialect), split_lines(text), cursor_line, cursor_column, dialect)
