"""
Data models for springls LSP.

This module defines the per-request structures shared by the parsing,
path resolution and suggestion stages. All of them are recomputed from
the document text on every request and are never cached.
"""

from dataclasses import dataclass
from typing import Optional

from springls.config.catalog import PropertyEntry


@dataclass(frozen=True)
class DocumentLine:
    """
    A structural line of a configuration document.

    Blank lines and comment lines are never represented.

    Attributes:
        number: 0-based physical line number in the document
        text: Raw line text without the line terminator
        indent: Count of leading whitespace characters (a tab counts as one column)
        key: Key token extracted from the line, or None for lines without one
            (list items, continuation lines of multi-line scalars)
    """
    number: int
    text: str
    indent: int
    key: Optional[str] = None


@dataclass(frozen=True)
class PathContext:
    """
    Where the cursor sits in the configuration hierarchy.

    Attributes:
        parent_path: Dotted ancestor chain strictly above the cursor's indentation
            ("" at the document root, always "" for properties files)
        partial_text: Key fragment being typed right before the cursor
        is_value_position: True when a ':' or '=' separator precedes the cursor
        indent: Leading whitespace count of the cursor line
        is_key_position: True when the text before the cursor is blank or a bare
            key fragment, i.e. key suggestions make sense here
        line_key: Key already written on the cursor line before the separator
        value_text: Value fragment typed after the separator, for value positions
    """
    parent_path: str
    partial_text: str
    is_value_position: bool
    indent: int
    is_key_position: bool = True
    line_key: Optional[str] = None
    value_text: str = ""

    @property
    def line_path(self) -> Optional[str]:
        """Full dotted path of the key written on the cursor line, if any."""
        if not self.line_key:
            return None
        return f"{self.parent_path}.{self.line_key}" if self.parent_path else self.line_key


@dataclass(frozen=True)
class Candidate:
    """
    A completion candidate produced by the suggestion engine.

    Attributes:
        key: Text offered to the user (next path segment, or the full
            property name in flat mode)
        full_path: Dotted path the candidate stands for
        is_leaf: The catalog documents full_path directly
        has_group_children: The catalog has properties below full_path
        entry: Catalog entry when is_leaf is True
    """
    key: str
    full_path: str
    is_leaf: bool
    has_group_children: bool
    entry: Optional[PropertyEntry] = None
