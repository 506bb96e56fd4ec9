"""
Conversion between client positions and Python string offsets.

LSP columns count UTF-16 code units by default, while the request core slices
Python strings by code point. The pygls document's position codec maps
between the two. Positions past the last line fall on a blank line, where
both units agree, and are passed through unchanged.
"""

from lsprotocol import types
from pygls.workspace import TextDocument


def to_server_position(document: TextDocument, position: types.Position) -> types.Position:
    """Convert a client position into code point offsets."""
    lines = document.lines
    if position.line >= len(lines):
        return position
    # The codec clamps out of range columns in place, so it gets a copy.
    copy = types.Position(line=position.line, character=position.character)
    return document.position_codec.position_from_client_units(lines, copy)


def to_client_position(document: TextDocument, position: types.Position) -> types.Position:
    """Convert a code point position back into client units."""
    lines = document.lines
    if position.line >= len(lines):
        return position
    return document.position_codec.position_to_client_units(lines, position)


def to_client_range(document: TextDocument, range_: types.Range) -> types.Range:
    return types.Range(
        start=to_client_position(document, range_.start),
        end=to_client_position(document, range_.end),
    )
