"""
Conversion of suggestions into LSP completion items and hover content.

Every completion item carries an explicit text edit. The edit replaces the
fragment typed before the cursor and nothing after it, so accepting a
suggestion neither duplicates the fragment nor clobbers text to the right of
the cursor.
"""

from typing import List, Optional

from lsprotocol import types

from springls.config.catalog import PropertyEntry

from .dialect import Dialect
from .models import Candidate, PathContext

GROUP_DETAIL = "Configuration group"


def property_documentation(full_path: str, entry: PropertyEntry) -> str:
    """Markdown documentation block for a documented property."""
    doc = f"**{full_path}**\n\n{entry.description}\n\n**Type:** `{entry.type}`"
    if entry.default is not None:
        doc += f"\n\n**Default:** `{entry.default}`"
    if entry.enum:
        doc += "\n\n**Valid values:** " + ", ".join(f"`{value}`" for value in entry.enum)
    return doc


def group_documentation(full_path: str) -> str:
    return f"**{full_path}**\n\nConfiguration group with nested properties"


def property_detail(entry: PropertyEntry) -> str:
    if entry.default is not None:
        return f"{entry.type} (default: {entry.default})"
    return entry.type


def insert_text(candidate: Candidate, dialect: Dialect) -> str:
    """
    Text inserted for a candidate.

    Properties files continue with the value (``key=``). In YAML a pure leaf
    gets ``key: `` ready for its value, while anything with children gets
    ``key:`` since the user will break the line and indent.
    """
    if dialect is Dialect.PROPERTIES:
        return f"{candidate.key}="
    if candidate.is_leaf and not candidate.has_group_children:
        return f"{candidate.key}: "
    return f"{candidate.key}:"


def replacement_range(context: PathContext, position: types.Position) -> types.Range:
    """
    Range replaced by a key completion.

    Starts where the typed fragment starts (or at the indentation column on a
    line that is blank up to the cursor) and always ends at the cursor.
    """
    column = position.character
    if context.partial_text:
        start = column - len(context.partial_text)
    else:
        start = min(context.indent, column)
    return types.Range(
        start=types.Position(line=position.line, character=max(0, start)),
        end=types.Position(line=position.line, character=column),
    )


def format_completions(
    candidates: List[Candidate],
    context: PathContext,
    position: types.Position,
    dialect: Dialect,
) -> List[types.CompletionItem]:
    """
    Build completion items for key candidates.

    Args:
        candidates: Ordered output of the suggestion engine
        context: Resolved cursor context
        position: Cursor position, already clamped to the line
        dialect: Document dialect

    Returns:
        Completion items in candidate order
    """
    edit_range = replacement_range(context, position)
    items = []
    for candidate in candidates:
        if candidate.entry is not None:
            detail = property_detail(candidate.entry)
            documentation = property_documentation(candidate.full_path, candidate.entry)
            kind = types.CompletionItemKind.Property
        else:
            detail = GROUP_DETAIL
            documentation = group_documentation(candidate.full_path)
            kind = types.CompletionItemKind.Module

        items.append(
            types.CompletionItem(
                label=candidate.key,
                kind=kind,
                detail=detail,
                documentation=types.MarkupContent(kind=types.MarkupKind.Markdown, value=documentation),
                text_edit=types.TextEdit(range=edit_range, new_text=insert_text(candidate, dialect)),
                sort_text=f"{'1' if candidate.is_leaf else '2'}_{candidate.key}",
            )
        )
    return items


def format_value_completions(
    values: List[str],
    context: PathContext,
    position: types.Position,
    entry: PropertyEntry,
) -> List[types.CompletionItem]:
    """
    Build completion items for the enum values of a property.

    The edit starts after an opening quote, so a quoted scalar stays quoted.
    """
    column = position.character
    typed = context.value_text
    quotes = len(typed) - len(typed.lstrip("'\""))
    edit_range = types.Range(
        start=types.Position(line=position.line, character=max(0, column - len(typed) + quotes)),
        end=types.Position(line=position.line, character=column),
    )
    return [
        types.CompletionItem(
            label=value,
            kind=types.CompletionItemKind.EnumMember,
            detail=f"{entry.name} value",
            documentation=types.MarkupContent(
                kind=types.MarkupKind.Markdown,
                value=property_documentation(entry.name, entry),
            ),
            text_edit=types.TextEdit(range=edit_range, new_text=value),
            sort_text=f"{index:04d}",
        )
        for index, value in enumerate(values)
    ]


def format_hover(full_path: str, entry: Optional[PropertyEntry]) -> Optional[types.MarkupContent]:
    """Hover markup for an exact catalog entry, None for groups and unknown paths."""
    if entry is None:
        return None
    return types.MarkupContent(
        kind=types.MarkupKind.Markdown,
        value=property_documentation(full_path, entry),
    )
