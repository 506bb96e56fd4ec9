"""
Request-level entry points of the springls core.

SpringConfigService ties the parsing, path resolution, suggestion and
formatting stages together. Each method is a pure function of the document
URI, its full text and, where relevant, the cursor position. Nothing is
cached between calls; the only shared state is the read-only catalog.
"""

import logging
import re
from typing import List, Optional

from lsprotocol import types

from springls.config.catalog import PropertyCatalog

from .utils.dialect import Dialect, detect_dialect
from .utils.existing_keys import index_existing_paths
from .utils.formatter import format_completions, format_hover, format_value_completions
from .utils.indentation_parser import is_structural, parse_lines, split_lines
from .utils.path_resolver import resolve
from .utils.suggestion_engine import suggest, suggest_values
from .utils.yaml_parser import YamlParser

logger = logging.getLogger(__name__)

DIAGNOSTIC_SOURCE = "springls"

_PROPERTIES_LINE = re.compile(r"^(\s*)([^=]+)=(.*)$")


class SpringConfigService:
    """
    Completion, hover, formatting and validation for Spring Boot config files.

    Unknown dialects, lookup misses and malformed documents all produce empty
    results; none of the entry points raise for document content.
    """

    def __init__(self, catalog: PropertyCatalog):
        self.catalog = catalog

    def completion(self, uri: str, text: str, position: types.Position) -> List[types.CompletionItem]:
        """
        Completion items for the cursor position.

        Key positions get next-level catalog keys; value positions get the enum
        literals of the property being assigned, if it has any.
        """
        dialect = detect_dialect(uri)
        if dialect is None:
            logger.debug(f"No dialect for {uri}, skipping completion")
            return []

        raw_lines = split_lines(text)
        lines = parse_lines(text, dialect)
        context = resolve(lines, raw_lines, position.line, position.character, dialect)
        line_text = raw_lines[position.line] if position.line < len(raw_lines) else ""
        cursor = types.Position(line=position.line, character=min(position.character, len(line_text)))

        if context.is_value_position:
            entry = self.catalog.get(context.line_path) if context.line_path else None
            values = suggest_values(entry, context.value_text)
            logger.debug(f"Value completion for {context.line_path}: {len(values)} values")
            return format_value_completions(values, context, cursor, entry) if values else []

        if not context.is_key_position:
            return []

        existing = index_existing_paths(text, dialect)
        candidates = suggest(
            self.catalog.keys(),
            context.parent_path,
            context.partial_text,
            existing,
            flat=dialect is Dialect.PROPERTIES,
            catalog=self.catalog,
        )
        logger.debug(
            f"Completion for {uri}: parent='{context.parent_path}' partial='{context.partial_text}' "
            f"existing={len(existing)} candidates={len(candidates)}"
        )
        return format_completions(candidates, context, cursor, dialect)

    def hover(self, uri: str, text: str, position: types.Position) -> Optional[types.Hover]:
        """Documentation for the property declared on the cursor line."""
        dialect = detect_dialect(uri)
        if dialect is None:
            return None

        raw_lines = split_lines(text)
        if position.line >= len(raw_lines) or not is_structural(raw_lines[position.line]):
            return None

        context = resolve(parse_lines(text, dialect), raw_lines, position.line, position.character, dialect)
        full_path = context.line_path
        if not full_path:
            return None

        contents = format_hover(full_path, self.catalog.get(full_path))
        if contents is None:
            logger.debug(f"No catalog entry for {full_path}")
            return None

        line_text = raw_lines[position.line]
        start = line_text.find(context.line_key)
        return types.Hover(
            contents=contents,
            range=types.Range(
                start=types.Position(line=position.line, character=start),
                end=types.Position(line=position.line, character=start + len(context.line_key)),
            ),
        )

    def format(self, uri: str, text: str) -> Optional[str]:
        """
        Canonical text for the document, or None when nothing should change.

        YAML is re-serialized from a successful parse; a document that does not
        parse is left alone. Properties files get whitespace around ``=``
        trimmed, with comments and blank lines kept verbatim.
        """
        dialect = detect_dialect(uri)
        if dialect is None:
            return None
        if dialect is Dialect.YAML:
            return YamlParser(text, uri).format()
        return format_properties(text)

    def format_edits(self, uri: str, text: str) -> List[types.TextEdit]:
        """Formatting as a single whole-document edit, or no edits."""
        formatted = self.format(uri, text)
        if formatted is None or formatted == text:
            return []
        line_count = len(split_lines(text))
        return [
            types.TextEdit(
                range=types.Range(
                    start=types.Position(line=0, character=0),
                    end=types.Position(line=line_count, character=0),
                ),
                new_text=formatted,
            )
        ]

    def validate(self, uri: str, text: str) -> List[types.Diagnostic]:
        """Syntax diagnostics; only YAML documents that fail to parse produce any."""
        if detect_dialect(uri) is not Dialect.YAML:
            return []

        result = YamlParser(text, uri).parse()
        if result.ok:
            return []

        error = result.error
        raw_lines = split_lines(text)
        line = min(error.line or 0, max(len(raw_lines) - 1, 0))
        column = error.column or 0
        line_length = len(raw_lines[line]) if raw_lines else 0
        end = line_length if line_length > column else column + 1
        return [
            types.Diagnostic(
                range=types.Range(
                    start=types.Position(line=line, character=column),
                    end=types.Position(line=line, character=end),
                ),
                message=error.message,
                severity=types.DiagnosticSeverity.Error,
                source=DIAGNOSTIC_SOURCE,
            )
        ]


def format_properties(text: str) -> str:
    """Trim whitespace around ``=`` on every key/value line."""
    formatted = []
    for line in text.split("\n"):
        ending = "\r" if line.endswith("\r") else ""
        body = line[:-1] if ending else line
        stripped = body.strip()
        match = _PROPERTIES_LINE.match(body)
        if not stripped or stripped.startswith("#") or not match:
            formatted.append(line)
            continue
        indent, key, value = match.groups()
        formatted.append(f"{indent}{key.strip()}={value.strip()}{ending}")
    return "\n".join(formatted)
