"""Index of the dotted paths already declared in a document."""

import logging
from typing import Any, FrozenSet, Optional, Set

from .dialect import Dialect
from .indentation_parser import parse_lines
from .path_resolver import join_path, push_line
from .yaml_parser import YamlParser, YamlParseResult

logger = logging.getLogger(__name__)


def _walk_mapping(node: Any, prefix: str, result: Set[str]) -> None:
    for key, value in node.items():
        path = f"{prefix}.{key}" if prefix else str(key)
        result.add(path)
        # Lists are opaque leaves.
        if isinstance(value, dict):
            _walk_mapping(value, path, result)


def _index_lines(text: str) -> Set[str]:
    result: Set[str] = set()
    stack = []
    for line in parse_lines(text, Dialect.YAML):
        if line.key is None:
            continue
        push_line(stack, line)
        result.add(join_path(stack))
    return result


def index_yaml(text: str, parse_result: Optional[YamlParseResult] = None) -> FrozenSet[str]:
    """
    Collect every dotted path declared in a YAML document.

    A successful parse is walked structurally. When the document does not
    parse, the indentation stack is replayed over every line instead.

    Args:
        text: Full document text
        parse_result: Already computed parse of ``text``, if the caller has one

    Returns:
        Set of dotted paths, at every depth
    """
    result = parse_result if parse_result is not None else YamlParser(text).parse()
    if result.ok:
        paths: Set[str] = set()
        if isinstance(result.tree, dict):
            _walk_mapping(result.tree, "", paths)
        return frozenset(paths)

    logger.debug("Document does not parse, indexing existing keys line by line")
    return frozenset(_index_lines(text))


def index_properties(text: str) -> FrozenSet[str]:
    """One path per non-comment ``key=value`` line."""
    return frozenset(
        line.key for line in parse_lines(text, Dialect.PROPERTIES) if line.key is not None
    )


def index_existing_paths(text: str, dialect: Dialect, parse_result: Optional[YamlParseResult] = None) -> FrozenSet[str]:
    if dialect is Dialect.YAML:
        return index_yaml(text, parse_result)
    return index_properties(text)
