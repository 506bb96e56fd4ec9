"""File dialect detection for springls."""

from enum import Enum
from typing import Optional
from urllib.parse import urlparse, unquote


class Dialect(str, Enum):
    """Configuration file syntaxes understood by the server."""

    PROPERTIES = "properties"
    YAML = "yaml"


_SUFFIXES = {
    ".properties": Dialect.PROPERTIES,
    ".yml": Dialect.YAML,
    ".yaml": Dialect.YAML,
}


def detect_dialect(uri: Optional[str]) -> Optional[Dialect]:
    """
    Pick the dialect for a document from its URI suffix.

    Args:
        uri: Document URI or plain file path

    Returns:
        The matching Dialect, or None for files the server does not handle
    """
    if not uri:
        return None

    path = unquote(urlparse(uri).path) if "://" in uri else uri
    lowered = path.lower()
    for suffix, dialect in _SUFFIXES.items():
        if lowered.endswith(suffix):
            return dialect
    return None
