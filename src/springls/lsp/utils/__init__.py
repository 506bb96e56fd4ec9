"""LSP utility modules for springls."""

from .dialect import Dialect, detect_dialect
from .document_event_coordinator import DocumentEventCoordinator
from .existing_keys import index_existing_paths
from .indentation_parser import parse_lines
from .models import Candidate, DocumentLine, PathContext
from .path_resolver import resolve
from .suggestion_engine import suggest, suggest_values
from .yaml_parser import YamlParser, YamlParseResult, YamlSyntaxError

__all__ = [
    "Dialect",
    "detect_dialect",
    "DocumentEventCoordinator",
    "index_existing_paths",
    "parse_lines",
    "Candidate",
    "DocumentLine",
    "PathContext",
    "resolve",
    "suggest",
    "suggest_values",
    "YamlParser",
    "YamlParseResult",
    "YamlSyntaxError",
]
