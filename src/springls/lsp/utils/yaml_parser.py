"""
YAML parsing utilities for springls.

This module wraps PyYAML behind an explicit result object: parsing never
raises, it returns either the parsed tree or a YamlSyntaxError describing
where the document broke. Callers pick their fallback by looking at the
result instead of intercepting exceptions.

Security Note:
Only safe_load/SafeDumper are used, so documents cannot construct arbitrary
Python objects.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

import yaml

logger = logging.getLogger(__name__)

MAX_DOCUMENT_SIZE = 10 * 1024 * 1024  # 10MB


@dataclass(frozen=True)
class YamlSyntaxError:
    """
    A structural parse failure.

    Attributes:
        description: Parser explanation of the failure
        line: 0-based line of the offending location, if known
        column: 0-based column of the offending location, if known
    """
    description: str
    line: Optional[int] = None
    column: Optional[int] = None

    @property
    def message(self) -> str:
        if self.line is None:
            return f"YAML syntax error: {self.description}"
        return f"YAML syntax error: {self.description} (line {self.line + 1}, column {(self.column or 0) + 1})"


@dataclass(frozen=True)
class YamlParseResult:
    """Outcome of a structural parse: a tree, or the error that prevented one."""
    tree: Any = None
    error: Optional[YamlSyntaxError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class _CanonicalDumper(yaml.SafeDumper):
    """Dumper that never emits anchors/aliases and indents nested sequences."""

    def ignore_aliases(self, data: Any) -> bool:
        return True

    def increase_indent(self, flow: bool = False, indentless: bool = False):
        return super().increase_indent(flow, False)


def _represent_str(dumper: yaml.SafeDumper, data: str):
    # Multi-line strings are emitted as literal blocks.
    if "\n" in data:
        return dumper.represent_scalar("tag:yaml.org,2002:str", data, style="|")
    return dumper.represent_str(data)


_CanonicalDumper.add_representer(str, _represent_str)


def _describe(error: yaml.YAMLError) -> str:
    if isinstance(error, yaml.MarkedYAMLError):
        parts = [part for part in (error.context, error.problem) if part]
        if parts:
            return ", ".join(parts)
    return str(error).splitlines()[0] if str(error) else error.__class__.__name__


def _pick_mark(error: yaml.YAMLError, text: str):
    """
    Choose the mark that points at the offending line.

    The problem mark is normally right. When it sits past all content (an
    unterminated quoted scalar runs to end of stream) the context mark, which
    points at where the broken construct started, is used instead.
    """
    if not isinstance(error, yaml.MarkedYAMLError):
        return None
    mark = error.problem_mark
    if mark is None or (mark.index >= len(text.rstrip()) and error.context_mark is not None):
        return error.context_mark
    return mark


class YamlParser:
    """
    Safe YAML parser for Spring Boot configuration documents.

    Wraps yaml.safe_load and yaml dumping. Malformed input never raises out
    of this class; it is reported through YamlParseResult.
    """

    def __init__(self, yaml_string: str, document_uri: Optional[str] = None):
        """
        Initialize the YAML parser.

        Args:
            yaml_string: The YAML content to parse
            document_uri: Optional URI of the document for log messages
        """
        self.yaml_string = yaml_string
        self.document_uri = document_uri or "unknown"
        self._result: Optional[YamlParseResult] = None

    def parse(self) -> YamlParseResult:
        """
        Parse the document once and memoize the result.

        Returns:
            YamlParseResult holding either the tree or the syntax error
        """
        if self._result is None:
            self._result = self._parse()
        return self._result

    def _parse(self) -> YamlParseResult:
        if len(self.yaml_string) > MAX_DOCUMENT_SIZE:
            logger.warning(f"YAML document {self.document_uri} too large to parse")
            return YamlParseResult(error=YamlSyntaxError("document too large (>10MB)"))

        try:
            tree = yaml.safe_load(self.yaml_string)
            logger.debug(f"Successfully parsed YAML from {self.document_uri}")
            return YamlParseResult(tree=tree)
        except yaml.YAMLError as e:
            logger.debug(f"YAML parsing error in {self.document_uri}: {e}")
            mark = _pick_mark(e, self.yaml_string)
            return YamlParseResult(
                error=YamlSyntaxError(
                    description=_describe(e),
                    line=mark.line if mark is not None else None,
                    column=mark.column if mark is not None else None,
                )
            )

    def format(self) -> Optional[str]:
        """
        Re-serialize the document in canonical form.

        Two-space indentation, block style, authored key order, no anchors.

        Returns:
            The formatted text, or None when the document does not parse or has
            no mapping/sequence content to format
        """
        result = self.parse()
        if not result.ok:
            logger.info(f"Skipping formatting of {self.document_uri}: {result.error.message}")
            return None

        if not isinstance(result.tree, (dict, list)):
            return None

        return yaml.dump(
            result.tree,
            Dumper=_CanonicalDumper,
            indent=2,
            width=120,
            sort_keys=False,
            default_flow_style=False,
            allow_unicode=True,
        )
