"""Unit tests for the result returning YAML parser."""

import pytest

from springls.lsp.utils.yaml_parser import YamlParser


def test_parse_success_returns_tree():
    result = YamlParser("server:\n  port: 8080\n").parse()

    assert result.ok
    assert result.error is None
    assert result.tree == {"server": {"port": 8080}}


def test_parse_failure_returns_error_instead_of_raising():
    result = YamlParser("server:\n  port: 8080\n bad: [\n").parse()

    assert not result.ok
    assert result.tree is None
    assert result.error.message.startswith("YAML syntax error:")


def test_unterminated_quote_points_at_broken_line():
    text = 'server:\n  port: 8080\nspring:\n  application:\n    name: "demo\n'
    error = YamlParser(text).parse().error

    assert error.line == 4
    assert "(line 5," in error.message


def test_mapping_value_error_uses_problem_line():
    text = "server:\n  port: 8080\n  address: a: b\n"
    error = YamlParser(text).parse().error

    assert error.line == 2
    assert "mapping values are not allowed here" in error.message


def test_parse_is_memoized():
    parser = YamlParser("a: 1")
    assert parser.parse() is parser.parse()


def test_format_normalizes_indentation_and_keeps_order():
    text = "server:\n    port:   8080\n    address: localhost\n"
    assert YamlParser(text).format() == "server:\n  port: 8080\n  address: localhost\n"


def test_format_expands_aliases():
    text = "base: &b\n  a: 1\nother: *b\n"
    assert YamlParser(text).format() == "base:\n  a: 1\nother:\n  a: 1\n"


def test_format_indents_sequences():
    text = "spring:\n  profiles:\n    include:\n    - a\n    - b\n"
    assert YamlParser(text).format() == "spring:\n  profiles:\n    include:\n      - a\n      - b\n"


@pytest.mark.parametrize("text", ["", "# only a comment\n", "just a scalar\n"])
def test_format_skips_documents_without_structure(text):
    assert YamlParser(text).format() is None


def test_format_skips_broken_documents():
    assert YamlParser('a:\n  b: "open\n').format() is None


def test_format_keeps_literal_blocks():
    text = "logging:\n  pattern:\n    console: |\n      first line\n      second line\n"
    formatted = YamlParser(text).format()

    assert formatted == text
    assert YamlParser(formatted).parse().tree == YamlParser(text).parse().tree


def test_format_single_line_strings_stay_plain():
    assert YamlParser("spring:\n  application:\n    name: demo\n").format() == (
        "spring:\n  application:\n    name: demo\n"
    )
