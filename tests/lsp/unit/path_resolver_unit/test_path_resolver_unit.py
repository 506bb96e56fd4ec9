"""Unit tests for cursor context resolution."""

import pytest

from springls.lsp.utils.dialect import Dialect
from springls.lsp.utils.path_resolver import resolve_text


def yaml_context(text, line, column):
    return resolve_text(text, line, column, Dialect.YAML)


def properties_context(text, line, column):
    return resolve_text(text, line, column, Dialect.PROPERTIES)


def test_blank_line_under_parent():
    context = yaml_context("server:\n  port: 8080\n  ", 2, 2)

    assert context.parent_path == "server"
    assert context.partial_text == ""
    assert context.is_value_position is False
    assert context.is_key_position is True
    assert context.indent == 2


def test_shallower_sibling_between_deep_node_and_cursor():
    text = (
        "spring:\n"
        "  datasource:\n"
        "    hikari:\n"
        "      maximum-pool-size: 5\n"
        "  jpa:\n"
        "    hibernate:\n"
        "      "
    )
    assert yaml_context(text, 6, 6).parent_path == "spring.jpa.hibernate"
    # Same text, but cursor back at the jpa children level.
    assert yaml_context(text, 6, 4).parent_path == "spring.jpa"


def test_cursor_at_root_after_nested_block():
    assert yaml_context("server:\n  port: 1\n", 2, 0).parent_path == ""


def test_partial_key_fragment():
    context = yaml_context("spring:\n  data", 1, 6)

    assert context.parent_path == "spring"
    assert context.partial_text == "data"
    assert context.is_key_position is True


def test_value_position_after_colon():
    context = yaml_context("server:\n  port: 80", 1, 10)

    assert context.is_value_position is True
    assert context.is_key_position is False
    assert context.line_key == "port"
    assert context.line_path == "server.port"
    assert context.value_text == "80"


def test_list_items_do_not_disturb_stack():
    text = "spring:\n  profiles:\n    include:\n      - a\n      - b\n    "
    assert yaml_context(text, 5, 4).parent_path == "spring.profiles"


def test_comment_lines_are_ignored():
    assert yaml_context("server:\n# comment at column zero\n  ", 2, 2).parent_path == "server"


def test_cursor_beyond_document_is_blank_line():
    context = yaml_context("server:\n  port: 1", 5, 3)

    assert context.parent_path == ""
    assert context.partial_text == ""
    assert context.is_key_position is True


def test_column_zero_has_no_partial_text():
    context = yaml_context("server:\n  port: 1", 1, 0)

    assert context.partial_text == ""
    assert context.parent_path == "server"


def test_list_item_is_not_a_key_position():
    context = yaml_context("spring:\n  - item", 1, 8)

    assert context.is_key_position is False
    assert context.is_value_position is False


@pytest.mark.parametrize(
    "text,column,partial",
    [
        ("spring.datasource.u", 19, "spring.datasource.u"),
        ("  spring.da", 11, "spring.da"),
        ("", 0, ""),
    ],
)
def test_properties_partial_text(text, column, partial):
    context = properties_context(text, 0, column)

    assert context.parent_path == ""
    assert context.partial_text == partial
    assert context.is_key_position is True


def test_properties_value_position():
    context = properties_context("server.port = 80", 0, 16)

    assert context.is_value_position is True
    assert context.line_key == "server.port"
    assert context.value_text == "80"


def test_properties_trailing_space_is_not_key_position():
    context = properties_context("spring ", 0, 7)
    assert context.is_key_position is False


def test_properties_comment_is_not_key_position():
    context = properties_context("# spring", 0, 8)
    assert context.is_key_position is False
    assert context.is_value_position is False
