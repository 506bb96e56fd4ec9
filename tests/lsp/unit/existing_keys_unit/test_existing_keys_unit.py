"""Unit tests for the existing-keys index."""

from springls.lsp.utils.dialect import Dialect
from springls.lsp.utils.existing_keys import index_existing_paths, index_properties, index_yaml


def test_yaml_structural_walk_emits_every_depth():
    text = (
        "server:\n"
        "  port: 8080\n"
        "  ssl:\n"
        "    enabled: true\n"
        "spring:\n"
        "  profiles:\n"
        "    active:\n"
        "      - dev\n"
    )
    assert index_yaml(text) == {
        "server",
        "server.port",
        "server.ssl",
        "server.ssl.enabled",
        "spring",
        "spring.profiles",
        "spring.profiles.active",
    }


def test_yaml_lists_are_opaque():
    text = "spring:\n  profiles:\n    - name: dev\n      active: true\n"
    assert index_yaml(text) == {"spring", "spring.profiles"}


def test_yaml_dotted_keys_are_kept_whole():
    assert index_yaml("logging.level.root: INFO\n") == {"logging.level.root"}


def test_yaml_keys_after_cursor_are_included():
    text = "server:\n  \n  address: localhost\n  port: 1\n"
    assert {"server.address", "server.port"} <= index_yaml(text)


def test_yaml_fallback_when_document_does_not_parse():
    text = 'server:\n  port: 8080\nspring:\n  application:\n    name: "demo\n'
    assert index_yaml(text) == {
        "server",
        "server.port",
        "spring",
        "spring.application",
        "spring.application.name",
    }


def test_yaml_non_mapping_documents_declare_nothing():
    assert index_yaml("") == frozenset()
    assert index_yaml("- a\n- b\n") == frozenset()
    assert index_yaml("just a scalar") == frozenset()


def test_properties_one_path_per_assignment():
    text = "a.b=1\n# c.d=2\n a.b = 3\ne.f\n\ng.h = \n"
    assert index_properties(text) == {"a.b", "g.h"}


def test_dispatch_by_dialect():
    assert index_existing_paths("a.b=1", Dialect.PROPERTIES) == {"a.b"}
    assert index_existing_paths("a:\n  b: 1", Dialect.YAML) == {"a", "a.b"}
