"""Two-shape normalization and document export."""

import logging

import pytest

from theme_engine.design.theme_model import (
    ThemeShapeError,
    normalize_theme,
    resolve_theme_id,
    slugify_theme_name,
)


def test_nested_shape_uses_meta_fields():
    theme = normalize_theme(
        {
            "meta": {"id": "ocean", "name": "Ocean", "type": "light", "author": "Ana", "tags": ["a", "a", "b"]},
            "colors": {"accent": "#00f"},
        }
    )
    assert (theme.id, theme.name, theme.type, theme.author) == ("ocean", "Ocean", "light", "Ana")
    assert theme.tags == ["a", "b"]
    assert theme.version == "1.0.0"
    assert theme.description == ""
    assert theme.colors == {"accent": "#00f"}
    assert theme.editor == {} and theme.terminal == {}


def test_flat_shape_is_accepted():
    theme = normalize_theme({"id": "legacy", "name": "Legacy", "author": "Old", "version": "0.9"})
    assert theme.id == "legacy"
    assert theme.author == "Old"
    assert theme.version == "0.9"
    assert theme.type == "dark"


def test_defaults_fill_missing_fields():
    theme = normalize_theme({"meta": {"id": "x"}})
    assert theme.name == "Unnamed Theme"
    assert theme.author == "Unknown"


def test_meta_without_name_uses_flat_name_and_type():
    theme = normalize_theme({"meta": {"id": "x"}, "name": "Flat Name", "type": "light"})
    assert theme.name == "Flat Name"
    assert theme.type == "light"


@pytest.mark.parametrize("tags", [5, True, {"a": 1}, 2.5])
def test_non_list_tags_are_dropped(tags, caplog):
    with caplog.at_level(logging.WARNING):
        theme = normalize_theme({"id": "x", "tags": tags})
    assert theme.tags == []
    assert "tags" in caplog.text


def test_tuple_tags_and_single_string_tag():
    assert normalize_theme({"id": "x", "tags": ("a", "b", "a")}).tags == ["a", "b"]
    assert normalize_theme({"id": "x", "tags": "solo"}).tags == ["solo"]


def test_unhashable_type_falls_back_to_dark():
    assert normalize_theme({"id": "x", "type": ["light"]}).type == "dark"


@pytest.mark.parametrize("data", [{}, {"meta": {"name": "No id"}}, [], "text", None])
def test_unrecognized_shapes_raise(data):
    with pytest.raises(ThemeShapeError):
        normalize_theme(data)


def test_unknown_type_falls_back_to_dark(caplog):
    with caplog.at_level(logging.WARNING):
        theme = normalize_theme({"id": "x", "type": "sepia"})
    assert theme.type == "dark"
    assert "sepia" in caplog.text


def test_non_mapping_blocks_are_dropped():
    theme = normalize_theme({"id": "x", "colors": ["#fff"], "editor": "vs"})
    assert theme.colors == {}
    assert theme.editor == {}


def test_record_does_not_alias_input():
    colors = {"accent": "#fff"}
    syntax = {"keyword": {"color": "fff"}}
    theme = normalize_theme({"id": "x", "colors": colors, "editor": {"syntax": syntax}})
    colors["accent"] = "#000"
    syntax["keyword"]["color"] = "000"
    assert theme.colors["accent"] == "#fff"
    assert theme.editor["syntax"]["keyword"]["color"] == "fff"


def test_to_document_is_nested_and_independent():
    theme = normalize_theme({"id": "x", "name": "X", "colors": {"accent": "#fff"}, "tags": ["t"]})
    doc = theme.to_document()
    assert doc["meta"] == {
        "id": "x",
        "name": "X",
        "author": "Unknown",
        "version": "1.0.0",
        "description": "",
        "type": "dark",
        "tags": ["t"],
    }
    doc["colors"]["accent"] = "#000"
    assert theme.colors["accent"] == "#fff"


def test_resolve_theme_id_prefers_meta():
    assert resolve_theme_id({"meta": {"id": "a"}, "id": "b"}) == "a"
    assert resolve_theme_id({"id": "b"}) == "b"
    assert resolve_theme_id({}) is None
    assert resolve_theme_id("x") is None


def test_slugify():
    assert slugify_theme_name("My Pink") == "my-pink"
    assert slugify_theme_name("  Late   Night  Blue ") == "late-night-blue"
