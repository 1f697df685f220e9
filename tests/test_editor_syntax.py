"""Editor theme generation and host synchronization."""

import logging

from conftest import RecordingEditor, RecordingEditorHost

from theme_engine.design.editor_syntax import (
    activate_editor_theme,
    build_editor_theme,
    define_editor_theme,
)
from theme_engine.design.theme_model import normalize_theme


def test_rule_order_and_bracket_expansion():
    editor = {
        "syntax": {
            "bracket": {"color": "ffd700"},
            "operator": {"color": "e0f0ff"},
            "comment": {"color": "#6a8a9a", "fontStyle": "italic"},
            "keyword": {"color": "88c9ea"},
        }
    }
    definition = build_editor_theme(editor)
    tokens = [r["token"] for r in definition.rules]
    assert tokens == [
        "comment",
        "keyword",
        "operator",
        "delimiter.bracket",
        "delimiter.parenthesis",
        "delimiter.curly",
        "delimiter.square",
    ]
    assert definition.rules[0] == {"token": "comment", "foreground": "6a8a9a", "fontStyle": "italic"}
    assert "fontStyle" not in definition.rules[1]


def test_chrome_defaults_fill_missing_fields():
    definition = build_editor_theme({"background": "#282a36"})
    assert definition.base == "vs-dark"
    assert definition.inherit is True
    assert definition.colors["editor.background"] == "#282a36"
    assert definition.colors["editor.foreground"] == "#e0f0ff"
    assert definition.colors["editor.selectionBackground"] == "#88c9ea40"
    assert definition.colors["scrollbarSlider.activeBackground"] == "#88c9ea80"
    assert len(definition.colors) == 10


def test_inherit_only_false_when_explicit():
    assert build_editor_theme({"inherit": False}).inherit is False
    assert build_editor_theme({"inherit": None}).inherit is True
    assert build_editor_theme(None).rules == []


def test_to_dict_shape():
    data = build_editor_theme({"base": "vs", "syntax": {"string": {"color": "a3d9a5"}}}).to_dict()
    assert data["base"] == "vs"
    assert data["rules"] == [{"token": "string", "foreground": "a3d9a5"}]


def test_missing_host_logs_warning_and_returns_false(caplog):
    theme = normalize_theme({"id": "t", "name": "T"})
    with caplog.at_level(logging.WARNING, logger="theme_engine.design.editor_syntax"):
        assert define_editor_theme(None, theme) is False
        assert activate_editor_theme(None, "t") is False
    assert "not ready" in caplog.text


def test_activation_updates_every_open_editor():
    editors = [RecordingEditor(), RecordingEditor()]
    host = RecordingEditorHost(editors)
    theme = normalize_theme({"id": "t", "name": "T"})
    assert define_editor_theme(host, theme)
    assert activate_editor_theme(host, "t")
    assert host.active == "t"
    assert [e.theme for e in editors] == ["t", "t"]


def test_one_failing_editor_does_not_block_others(caplog):
    good = RecordingEditor()
    host = RecordingEditorHost([RecordingEditor(fail=True), good])
    define_editor_theme(host, normalize_theme({"id": "t", "name": "T"}))
    with caplog.at_level(logging.WARNING):
        assert activate_editor_theme(host, "t") is True
    assert good.theme == "t"
    assert "editor disposed" in caplog.text


def test_host_rejection_is_contained():
    host = RecordingEditorHost()
    assert activate_editor_theme(host, "never-defined") is False
