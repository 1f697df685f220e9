from PyQt6.QtCore import QObject
from PyQt6.QtWidgets import QWidget

from theme_engine.design.apply_engine import apply_to_scope
from theme_engine.design.style_scope import StyleScope
from theme_engine.services.qt_style_scope import QObjectStyleScope


def test_set_and_remove_dynamic_properties(qt_app):
    target = QObject()
    scope = QObjectStyleScope(target)
    assert isinstance(scope, StyleScope)
    scope.set_variable("--accent", "#ff0000")
    assert target.property("--accent") == "#ff0000"
    assert scope.get_variable("--accent") == "#ff0000"
    scope.remove_variable("--accent")
    assert target.property("--accent") is None
    assert scope.names() == set()


def test_widget_target_with_apply_engine(qt_app):
    widget = QWidget()
    scope = QObjectStyleScope(widget)
    apply_to_scope(scope, {"accent": "#00ff00", "bgHeader": "#111111"})
    assert widget.property("--accent") == "#00ff00"
    assert widget.property("--bg-header-main") == "#111111"
    apply_to_scope(scope, {"accent": "#0000ff"}, clear_first=True)
    assert widget.property("--bg-header-main") is None
    assert "--accent" in scope.names()
