"""Editor syntax theme generation.

Builds the definition handed to the embedded code editor from a theme's
``editor`` block: an ordered token rule list plus a chrome color map.
Missing fields fall back to the Kawaii Dark palette so an editor never renders
with undefined chrome.

The editor host is late-bound. It may not exist yet at registration or
activation time (the editor component loads asynchronously); in that case
`define_editor_theme` / `activate_editor_theme` log a warning and return
False. Nothing is retried automatically: the next register or activate call
pushes the current state again.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Protocol

from .theme_model import Theme

__all__ = [
    "EditorThemeDefinition",
    "EditorInstance",
    "EditorThemingHost",
    "RULE_ROLES",
    "BRACKET_TOKENS",
    "CHROME_DEFAULTS",
    "DEFAULT_EDITOR_BASE",
    "build_rules",
    "build_chrome_colors",
    "build_editor_theme",
    "define_editor_theme",
    "activate_editor_theme",
]

_logger = logging.getLogger(__name__)

DEFAULT_EDITOR_BASE = "vs-dark"

RULE_ROLES: tuple[str, ...] = (
    "comment",
    "keyword",
    "string",
    "number",
    "type",
    "function",
    "variable",
    "operator",
)

BRACKET_TOKENS: tuple[str, ...] = (
    "delimiter.bracket",
    "delimiter.parenthesis",
    "delimiter.curly",
    "delimiter.square",
)

# chrome color key -> (editor block field, fallback)
CHROME_DEFAULTS: Mapping[str, tuple[str, str]] = {
    "editor.background": ("background", "#1a2530"),
    "editor.foreground": ("foreground", "#e0f0ff"),
    "editor.lineHighlightBackground": ("lineHighlight", "#243040"),
    "editor.selectionBackground": ("selection", "#88c9ea40"),
    "editorCursor.foreground": ("cursor", "#88c9ea"),
    "editorLineNumber.foreground": ("lineNumber", "#4a6a7a"),
    "editorLineNumber.activeForeground": ("lineNumberActive", "#88c9ea"),
    "scrollbarSlider.background": ("scrollbar", "#4a6a7a50"),
    "scrollbarSlider.hoverBackground": ("scrollbarHover", "#6a8a9a70"),
    "scrollbarSlider.activeBackground": ("scrollbarActive", "#88c9ea80"),
}


@dataclass
class EditorThemeDefinition:
    base: str = DEFAULT_EDITOR_BASE
    inherit: bool = True
    rules: List[Dict[str, str]] = field(default_factory=list)
    colors: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "base": self.base,
            "inherit": self.inherit,
            "rules": [dict(r) for r in self.rules],
            "colors": dict(self.colors),
        }


class EditorInstance(Protocol):
    def set_theme(self, theme_id: str) -> None: ...  # pragma: no cover


class EditorThemingHost(Protocol):
    def define_theme(self, theme_id: str, definition: EditorThemeDefinition) -> None: ...  # pragma: no cover

    def set_theme(self, theme_id: str) -> None: ...  # pragma: no cover

    def open_editors(self) -> Iterable[EditorInstance]: ...  # pragma: no cover


def _rule(token: str, style: Mapping[str, Any]) -> Optional[Dict[str, str]]:
    color = style.get("color")
    if not color:
        return None
    rule = {"token": token, "foreground": str(color).lstrip("#")}
    font_style = style.get("fontStyle")
    if font_style:
        rule["fontStyle"] = str(font_style)
    return rule


def build_rules(syntax: Mapping[str, Any] | None) -> List[Dict[str, str]]:
    """Return token rules in fixed role order; bracket expands to four delimiter rules."""
    rules: List[Dict[str, str]] = []
    if not syntax:
        return rules
    for role in RULE_ROLES:
        style = syntax.get(role)
        if isinstance(style, Mapping):
            rule = _rule(role, style)
            if rule:
                rules.append(rule)
    bracket = syntax.get("bracket")
    if isinstance(bracket, Mapping):
        for token in BRACKET_TOKENS:
            rule = _rule(token, bracket)
            if rule:
                rules.append(rule)
    return rules


def build_chrome_colors(editor: Mapping[str, Any] | None) -> Dict[str, str]:
    editor = editor or {}
    return {
        key: str(editor.get(source) or fallback)
        for key, (source, fallback) in CHROME_DEFAULTS.items()
    }


def build_editor_theme(editor: Mapping[str, Any] | None) -> EditorThemeDefinition:
    editor = editor or {}
    syntax = editor.get("syntax")
    return EditorThemeDefinition(
        base=str(editor.get("base") or DEFAULT_EDITOR_BASE),
        inherit=editor.get("inherit") is not False,
        rules=build_rules(syntax if isinstance(syntax, Mapping) else None),
        colors=build_chrome_colors(editor),
    )


def define_editor_theme(host: EditorThemingHost | None, theme: Theme) -> bool:
    """Define ``theme`` on the editor host; False if the host is unavailable."""
    if host is None:
        _logger.warning("editor host not ready; theme %s not defined", theme.id)
        return False
    definition = build_editor_theme(theme.editor)
    try:
        host.define_theme(theme.id, definition)
    except Exception as exc:  # noqa: BLE001 - host boundary
        _logger.warning("editor host rejected theme %s: %s", theme.id, exc)
        return False
    return True


def activate_editor_theme(host: EditorThemingHost | None, theme_id: str) -> bool:
    """Activate ``theme_id`` globally and on every open editor instance."""
    if host is None:
        _logger.warning("editor host not ready; theme %s not activated", theme_id)
        return False
    try:
        host.set_theme(theme_id)
        editors = list(host.open_editors())
    except Exception as exc:  # noqa: BLE001 - host boundary
        _logger.warning("editor theme %s not activated: %s", theme_id, exc)
        return False
    for editor in editors:
        try:
            editor.set_theme(theme_id)
        except Exception as exc:  # noqa: BLE001 - one broken editor must not block others
            _logger.warning("failed to update editor instance to %s: %s", theme_id, exc)
    return True
