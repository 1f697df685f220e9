"""Shipped builtin themes.

Seed definitions are registered synchronously at startup so the first frame is
themed. Richer documents with the same ids live in ``themes/<id>.json`` and
are registered later by `services.theme_warm_loader.BuiltinThemeLoader`,
superseding the seeds in place.
"""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any, Dict, List

__all__ = [
    "BUILTIN_THEME_IDS",
    "DEFAULT_THEME_ID",
    "THEMES_DIR",
    "builtin_seed",
    "builtin_seeds",
    "builtin_document_path",
    "load_builtin_document",
]

THEMES_DIR = Path(__file__).parent / "themes"

BUILTIN_THEME_IDS: tuple[str, ...] = (
    "kawaii-dark",
    "kawaii-light",
    "sakura",
    "dracula",
    "monokai",
    "nord",
)

DEFAULT_THEME_ID = "kawaii-dark"

_KAWAII_SYNTAX = {
    "comment": {"color": "6a8a9a", "fontStyle": "italic"},
    "keyword": {"color": "88c9ea"},
    "string": {"color": "a3d9a5"},
    "number": {"color": "ebcb8b"},
    "type": {"color": "e8a8b8"},
    "function": {"color": "7ec8e3"},
    "variable": {"color": "9cdcfe"},
    "operator": {"color": "e0f0ff"},
    "bracket": {"color": "ffd700"},
}


def _shadows(rgb: str, soft: float, card: float, glow_rgb: str, glow: float) -> Dict[str, str]:
    return {
        "shadowSoft": f"0 8px 32px rgba({rgb}, {soft})",
        "shadowCard": f"0 4px 12px rgba({rgb}, {card})",
        "glow": f"0 0 15px rgba({glow_rgb}, {glow})",
    }


_SEEDS: Dict[str, Dict[str, Any]] = {
    "kawaii-dark": {
        "meta": {"id": "kawaii-dark", "name": "Kawaii Dark", "type": "dark"},
        "colors": {
            "appBackground": "assets/backgrounds/darkblue.webm",
            "bgOceanLight": "#1a3a50",
            "bgOceanMedium": "#152535",
            "bgOceanDeep": "#88c9ea",
            "bgOceanDark": "#0d1a25",
            "bgGlass": "rgba(26, 37, 48, 0.95)",
            "bgGlassHeavy": "rgba(21, 37, 53, 0.97)",
            "bgGlassBorder": "rgba(58, 96, 117, 0.8)",
            "accent": "#88c9ea",
            "accentHover": "#5eb7e0",
            "textPrimary": "#e0f0ff",
            "textSecondary": "#a0c0d0",
            "textMuted": "#7990a0",
            "success": "#7dcea0",
            "error": "#ff6b6b",
            "warning": "#fcd5ce",
            "border": "#3a6075",
            "borderStrong": "#88c9ea",
            **_shadows("0, 0, 0", 0.4, 0.3, "136, 201, 234", 0.4),
            "bgHeader": "rgba(21, 37, 53, 0.4)",
            "bgPanel": "rgba(26, 37, 48, 0.95)",
            "bgInput": "#1a2a3a",
            "bgButton": "#243040",
            "bgButtonHover": "#3a5060",
            "editorBg": "#1a2530",
            "terminalBg": "#152535",
            "settingsLabelColor": "#a0c0d0",
            "settingsSectionColor": "#88c9ea",
            "buttonTextOnAccent": "#ffffff",
            "btnBg": "rgba(255, 255, 255, 0.1)",
            "btnBgHover": "rgba(255, 255, 255, 0.15)",
            "btnBorder": "#3a6075",
            "btnText": "#e0f0ff",
            "btnTextHover": "#88c9ea",
            "btnPrimaryBg": "#88c9ea",
            "btnPrimaryBgHover": "#5eb7e0",
            "btnPrimaryText": "#ffffff",
        },
        "editor": {
            "base": "vs-dark",
            "inherit": True,
            "background": "#1a2530",
            "foreground": "#e0f0ff",
            "syntax": _KAWAII_SYNTAX,
        },
    },
    "kawaii-light": {
        "meta": {"id": "kawaii-light", "name": "Kawaii Light", "type": "light"},
        "colors": {
            "appBackground": "assets/backgrounds/background.jpg",
            "bgOceanLight": "#e8f4fc",
            "bgOceanMedium": "#d0e8f5",
            "bgOceanDeep": "#4a9bc9",
            "bgOceanDark": "#2a7ab0",
            "bgGlass": "rgba(232, 244, 252, 0.95)",
            "bgGlassHeavy": "rgba(208, 232, 245, 0.97)",
            "bgGlassBorder": "rgba(74, 155, 201, 0.5)",
            "accent": "#4a9bc9",
            "accentHover": "#3a8ab8",
            "textPrimary": "#2a4a5a",
            "textSecondary": "#4a6a7a",
            "textMuted": "#7a9aaa",
            "success": "#5dbe8a",
            "error": "#e55a5a",
            "warning": "#e5a05a",
            "border": "#a0c8e0",
            "borderStrong": "#4a9bc9",
            **_shadows("74, 155, 201", 0.2, 0.15, "74, 155, 201", 0.3),
            "bgHeader": "rgba(208, 232, 245, 0.4)",
            "bgPanel": "rgba(232, 244, 252, 0.95)",
            "bgInput": "#ffffff",
            "bgButton": "#e8f4fc",
            "bgButtonHover": "#d0e8f5",
            "editorBg": "#1a2530",
            "terminalBg": "#152535",
            "settingsLabelColor": "#4a6a7a",
            "settingsSectionColor": "#4a9bc9",
            "buttonTextOnAccent": "#ffffff",
            "btnBg": "#ffffff",
            "btnBgHover": "#e8f4fc",
            "btnBorder": "#a0c8e0",
            "btnText": "#2a4a5a",
            "btnTextHover": "#4a9bc9",
            "btnPrimaryBg": "#4a9bc9",
            "btnPrimaryBgHover": "#3a8ab8",
            "btnPrimaryText": "#ffffff",
        },
        "editor": {
            "base": "vs-dark",
            "inherit": True,
            "background": "#1a2530",
            "foreground": "#e0f0ff",
            "syntax": _KAWAII_SYNTAX,
        },
    },
    "sakura": {
        "meta": {"id": "sakura", "name": "Sakura", "type": "light"},
        "colors": {
            "appBackground": "assets/backgrounds/pink.webm",
            "bgOceanLight": "#fff5f8",
            "bgOceanMedium": "#ffe4e1",
            "bgOceanDeep": "#ffb7c5",
            "bgOceanDark": "#e097a8",
            "bgGlass": "rgba(255, 245, 250, 0.92)",
            "bgGlassHeavy": "rgba(255, 228, 225, 0.97)",
            "bgGlassBorder": "rgba(255, 182, 193, 0.6)",
            "accent": "#ff9aaf",
            "accentHover": "#ff758f",
            "textPrimary": "#5d4a4d",
            "textSecondary": "#8b5f65",
            "textMuted": "#bc8f8f",
            "success": "#b8e2b8",
            "error": "#ffb3b3",
            "warning": "#fff9c4",
            "border": "#ffcad4",
            "borderStrong": "#ffb7c5",
            "shadowSoft": "0 8px 32px rgba(255, 182, 193, 0.25)",
            "shadowCard": "0 4px 12px rgba(255, 105, 180, 0.15)",
            "glow": "0 0 15px rgba(255, 182, 193, 0.4)",
            "bgHeader": "rgba(255, 228, 225, 0.4)",
            "bgPanel": "rgba(255, 245, 248, 0.95)",
            "bgInput": "#fffafa",
            "bgButton": "#fff0f5",
            "bgButtonHover": "#ffe4e1",
            "editorBg": "#2d1f2f",
            "terminalBg": "#251a26",
            "settingsLabelColor": "#8b5f65",
            "settingsSectionColor": "#ff9aaf",
            "buttonTextOnAccent": "#ffffff",
            "btnBg": "#fff0f5",
            "btnBgHover": "#ffe4e1",
            "btnBorder": "#ffcad4",
            "btnText": "#5d4a4d",
            "btnTextHover": "#ff9aaf",
            "btnPrimaryBg": "#ff9aaf",
            "btnPrimaryBgHover": "#ff758f",
            "btnPrimaryText": "#ffffff",
        },
        "editor": {
            "base": "vs-dark",
            "inherit": True,
            "background": "#2d1f2f",
            "foreground": "#f8e8f0",
            "lineHighlight": "#3d2a3f",
            "selection": "#5d3a5f",
            "cursor": "#ff69b4",
            "lineNumber": "#6d5060",
            "lineNumberActive": "#ff69b4",
            "syntax": {
                "comment": {"color": "8b7080", "fontStyle": "italic"},
                "keyword": {"color": "ff69b4"},
                "string": {"color": "98d998"},
                "number": {"color": "da75e3"},
                "type": {"color": "ffb7c5", "fontStyle": "italic"},
                "function": {"color": "ffb07a"},
                "variable": {"color": "f8e8f0"},
                "operator": {"color": "ff69b4"},
            },
        },
    },
    "dracula": {
        "meta": {"id": "dracula", "name": "Dracula", "type": "dark"},
        "colors": {
            "appBackground": "assets/backgrounds/dracula.webm",
            "bgOceanLight": "#44475a",
            "bgOceanMedium": "#383a59",
            "bgOceanDeep": "#bd93f9",
            "bgOceanDark": "#21222c",
            "bgGlass": "rgba(40, 42, 54, 0.95)",
            "bgGlassHeavy": "rgba(33, 34, 44, 0.97)",
            "bgGlassBorder": "rgba(68, 71, 90, 0.9)",
            "accent": "#ff79c6",
            "accentHover": "#ff92d0",
            "textPrimary": "#f8f8f2",
            "textSecondary": "#bd93f9",
            "textMuted": "#6272a4",
            "success": "#50fa7b",
            "error": "#ff5555",
            "warning": "#ffb86c",
            "border": "#6272a4",
            "borderStrong": "#bd93f9",
            **_shadows("0, 0, 0", 0.5, 0.4, "189, 147, 249", 0.4),
            "bgHeader": "rgba(33, 34, 44, 0.4)",
            "bgPanel": "rgba(40, 42, 54, 0.95)",
            "bgInput": "#282a36",
            "bgButton": "#44475a",
            "bgButtonHover": "#6272a4",
            "editorBg": "#282a36",
            "terminalBg": "#21222c",
            "settingsLabelColor": "#f8f8f2",
            "settingsSectionColor": "#bd93f9",
            "buttonTextOnAccent": "#ffffff",
            "btnBg": "rgba(255, 255, 255, 0.1)",
            "btnBgHover": "rgba(255, 255, 255, 0.15)",
            "btnBorder": "#6272a4",
            "btnText": "#f8f8f2",
            "btnTextHover": "#ff79c6",
            "btnPrimaryBg": "#ff79c6",
            "btnPrimaryBgHover": "#ff92d0",
            "btnPrimaryText": "#ffffff",
        },
        "editor": {
            "base": "vs-dark",
            "inherit": True,
            "background": "#282a36",
            "foreground": "#f8f8f2",
            "syntax": {
                "comment": {"color": "6272a4", "fontStyle": "italic"},
                "keyword": {"color": "ff79c6"},
                "string": {"color": "f1fa8c"},
                "number": {"color": "bd93f9"},
                "type": {"color": "8be9fd", "fontStyle": "italic"},
                "function": {"color": "50fa7b"},
            },
        },
    },
    "monokai": {
        "meta": {"id": "monokai", "name": "Monokai", "type": "dark"},
        "colors": {
            "appBackground": "assets/backgrounds/monokai.webm",
            "bgOceanLight": "#3e3d32",
            "bgOceanMedium": "#272822",
            "bgOceanDeep": "#a6e22e",
            "bgOceanDark": "#1e1f1c",
            "bgGlass": "rgba(39, 40, 34, 0.95)",
            "bgGlassHeavy": "rgba(30, 31, 28, 0.97)",
            "bgGlassBorder": "rgba(62, 61, 50, 0.9)",
            "accent": "#a6e22e",
            "accentHover": "#b8f32e",
            "textPrimary": "#f8f8f2",
            "textSecondary": "#a6e22e",
            "textMuted": "#75715e",
            "success": "#a6e22e",
            "error": "#f92672",
            "warning": "#e6db74",
            "border": "#49483e",
            "borderStrong": "#a6e22e",
            **_shadows("0, 0, 0", 0.5, 0.4, "166, 226, 46", 0.4),
            "bgHeader": "rgba(30, 31, 28, 0.4)",
            "bgPanel": "rgba(39, 40, 34, 0.95)",
            "bgInput": "#272822",
            "bgButton": "#3e3d32",
            "bgButtonHover": "#49483e",
            "editorBg": "#272822",
            "terminalBg": "#1e1f1c",
            "settingsLabelColor": "#f8f8f2",
            "settingsSectionColor": "#a6e22e",
            "buttonTextOnAccent": "#272822",
            "btnBg": "rgba(255, 255, 255, 0.08)",
            "btnBgHover": "rgba(255, 255, 255, 0.12)",
            "btnBorder": "#49483e",
            "btnText": "#f8f8f2",
            "btnTextHover": "#a6e22e",
            "btnPrimaryBg": "#a6e22e",
            "btnPrimaryBgHover": "#b8f32e",
            "btnPrimaryText": "#272822",
        },
        "editor": {
            "base": "vs-dark",
            "inherit": True,
            "background": "#272822",
            "foreground": "#f8f8f2",
            "syntax": {
                "comment": {"color": "75715e", "fontStyle": "italic"},
                "keyword": {"color": "f92672"},
                "string": {"color": "e6db74"},
                "number": {"color": "ae81ff"},
                "type": {"color": "66d9ef", "fontStyle": "italic"},
                "function": {"color": "a6e22e"},
            },
        },
    },
    "nord": {
        "meta": {"id": "nord", "name": "Nord", "type": "dark"},
        "colors": {
            "appBackground": "assets/backgrounds/nord.webm",
            "bgOceanLight": "#3b4252",
            "bgOceanMedium": "#2e3440",
            "bgOceanDeep": "#88c0d0",
            "bgOceanDark": "#242933",
            "bgGlass": "rgba(46, 52, 64, 0.95)",
            "bgGlassHeavy": "rgba(36, 41, 51, 0.97)",
            "bgGlassBorder": "rgba(59, 66, 82, 0.9)",
            "accent": "#88c0d0",
            "accentHover": "#8fbcbb",
            "textPrimary": "#eceff4",
            "textSecondary": "#d8dee9",
            "textMuted": "#616e88",
            "success": "#a3be8c",
            "error": "#bf616a",
            "warning": "#ebcb8b",
            "border": "#4c566a",
            "borderStrong": "#88c0d0",
            **_shadows("0, 0, 0", 0.4, 0.3, "136, 192, 208", 0.3),
            "bgHeader": "rgba(36, 41, 51, 0.4)",
            "bgPanel": "rgba(46, 52, 64, 0.95)",
            "bgInput": "#2e3440",
            "bgButton": "#3b4252",
            "bgButtonHover": "#4c566a",
            "editorBg": "#2e3440",
            "terminalBg": "#242933",
            "settingsLabelColor": "#d8dee9",
            "settingsSectionColor": "#88c0d0",
            "buttonTextOnAccent": "#2e3440",
            "btnBg": "rgba(255, 255, 255, 0.08)",
            "btnBgHover": "rgba(255, 255, 255, 0.12)",
            "btnBorder": "#4c566a",
            "btnText": "#eceff4",
            "btnTextHover": "#88c0d0",
            "btnPrimaryBg": "#88c0d0",
            "btnPrimaryBgHover": "#8fbcbb",
            "btnPrimaryText": "#2e3440",
        },
        "editor": {
            "base": "vs-dark",
            "inherit": True,
            "background": "#2e3440",
            "foreground": "#eceff4",
            "syntax": {
                "comment": {"color": "616e88", "fontStyle": "italic"},
                "keyword": {"color": "81a1c1"},
                "string": {"color": "a3be8c"},
                "number": {"color": "b48ead"},
                "type": {"color": "8fbcbb"},
                "function": {"color": "88c0d0"},
            },
        },
    },
}


def builtin_seed(theme_id: str) -> Dict[str, Any] | None:
    """Return a deep copy of the seed document for ``theme_id`` (None if not builtin)."""
    seed = _SEEDS.get(theme_id)
    return copy.deepcopy(seed) if seed is not None else None


def builtin_seeds() -> List[Dict[str, Any]]:
    return [copy.deepcopy(_SEEDS[i]) for i in BUILTIN_THEME_IDS]


def builtin_document_path(theme_id: str, themes_dir: Path | None = None) -> Path:
    return Path(themes_dir or THEMES_DIR) / f"{theme_id}.json"


def load_builtin_document(theme_id: str, themes_dir: Path | None = None) -> Dict[str, Any]:
    """Read the shipped JSON document for ``theme_id``.

    Raises OSError / ValueError on missing or malformed files; the warm loader
    logs these per id.
    """
    path = builtin_document_path(theme_id, themes_dir)
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{path.name}: theme document must be an object")
    return data
