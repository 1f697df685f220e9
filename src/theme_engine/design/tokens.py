"""Theme token registry.

Single source of truth mapping semantic token keys (as they appear in a
theme's ``colors`` block) to style variable names and value types. The apply
engine, color groups and the validator all resolve keys through this table so
preview, save and apply never drift apart.

Each definition carries:
 - css_var: the style variable written onto a style scope
 - type: color | opacity | blur | image | position | raw
 - group: optional color-group id (used by pickers and derivation)

The tables are frozen at import time; lookups are safe for unsynchronized
concurrent reads.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional

__all__ = [
    "TokenType",
    "TokenDefinition",
    "TokenRegistry",
    "TOKENS",
    "INHERITANCE",
]


class TokenType(str, Enum):
    COLOR = "color"
    OPACITY = "opacity"
    BLUR = "blur"
    IMAGE = "image"
    POSITION = "position"
    RAW = "raw"


@dataclass(frozen=True)
class TokenDefinition:
    key: str
    css_var: str
    type: TokenType
    group: Optional[str] = None


def _d(key: str, css_var: str, type_: TokenType = TokenType.COLOR, group: str | None = None):
    return key, TokenDefinition(key=key, css_var=css_var, type=type_, group=group)


_C = TokenType.COLOR

_DEFINITIONS: Dict[str, TokenDefinition] = dict(
    [
        # Background ------------------------------------------------------
        _d("bgBase", "--bg-base", _C, "background"),
        _d("bgOceanDark", "--bg-ocean-dark", _C, "background"),
        _d("bgOceanMedium", "--bg-ocean-medium", _C, "background"),
        _d("editorBg", "--editor-bg", _C, "background"),
        _d("bgInput", "--bg-input", _C, "background"),
        _d("terminalBg", "--terminal-bg", _C, "background"),
        # Surface ---------------------------------------------------------
        _d("bgSurface", "--bg-surface", _C, "surface"),
        _d("bgOceanLight", "--bg-ocean-light", _C, "surface"),
        _d("bgPanel", "--bg-panel", _C, "surface"),
        _d("bgPanel-problems", "--bg-panel-problems", _C, "surface"),
        _d("bgPanel-input", "--bg-panel-input", _C, "surface"),
        _d("bgPanel-expected", "--bg-panel-expected", _C, "surface"),
        _d("bgHeader", "--bg-header", _C, "surface"),
        _d("bgHeader-main", "--bg-header-main", _C, "surface"),
        _d("bgHeader-statusbar", "--bg-header-statusbar", _C, "surface"),
        _d("bgGlass", "--bg-glass", _C, "surface"),
        _d("bgGlassHeavy", "--bg-glass-heavy", _C, "surface"),
        _d("bgButton", "--bg-button", _C, "surface"),
        _d("bgButtonHover", "--bg-button-hover", _C, "surface"),
        # Accent ----------------------------------------------------------
        _d("accent", "--accent", _C, "accent"),
        _d("accentHover", "--accent-hover", _C, "accent"),
        _d("bgOceanDeep", "--bg-ocean-deep", _C, "accent"),
        _d("borderStrong", "--border-strong", _C, "accent"),
        # Text ------------------------------------------------------------
        _d("textPrimary", "--text-primary", _C, "text"),
        _d("textSecondary", "--text-secondary", _C, "text"),
        _d("textMuted", "--text-muted", _C, "text"),
        _d("settingsLabelColor", "--settings-label-color", _C, "text"),
        _d("settingsSectionColor", "--settings-section-color", _C, "text"),
        _d("buttonTextOnAccent", "--button-text-on-accent", _C, "text"),
        # Border ----------------------------------------------------------
        _d("border", "--border", _C, "border"),
        _d("bgGlassBorder", "--bg-glass-border", _C, "border"),
        # Status ----------------------------------------------------------
        _d("success", "--success", _C, "status"),
        _d("error", "--error", _C, "status"),
        _d("warning", "--warning", _C, "status"),
        # Shadow / effects ------------------------------------------------
        _d("shadowSoft", "--shadow-soft", TokenType.RAW),
        _d("shadowCard", "--shadow-card", TokenType.RAW),
        _d("glow", "--glow", TokenType.RAW),
        # Buttons ---------------------------------------------------------
        _d("btnBg", "--btn-bg", _C, "button"),
        _d("btnBgHover", "--btn-bg-hover", _C, "button"),
        _d("btnBorder", "--btn-border", _C, "button"),
        _d("btnText", "--btn-text", _C, "button"),
        _d("btnTextHover", "--btn-text-hover", _C, "button"),
        _d("btnPrimaryBg", "--btn-primary-bg", _C, "button"),
        _d("btnPrimaryBgHover", "--btn-primary-bg-hover", _C, "button"),
        _d("btnPrimaryText", "--btn-primary-text", _C, "button"),
        _d("btnSuccessBg", "--btn-success-bg", _C, "button"),
        _d("btnSuccessText", "--btn-success-text", _C, "button"),
        _d("btnErrorBg", "--btn-error-bg", _C, "button"),
        _d("btnErrorText", "--btn-error-text", _C, "button"),
        # Background media ------------------------------------------------
        _d("appBackground", "--app-bg-image", TokenType.IMAGE),
        _d("editorBackground", "--editor-bg-image", TokenType.IMAGE),
        _d("bgPosition", "--app-bg-position", TokenType.POSITION),
        _d("editorBgPosition", "--editor-bg-position", TokenType.POSITION),
        _d("bgOpacity", "--app-bg-opacity", TokenType.OPACITY),
        _d("editorBgOpacity", "--editor-bg-opacity", TokenType.OPACITY),
        _d("terminalOpacity", "--terminal-opacity", TokenType.OPACITY),
        _d("panelOpacity", "--panel-opacity", TokenType.OPACITY),
        _d("bgBlur", "--app-bg-blur", TokenType.BLUR),
        _d("editorBgBlur", "--editor-bg-blur", TokenType.BLUR),
        _d("terminalBgBlur", "--terminal-bg-blur", TokenType.BLUR),
        # Syntax ----------------------------------------------------------
        _d("syntaxKeyword", "--syntax-keyword", _C, "syntax"),
        _d("syntaxString", "--syntax-string", _C, "syntax"),
        _d("syntaxNumber", "--syntax-number", _C, "syntax"),
        _d("syntaxType", "--syntax-type", _C, "syntax"),
        _d("syntaxFunction", "--syntax-function", _C, "syntax"),
        _d("syntaxComment", "--syntax-comment", _C, "syntax"),
        _d("syntaxOperator", "--syntax-operator", _C, "syntax"),
        _d("syntaxBracket", "--syntax-bracket", _C, "syntax"),
    ]
)

# child -> parent: an unset variant falls back to its parent's value
INHERITANCE: Mapping[str, str] = MappingProxyType(
    {
        "bgHeader-main": "bgHeader",
        "bgHeader-statusbar": "bgHeader",
        "bgPanel-problems": "bgPanel",
        "bgPanel-input": "bgPanel",
        "bgPanel-expected": "bgPanel",
    }
)


class TokenRegistry:
    """Read-only view over token definitions and inheritance pairs."""

    def __init__(
        self,
        definitions: Mapping[str, TokenDefinition],
        inheritance: Mapping[str, str] | None = None,
    ) -> None:
        self._definitions: Mapping[str, TokenDefinition] = MappingProxyType(dict(definitions))
        self._inheritance: Mapping[str, str] = MappingProxyType(dict(inheritance or {}))

    # Lookups ------------------------------------------------------------
    def get(self, key: str) -> TokenDefinition | None:
        return self._definitions.get(key)

    def is_known(self, key: str) -> bool:
        return key in self._definitions

    def css_var(self, key: str) -> str | None:
        definition = self._definitions.get(key)
        return definition.css_var if definition else None

    def value_type(self, key: str) -> TokenType:
        definition = self._definitions.get(key)
        return definition.type if definition else TokenType.RAW

    def all_keys(self) -> List[str]:
        return list(self._definitions.keys())

    def keys_by_group(self, group: str) -> List[str]:
        return [k for k, d in self._definitions.items() if d.group == group]

    def keys_by_type(self, *types: TokenType) -> List[str]:
        wanted = set(types)
        return [k for k, d in self._definitions.items() if d.type in wanted]

    def definitions(self) -> Iterable[TokenDefinition]:
        return self._definitions.values()

    def var_mappings(self) -> Dict[str, str]:
        """Return a fresh key -> style variable mapping."""
        return {k: d.css_var for k, d in self._definitions.items()}

    def inheritance(self) -> Mapping[str, str]:
        return self._inheritance

    def __len__(self) -> int:
        return len(self._definitions)

    def __contains__(self, key: object) -> bool:
        return key in self._definitions


TOKENS = TokenRegistry(_DEFINITIONS, INHERITANCE)
