"""Color groups: expand one base color into a set of dependent tokens.

Instead of asking theme authors for 40+ individual colors, the customizer
exposes seven groups. Changing a group's base color derives every member via
fixed rules from `color_derivation`. The percentages below are part of the
shipped look (previews and regression snapshots depend on them); they are not
tuning knobs.

Groups without a base key (status, syntax) have one picker per member and
derive nothing.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Dict, List, Mapping, Optional, Tuple

from .color_derivation import darken, desaturate, lighten, to_alpha

__all__ = [
    "ColorGroup",
    "GROUPS",
    "get_group",
    "group_ids",
    "group_members",
    "group_for_key",
    "derive_group_colors",
    "derive_palette",
]


@dataclass(frozen=True)
class ColorGroup:
    id: str
    label: str
    description: str
    base_key: Optional[str]
    members: Tuple[str, ...]


GROUPS: Mapping[str, ColorGroup] = MappingProxyType(
    {
        "background": ColorGroup(
            "background",
            "Background",
            "Main app background - darkest layer",
            "bgBase",
            ("bgOceanDark", "editorBg", "bgInput", "terminalBg", "bgOceanMedium"),
        ),
        "surface": ColorGroup(
            "surface",
            "Surface",
            "Panels, headers, cards - slightly lighter",
            "bgSurface",
            (
                "bgPanel",
                "bgHeader",
                "bgGlass",
                "bgGlassHeavy",
                "bgButton",
                "bgButtonHover",
                "bgOceanLight",
            ),
        ),
        "accent": ColorGroup(
            "accent",
            "Accent",
            "Brand color - buttons, links, highlights",
            "accent",
            ("accent", "accentHover", "bgOceanDeep", "borderStrong"),
        ),
        "text": ColorGroup(
            "text",
            "Text",
            "Text colors - auto 3 levels",
            "textPrimary",
            ("textPrimary", "textSecondary", "textMuted", "settingsLabelColor"),
        ),
        "border": ColorGroup(
            "border",
            "Border",
            "Borders and separators",
            "border",
            ("border", "bgGlassBorder"),
        ),
        "status": ColorGroup(
            "status",
            "Status",
            "Success, error, warning colors",
            None,
            ("success", "error", "warning"),
        ),
        "syntax": ColorGroup(
            "syntax",
            "Syntax",
            "Code syntax highlighting",
            None,
            (
                "syntaxKeyword",
                "syntaxString",
                "syntaxNumber",
                "syntaxType",
                "syntaxFunction",
                "syntaxComment",
                "syntaxOperator",
                "syntaxBracket",
            ),
        ),
    }
)


# Derivation rules ----------------------------------------------------------
def _background(base: str) -> Dict[str, str]:
    return {
        "bgBase": base,
        "bgOceanDark": base,
        "editorBg": base,
        "bgInput": lighten(base, 5),
        "terminalBg": lighten(base, 3),
        "bgOceanMedium": lighten(base, 8),
    }


def _surface(base: str) -> Dict[str, str]:
    return {
        "bgSurface": base,
        "bgPanel": to_alpha(base, 0.95),
        "bgHeader": to_alpha(darken(base, 10), 0.97),
        "bgGlass": to_alpha(base, 0.92),
        "bgGlassHeavy": to_alpha(base, 0.97),
        "bgButton": lighten(base, 10),
        "bgButtonHover": lighten(base, 20),
        "bgOceanLight": lighten(base, 15),
    }


def _accent(base: str) -> Dict[str, str]:
    return {
        "accent": base,
        "accentHover": lighten(base, 15),
        "bgOceanDeep": base,
        "borderStrong": base,
        "settingsSectionColor": base,
    }


def _text(base: str) -> Dict[str, str]:
    return {
        "textPrimary": base,
        "textSecondary": desaturate(darken(base, 20), 20),
        "textMuted": desaturate(darken(base, 40), 30),
        "settingsLabelColor": base,
    }


def _border(base: str) -> Dict[str, str]:
    return {
        "border": base,
        "bgGlassBorder": to_alpha(base, 0.9),
    }


_RULES: Mapping[str, Callable[[str], Dict[str, str]]] = MappingProxyType(
    {
        "background": _background,
        "surface": _surface,
        "accent": _accent,
        "text": _text,
        "border": _border,
    }
)


# Public API ---------------------------------------------------------------
def get_group(group_id: str) -> ColorGroup | None:
    return GROUPS.get(group_id)


def group_ids() -> List[str]:
    return list(GROUPS.keys())


def group_members(group_id: str) -> Tuple[str, ...]:
    group = GROUPS.get(group_id)
    return group.members if group else ()


def group_for_key(key: str) -> str | None:
    """Return the id of the first group listing ``key`` as a member."""
    for group_id, group in GROUPS.items():
        if key in group.members:
            return group_id
    return None


def derive_group_colors(group_id: str, base_color: str) -> Dict[str, str]:
    """Derive every dependent token value of ``group_id`` from ``base_color``.

    Unknown groups and groups without a base key yield an empty mapping.
    """
    rule = _RULES.get(group_id)
    if rule is None:
        return {}
    return rule(base_color)


def derive_palette(bases: Mapping[str, str]) -> Dict[str, str]:
    """Merge the derivations of several groups (``group_id -> base color``).

    Later groups win on key collisions, in the iteration order of ``bases``.
    """
    palette: Dict[str, str] = {}
    for group_id, base in bases.items():
        palette.update(derive_group_colors(group_id, base))
    return palette
