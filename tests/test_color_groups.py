"""Group derivation constants."""

from theme_engine.design.color_groups import (
    derive_group_colors,
    derive_palette,
    get_group,
    group_for_key,
    group_ids,
    group_members,
)


def test_text_group_from_black_is_fixed():
    derived = derive_group_colors("text", "#000000")
    assert derived["textPrimary"] == "#000000"
    assert derived["textSecondary"] == "#000000"
    assert derived["textMuted"] == "#000000"
    assert derived["settingsLabelColor"] == "#000000"


def test_text_group_from_white():
    derived = derive_group_colors("text", "#ffffff")
    assert derived["textSecondary"] == "#cccccc"
    assert derived["textMuted"] == "#999999"


def test_background_group_percentages():
    derived = derive_group_colors("background", "#000000")
    assert derived == {
        "bgBase": "#000000",
        "bgOceanDark": "#000000",
        "editorBg": "#000000",
        "bgInput": "#0d0d0d",
        "terminalBg": "#080808",
        "bgOceanMedium": "#141414",
    }


def test_surface_group_alpha_and_lighten():
    derived = derive_group_colors("surface", "#000000")
    assert derived["bgPanel"] == "rgba(0, 0, 0, 0.95)"
    assert derived["bgHeader"] == "rgba(0, 0, 0, 0.97)"
    assert derived["bgGlass"] == "rgba(0, 0, 0, 0.92)"
    assert derived["bgGlassHeavy"] == "rgba(0, 0, 0, 0.97)"
    assert derived["bgButton"] == "#1a1a1a"
    assert derived["bgButtonHover"] == "#333333"
    assert derived["bgOceanLight"] == "#262626"


def test_accent_and_border_groups():
    accent = derive_group_colors("accent", "#ff0000")
    assert accent["accentHover"] == "#ff2626"
    assert accent["bgOceanDeep"] == accent["borderStrong"] == accent["settingsSectionColor"] == "#ff0000"
    border = derive_group_colors("border", "#3a6075")
    assert border == {"border": "#3a6075", "bgGlassBorder": "rgba(58, 96, 117, 0.9)"}


def test_groups_without_rules_derive_nothing():
    assert derive_group_colors("status", "#ff0000") == {}
    assert derive_group_colors("syntax", "#ff0000") == {}
    assert derive_group_colors("unknown", "#ff0000") == {}


def test_group_lookups():
    assert group_ids()[:2] == ["background", "surface"]
    assert get_group("status").base_key is None
    assert "textMuted" in group_members("text")
    assert group_members("nope") == ()
    assert group_for_key("bgGlassBorder") == "border"
    assert group_for_key("nope") is None


def test_derive_palette_merges_groups():
    palette = derive_palette({"background": "#000000", "text": "#ffffff"})
    assert palette["bgInput"] == "#0d0d0d"
    assert palette["textSecondary"] == "#cccccc"
