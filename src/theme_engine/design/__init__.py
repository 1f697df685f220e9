"""Design layer: tokens, color math, theme records and their translation
into style variables and editor themes. Pure Python, no Qt imports.
"""

from .tokens import TOKENS, TokenRegistry, TokenDefinition, TokenType, INHERITANCE  # noqa: F401
from .color_derivation import (  # noqa: F401
    RGB,
    parse_hex,
    to_hex,
    lighten,
    darken,
    desaturate,
    to_alpha,
)
from .color_groups import (  # noqa: F401
    ColorGroup,
    GROUPS,
    get_group,
    group_ids,
    group_members,
    group_for_key,
    derive_group_colors,
    derive_palette,
)
from .theme_model import (  # noqa: F401
    Theme,
    ThemeShapeError,
    normalize_theme,
    slugify_theme_name,
)
from .apply_engine import apply_to_scope, apply_syntax_variables, format_token_value  # noqa: F401
from .style_scope import StyleScope, InMemoryStyleScope  # noqa: F401
from .editor_syntax import (  # noqa: F401
    EditorThemeDefinition,
    EditorThemingHost,
    build_editor_theme,
    define_editor_theme,
    activate_editor_theme,
)
from .validator import ValidationResult, validate_theme_document  # noqa: F401
from .background import BackgroundReference, BackgroundKind, classify_background  # noqa: F401
from .builtin_themes import BUILTIN_THEME_IDS, DEFAULT_THEME_ID  # noqa: F401
