"""Type-directed application of theme token values onto a style scope.

Both activation (ThemeStore) and live previews go through `apply_to_scope`
so a value is transformed the same way wherever it is shown:

 - color / raw: set verbatim
 - opacity: 0-100 input -> 0-1 decimal string
 - blur: integer + ``px``
 - position: value or ``center center``
 - image: wrapped in ``url(...)``; embedded data uses double quotes, file
   paths single quotes with embedded ``'`` escaped; falsy -> ``none``

After direct application, inheritance pairs fill every unset variant token
from its parent so variants never render without a value.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Any, Iterable, Mapping, Optional

from .color_derivation import format_decimal
from .style_scope import StyleScope
from .tokens import TOKENS, TokenRegistry, TokenType

__all__ = [
    "DEFAULT_POSITION",
    "SYNTAX_ROLES",
    "format_token_value",
    "format_image_reference",
    "apply_value",
    "apply_to_scope",
    "clear_scope",
    "apply_syntax_variables",
]

_logger = logging.getLogger(__name__)

DEFAULT_POSITION = "center center"

SYNTAX_ROLES: tuple[str, ...] = (
    "keyword",
    "string",
    "number",
    "type",
    "function",
    "comment",
    "operator",
    "bracket",
)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_LEADING_FLOAT = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _parse_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, (int, float)):
        return int(value)
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else None


def _parse_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    else:
        match = _LEADING_FLOAT.match(str(value))
        if not match:
            return None
        number = float(match.group(1))
    return number if math.isfinite(number) else None


def format_image_reference(value: Any) -> str:
    if not value or value == "none":
        return "none"
    text = str(value)
    if text.startswith("url("):
        return text
    if text.startswith("data:"):
        return f'url("{text}")'
    escaped = text.replace("'", "\\'")
    return f"url('{escaped}')"


def format_token_value(token_type: TokenType, value: Any) -> Optional[str]:
    """Transform a raw theme value into its style-variable form.

    Returns None when the value cannot be represented (e.g. a non-numeric
    opacity); callers skip such values.
    """
    if token_type is TokenType.IMAGE:
        return format_image_reference(value)
    if token_type is TokenType.OPACITY:
        number = _parse_float(value)
        return None if number is None else format_decimal(number / 100)
    if token_type is TokenType.BLUR:
        number = _parse_int(value)
        return None if number is None else f"{number}px"
    if token_type is TokenType.POSITION:
        return str(value) if value else DEFAULT_POSITION
    return str(value)


def apply_value(
    scope: StyleScope, key: str, value: Any, registry: TokenRegistry = TOKENS
) -> bool:
    """Apply a single token value. Unknown keys and None values are ignored."""
    if value is None:
        return False
    definition = registry.get(key)
    if definition is None:
        return False
    formatted = format_token_value(definition.type, value)
    if formatted is None:
        _logger.warning("skipping token %s: cannot format %r as %s", key, value, definition.type.value)
        return False
    scope.set_variable(definition.css_var, formatted)
    return True


def clear_scope(scope: StyleScope, registry: TokenRegistry = TOKENS) -> None:
    for definition in registry.definitions():
        scope.remove_variable(definition.css_var)


def apply_to_scope(
    scope: StyleScope,
    colors: Mapping[str, Any] | None,
    *,
    clear_first: bool = False,
    registry: TokenRegistry = TOKENS,
) -> int:
    """Apply a theme's colors block to ``scope``.

    Parameters
    ----------
    scope : StyleScope
        Target exposing set/remove variable operations.
    colors : Mapping[str, Any]
        Token key -> raw value. Keys missing from the registry are ignored.
    clear_first : bool
        Remove every known token variable before applying, so a token the new
        theme omits does not keep the previous theme's value.

    Returns
    -------
    int
        Number of variables written (inherited values included).
    """
    if scope is None or colors is None:
        return 0
    if clear_first:
        clear_scope(scope, registry)
    written = 0
    for key, value in colors.items():
        if apply_value(scope, key, value, registry):
            written += 1
    for child, parent in registry.inheritance().items():
        if colors.get(child) is None and colors.get(parent):
            if apply_value(scope, child, colors[parent], registry):
                written += 1
    return written


def apply_syntax_variables(
    scope: StyleScope,
    syntax: Mapping[str, Any] | None,
    roles: Iterable[str] = SYNTAX_ROLES,
) -> int:
    """Mirror editor syntax colors onto ``--syntax-<role>`` variables."""
    if scope is None or not syntax:
        return 0
    written = 0
    for role in roles:
        data = syntax.get(role)
        if not isinstance(data, Mapping):
            continue
        color = data.get("color")
        if not color:
            continue
        color = str(color)
        scope.set_variable(f"--syntax-{role}", color if color.startswith("#") else "#" + color)
        written += 1
    return written
