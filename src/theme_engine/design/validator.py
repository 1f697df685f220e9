"""Structural validation for imported theme documents.

Validation is intentionally lenient: a document only needs an id and a name
(either shape) and object-typed blocks. Unknown color keys are reported as
warnings because the apply engine ignores them anyway.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping

from .theme_model import resolve_theme_id, resolve_theme_name
from .tokens import TOKENS, TokenRegistry

__all__ = ["ValidationResult", "validate_theme_document"]

_BLOCKS: tuple[str, ...] = ("meta", "colors", "editor", "terminal")


@dataclass
class ValidationResult:
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors


def validate_theme_document(data: Any, registry: TokenRegistry = TOKENS) -> ValidationResult:
    result = ValidationResult()
    if not isinstance(data, Mapping):
        result.errors.append("theme document must be an object")
        return result
    for block in _BLOCKS:
        value = data.get(block)
        if value is not None and not isinstance(value, Mapping):
            result.errors.append(f"'{block}' must be an object")
    if not resolve_theme_id(data):
        result.errors.append("missing theme id")
    if not resolve_theme_name(data):
        result.errors.append("missing theme name")
    colors = data.get("colors")
    if isinstance(colors, Mapping):
        for key in colors:
            if not registry.is_known(key):
                result.warnings.append(f"unknown color token '{key}' will be ignored")
    return result
