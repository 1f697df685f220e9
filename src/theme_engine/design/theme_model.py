"""Canonical theme record and document conversion.

Two input shapes reach the registry:

Nested (shipped / exported documents)::

    {"meta": {"id": "nord", "name": "Nord", "type": "dark", ...},
     "colors": {...}, "editor": {...}, "terminal": {...}}

Flat (records persisted by older releases)::

    {"id": "nord", "name": "Nord", "type": "dark", "author": "...",
     "colors": {...}, "editor": {...}, "terminal": {...}}

`normalize_theme` is the single parser for both; anything else raises
`ThemeShapeError` instead of being guessed at. `Theme.to_document` always
produces the nested shape.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping

__all__ = [
    "Theme",
    "ThemeShapeError",
    "THEME_TYPES",
    "DEFAULT_AUTHOR",
    "DEFAULT_VERSION",
    "DEFAULT_NAME",
    "USER_AUTHOR",
    "resolve_theme_id",
    "resolve_theme_name",
    "normalize_theme",
    "slugify_theme_name",
]

_logger = logging.getLogger(__name__)

THEME_TYPES: tuple[str, ...] = ("dark", "light")
DEFAULT_TYPE = "dark"
DEFAULT_AUTHOR = "Unknown"
DEFAULT_VERSION = "1.0.0"
DEFAULT_NAME = "Unnamed Theme"
USER_AUTHOR = "User"


class ThemeShapeError(ValueError):
    """Raised when theme data matches neither the nested nor the flat shape."""


@dataclass
class Theme:
    id: str
    name: str = DEFAULT_NAME
    type: str = DEFAULT_TYPE
    author: str = DEFAULT_AUTHOR
    version: str = DEFAULT_VERSION
    description: str = ""
    tags: List[str] = field(default_factory=list)
    colors: Dict[str, Any] = field(default_factory=dict)
    editor: Dict[str, Any] = field(default_factory=dict)
    terminal: Dict[str, Any] = field(default_factory=dict)

    def to_document(self) -> Dict[str, Any]:
        """Return the nested document shape (deep copy, safe to mutate)."""
        return {
            "meta": {
                "id": self.id,
                "name": self.name,
                "author": self.author,
                "version": self.version,
                "description": self.description,
                "type": self.type,
                "tags": list(self.tags),
            },
            "colors": copy.deepcopy(self.colors),
            "editor": copy.deepcopy(self.editor),
            "terminal": copy.deepcopy(self.terminal),
        }

    def copy(self) -> "Theme":
        return copy.deepcopy(self)


def _meta_block(data: Mapping[str, Any]) -> Mapping[str, Any] | None:
    meta = data.get("meta")
    return meta if isinstance(meta, Mapping) else None


def resolve_theme_id(data: Any) -> str | None:
    """Return the id of either shape (meta first), or None if absent."""
    if not isinstance(data, Mapping):
        return None
    meta = _meta_block(data)
    value = (meta.get("id") if meta else None) or data.get("id")
    return str(value) if value else None


def resolve_theme_name(data: Any) -> str | None:
    if not isinstance(data, Mapping):
        return None
    meta = _meta_block(data)
    value = (meta.get("name") if meta else None) or data.get("name")
    return str(value) if value else None


def _mapping_or_empty(value: Any, label: str, theme_id: str) -> Dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        _logger.warning("theme %s: '%s' is not an object; ignoring", theme_id, label)
        return {}
    return copy.deepcopy(dict(value))


def _tags(value: Any, theme_id: str) -> List[str]:
    if not value:
        return []
    if isinstance(value, str):
        value = [value]
    elif not isinstance(value, (list, tuple, set)):
        _logger.warning("theme %s: tags must be a list, got %s; ignoring", theme_id, type(value).__name__)
        return []
    seen: set[str] = set()
    ordered: List[str] = []
    for tag in value:
        text = str(tag)
        if text not in seen:
            seen.add(text)
            ordered.append(text)
    return ordered


def _theme_type(value: Any, theme_id: str) -> str:
    if not value:
        return DEFAULT_TYPE
    if not isinstance(value, str) or value not in THEME_TYPES:
        _logger.warning("theme %s: unknown type %r, using %s", theme_id, value, DEFAULT_TYPE)
        return DEFAULT_TYPE
    return str(value)


def normalize_theme(data: Any) -> Theme:
    """Parse nested or flat theme data into a canonical `Theme`.

    Missing fields get defaults (type=dark, version=1.0.0, author=Unknown,
    empty tags/description). Input mappings are deep-copied so the record
    never aliases caller data.
    """
    if not isinstance(data, Mapping):
        raise ThemeShapeError("theme data must be an object")
    meta = _meta_block(data)
    if meta is not None and meta.get("id"):
        fields: Mapping[str, Any] = meta
    elif data.get("id"):
        fields = data
    else:
        raise ThemeShapeError("theme must have an id (meta.id or id)")
    theme_id = str(fields["id"])
    return Theme(
        id=theme_id,
        name=str(fields.get("name") or data.get("name") or DEFAULT_NAME),
        type=_theme_type(fields.get("type") or data.get("type"), theme_id),
        author=str(fields.get("author") or DEFAULT_AUTHOR),
        version=str(fields.get("version") or DEFAULT_VERSION),
        description=str(fields.get("description") or ""),
        tags=_tags(fields.get("tags"), theme_id),
        colors=_mapping_or_empty(data.get("colors"), "colors", theme_id),
        editor=_mapping_or_empty(data.get("editor"), "editor", theme_id),
        terminal=_mapping_or_empty(data.get("terminal"), "terminal", theme_id),
    )


def slugify_theme_name(name: str) -> str:
    """Lowercase and replace whitespace runs with hyphens ("My Pink" -> "my-pink")."""
    return "-".join(name.strip().lower().split())
