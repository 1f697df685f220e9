"""Theme store: registry, activation and persistence of themes.

The store is an explicit instance owned by the composition root
(`app.bootstrap.create_engine`); nothing here is process-global, so tests and
preview panes can run independent stores side by side.

Responsibilities:
 - Register builtin seeds and user themes under unique ids (last write wins)
 - Activate a theme onto the attached style scope, background host and editor
   host, falling back to the default id for unknown ids
 - Import / export / delete / duplicate with structured results; no exception
   escapes those operations
 - Persist every non-builtin theme after each mutation, plus per-builtin
   background overrides under ``theme-bg-<id>``

Hosts are plain attributes and may be attached after construction. A missing
host is logged and skipped; the next register or activate call pushes the
current state again.
"""

from __future__ import annotations

import copy
import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from ..design.apply_engine import SYNTAX_ROLES, apply_syntax_variables, apply_to_scope
from ..design.background import (
    BackgroundMediaHost,
    classify_background,
    show_background,
)
from ..design.builtin_themes import BUILTIN_THEME_IDS, DEFAULT_THEME_ID, builtin_seed
from ..design.editor_syntax import (
    EditorThemingHost,
    activate_editor_theme,
    define_editor_theme,
)
from ..design.style_scope import StyleScope
from ..design.theme_model import (
    DEFAULT_VERSION,
    USER_AUTHOR,
    Theme,
    ThemeShapeError,
    normalize_theme,
    resolve_theme_id,
    slugify_theme_name,
)
from ..design.tokens import TOKENS, TokenRegistry, TokenType
from ..design.validator import validate_theme_document
from .event_bus import EventBus, ThemeEvent
from .theme_storage import StorageError, ThemeStorage

__all__ = [
    "ThemeStore",
    "ThemeSummary",
    "OperationResult",
    "ActivationResult",
    "ActivationStatus",
    "USER_THEMES_KEY",
    "BACKGROUND_KEY_PREFIX",
    "background_key",
]

_logger = logging.getLogger(__name__)

USER_THEMES_KEY = "user-themes"
BACKGROUND_KEY_PREFIX = "theme-bg-"

_BACKGROUND_TYPES = (TokenType.IMAGE, TokenType.POSITION, TokenType.OPACITY, TokenType.BLUR)
_MOTION_SUPPRESSED_VAR = "--app-bg-image"


def background_key(theme_id: str) -> str:
    return f"{BACKGROUND_KEY_PREFIX}{theme_id}"


class ActivationStatus(str, Enum):
    APPLIED = "applied"
    FALLBACK = "fallback"
    FAILED = "failed"


@dataclass(frozen=True)
class OperationResult:
    success: bool
    message: str
    theme_id: Optional[str] = None


@dataclass(frozen=True)
class ActivationResult:
    status: ActivationStatus
    theme_id: Optional[str]
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status is not ActivationStatus.FAILED


@dataclass(frozen=True)
class ThemeSummary:
    id: str
    name: str
    type: str
    author: str
    is_builtin: bool


class ThemeStore:
    """Id-keyed theme registry with activation and persistence.

    Parameters
    ----------
    scope : StyleScope | None
        Target for token style variables.
    editor_host : EditorThemingHost | None
        Embedded editor theming capability (late-bound).
    background_host : BackgroundMediaHost | None
        Receives the classified ``appBackground`` reference on activation.
    storage : ThemeStorage | None
        Key/value backend; without one nothing is persisted.
    event_bus : EventBus | None
        Bus for `ThemeEvent` notifications (a private bus if omitted).
    builtin_ids : Iterable[str]
        Protected ids (never deleted, never overwritten by import).
    default_theme_id : str
        Fallback for unknown ids and for deleting the active theme.
    seed_provider : Callable[[str], Mapping | None]
        Returns the shipped seed document for a builtin id.
    """

    def __init__(
        self,
        *,
        scope: StyleScope | None = None,
        editor_host: EditorThemingHost | None = None,
        background_host: BackgroundMediaHost | None = None,
        storage: ThemeStorage | None = None,
        event_bus: EventBus | None = None,
        builtin_ids: Iterable[str] = BUILTIN_THEME_IDS,
        default_theme_id: str = DEFAULT_THEME_ID,
        user_themes_key: str = USER_THEMES_KEY,
        seed_provider: Callable[[str], Mapping[str, Any] | None] = builtin_seed,
        registry: TokenRegistry = TOKENS,
    ) -> None:
        self.scope = scope
        self.editor_host = editor_host
        self.background_host = background_host
        self.storage = storage
        self.events = event_bus if event_bus is not None else EventBus()
        self.default_theme_id = default_theme_id
        self.user_themes_key = user_themes_key
        self._builtin_ids: tuple[str, ...] = tuple(builtin_ids)
        self._seed_provider = seed_provider
        self._registry = registry
        self._themes: Dict[str, Theme] = {}
        self._active_id: Optional[str] = None

    @classmethod
    def create_default(cls, **kwargs: Any) -> "ThemeStore":
        """Build a store with builtin seeds and persisted user themes registered."""
        store = cls(**kwargs)
        store.restore_builtin_themes()
        store.load_user_themes()
        return store

    # Queries -----------------------------------------------------------
    def is_builtin(self, theme_id: str | None) -> bool:
        return theme_id in self._builtin_ids

    @property
    def builtin_ids(self) -> tuple[str, ...]:
        return self._builtin_ids

    def get_theme(self, theme_id: str) -> Theme | None:
        theme = self._themes.get(theme_id)
        return theme.copy() if theme is not None else None

    def has_theme(self, theme_id: str) -> bool:
        return theme_id in self._themes

    def list_themes(self) -> List[ThemeSummary]:
        return [
            ThemeSummary(t.id, t.name, t.type, t.author, self.is_builtin(t.id))
            for t in self._themes.values()
        ]

    @property
    def active_theme_id(self) -> str:
        if self._active_id is not None and self._active_id in self._themes:
            return self._active_id
        return self.default_theme_id

    @property
    def active_theme(self) -> Theme | None:
        return self.get_theme(self.active_theme_id)

    def __len__(self) -> int:
        return len(self._themes)

    def __contains__(self, theme_id: object) -> bool:
        return theme_id in self._themes

    # Registration ------------------------------------------------------
    def register_theme(self, data: Mapping[str, Any], skip_reapply: bool = False) -> Theme:
        """Normalize and store ``data``, replacing any record with the same id.

        Re-applies the theme when its id is the active one (unless
        ``skip_reapply``). Raises `ThemeShapeError` for unrecognized shapes.
        """
        theme = normalize_theme(data)
        self._themes[theme.id] = theme
        define_editor_theme(self.editor_host, theme)
        self.events.publish(
            ThemeEvent.THEME_REGISTERED,
            {"theme_id": theme.id, "builtin": self.is_builtin(theme.id)},
        )
        if not skip_reapply and theme.id == self._active_id:
            self.set_theme(theme.id)
        return theme

    def restore_builtin_themes(self) -> int:
        """Re-seed every builtin id from its shipped seed (no re-apply)."""
        restored = 0
        for theme_id in self._builtin_ids:
            seed = self._seed_provider(theme_id)
            if seed is None:
                _logger.warning("no seed definition for builtin theme %s", theme_id)
                continue
            self.register_theme(seed, skip_reapply=True)
            restored += 1
        return restored

    def load_user_themes(self) -> int:
        """Register persisted user themes; corrupt state counts as none."""
        raw = self._read(self.user_themes_key)
        if not raw:
            return 0
        try:
            entries = json.loads(raw)
        except ValueError as exc:
            _logger.warning("ignoring corrupt user theme storage: %s", exc)
            return 0
        if not isinstance(entries, list):
            _logger.warning("ignoring user theme storage: expected a list, got %s", type(entries).__name__)
            return 0
        loaded = 0
        for entry in entries:
            theme_id = resolve_theme_id(entry)
            if not theme_id or self.is_builtin(theme_id):
                _logger.debug("skipping stored theme entry %r", theme_id)
                continue
            try:
                self.register_theme(entry)
            except ThemeShapeError as exc:
                _logger.warning("skipping stored theme %s: %s", theme_id, exc)
                continue
            loaded += 1
        return loaded

    # Activation --------------------------------------------------------
    def set_theme(self, theme_id: str) -> ActivationResult:
        """Activate ``theme_id`` (or the default id if it is unknown)."""
        status = ActivationStatus.APPLIED
        message = ""
        theme = self._themes.get(theme_id)
        if theme is None:
            _logger.warning(
                "theme '%s' not found, falling back to %s", theme_id, self.default_theme_id
            )
            status = ActivationStatus.FALLBACK
            message = f"Theme '{theme_id}' not found"
            theme = self._themes.get(self.default_theme_id)
        if theme is None:
            _logger.error("default theme '%s' is not registered; nothing applied", self.default_theme_id)
            return ActivationResult(ActivationStatus.FAILED, None, "No themes available")

        self._active_id = theme.id
        _logger.info("applying theme %s (%s)", theme.name, theme.id)
        self._apply(theme)
        self.events.publish(
            ThemeEvent.THEME_CHANGED,
            {
                "theme_id": theme.id,
                "requested_id": theme_id,
                "fallback": status is ActivationStatus.FALLBACK,
            },
        )
        return ActivationResult(status, theme.id, message)

    def attach_editor_host(self, host: EditorThemingHost | None) -> None:
        """Attach a (late) editor host and push every registered theme to it."""
        self.editor_host = host
        if host is None:
            return
        for theme in self._themes.values():
            define_editor_theme(host, theme)
        if self._active_id in self._themes:
            activate_editor_theme(host, self._active_id)

    def effective_colors(self, theme_id: str) -> Dict[str, Any]:
        """Colors applied for ``theme_id``: the record plus any background override."""
        theme = self._themes.get(theme_id)
        if theme is None:
            return {}
        colors = copy.deepcopy(theme.colors)
        if self.is_builtin(theme_id):
            colors.update(self.background_override(theme_id))
        return colors

    def _apply(self, theme: Theme) -> None:
        colors = self.effective_colors(theme.id)
        reference = classify_background(colors.get("appBackground"))
        if self.scope is None:
            _logger.warning("no style scope attached; theme %s not applied to styles", theme.id)
        else:
            apply_to_scope(self.scope, colors, clear_first=True, registry=self._registry)
            roles = [r for r in SYNTAX_ROLES if colors.get(_syntax_token(r)) is None]
            apply_syntax_variables(self.scope, theme.editor.get("syntax"), roles)
            if reference.is_motion:
                self.scope.set_variable(_MOTION_SUPPRESSED_VAR, "none")
        show_background(self.background_host, reference)
        if define_editor_theme(self.editor_host, theme):
            activate_editor_theme(self.editor_host, theme.id)

    # Import / export ---------------------------------------------------
    def import_theme(self, text: str) -> OperationResult:
        try:
            data = json.loads(text)
        except (TypeError, ValueError) as exc:
            return OperationResult(False, f"Parse error: {exc}")
        validation = validate_theme_document(data, self._registry)
        if not validation.valid:
            _logger.info("rejected theme import: %s", "; ".join(validation.errors))
            return OperationResult(False, "Invalid theme structure")
        for warning in validation.warnings:
            _logger.info("theme import: %s", warning)
        theme_id = resolve_theme_id(data)
        if self.is_builtin(theme_id):
            return OperationResult(False, "Cannot override builtin theme")
        try:
            theme = self.register_theme(data)
        except ThemeShapeError as exc:
            _logger.info("rejected theme import: %s", exc)
            return OperationResult(False, "Invalid theme structure")
        self._persist_user_themes()
        self.events.publish(ThemeEvent.THEME_IMPORTED, {"theme_id": theme.id})
        return OperationResult(True, f'Theme "{theme.name}" imported successfully', theme.id)

    def export_document(self, theme_id: str) -> Dict[str, Any] | None:
        theme = self._themes.get(theme_id)
        return theme.to_document() if theme is not None else None

    def export_theme(self, theme_id: str) -> str | None:
        """Return the nested JSON document for ``theme_id`` (None if unknown)."""
        document = self.export_document(theme_id)
        if document is None:
            return None
        return json.dumps(document, indent=2, ensure_ascii=False)

    # Mutations ---------------------------------------------------------
    def delete_theme(self, theme_id: str) -> OperationResult:
        if self.is_builtin(theme_id):
            return OperationResult(False, "Cannot delete builtin theme", theme_id)
        if theme_id not in self._themes:
            return OperationResult(False, "Theme not found", theme_id)
        del self._themes[theme_id]
        self._persist_user_themes()
        self.events.publish(ThemeEvent.THEME_DELETED, {"theme_id": theme_id})
        if self._active_id == theme_id:
            self.set_theme(self.default_theme_id)
        return OperationResult(True, "Theme deleted", theme_id)

    def duplicate_theme(self, source_id: str, new_name: str) -> OperationResult:
        """Copy ``source_id`` under an id slugified from ``new_name``."""
        source = self._themes.get(source_id)
        if source is None:
            return OperationResult(False, "Source theme not found")
        new_id = slugify_theme_name(new_name or "")
        if not new_id:
            return OperationResult(False, "Theme name is required")
        if self.is_builtin(new_id):
            return OperationResult(False, "Cannot override builtin theme")
        self.register_theme(
            {
                "meta": {
                    "id": new_id,
                    "name": new_name,
                    "author": USER_AUTHOR,
                    "type": source.type,
                    "version": DEFAULT_VERSION,
                },
                "colors": self.effective_colors(source_id),
                "editor": copy.deepcopy(source.editor),
                "terminal": copy.deepcopy(source.terminal),
            }
        )
        self._persist_user_themes()
        return OperationResult(True, f'Created "{new_name}"', new_id)

    # Background overrides ------------------------------------------------
    def background_override(self, theme_id: str) -> Dict[str, Any]:
        raw = self._read(background_key(theme_id))
        if not raw:
            return {}
        try:
            data = json.loads(raw)
        except ValueError as exc:
            _logger.warning("failed to load saved background for %s: %s", theme_id, exc)
            return {}
        if not isinstance(data, dict):
            _logger.warning("ignoring saved background for %s: not an object", theme_id)
            return {}
        return data

    def save_background_override(self, theme_id: str, settings: Mapping[str, Any]) -> OperationResult:
        """Persist background tokens (image/position/opacity/blur) for a builtin theme."""
        if not self.is_builtin(theme_id):
            return OperationResult(False, "Background overrides apply to builtin themes only", theme_id)
        allowed = set(self._registry.keys_by_type(*_BACKGROUND_TYPES))
        kept = {k: v for k, v in settings.items() if k in allowed}
        dropped = sorted(set(settings) - allowed)
        if dropped:
            _logger.warning("ignoring non-background keys for %s: %s", theme_id, ", ".join(dropped))
        if not self._write(background_key(theme_id), json.dumps(kept)):
            return OperationResult(False, "Failed to save background", theme_id)
        if self._active_id == theme_id:
            self.set_theme(theme_id)
        return OperationResult(True, "Background saved", theme_id)

    def clear_background_override(self, theme_id: str) -> OperationResult:
        if self.storage is None:
            return OperationResult(False, "No storage configured", theme_id)
        try:
            self.storage.remove_item(background_key(theme_id))
        except (StorageError, OSError) as exc:
            _logger.error("failed to clear background for %s: %s", theme_id, exc)
            return OperationResult(False, "Failed to clear background", theme_id)
        if self._active_id == theme_id:
            self.set_theme(theme_id)
        return OperationResult(True, "Background cleared", theme_id)

    # Persistence ---------------------------------------------------------
    def _persist_user_themes(self) -> bool:
        documents = [t.to_document() for t in self._themes.values() if not self.is_builtin(t.id)]
        return self._write(self.user_themes_key, json.dumps(documents, ensure_ascii=False))

    def _read(self, key: str) -> str | None:
        if self.storage is None:
            return None
        try:
            return self.storage.get_item(key)
        except (StorageError, OSError) as exc:
            _logger.warning("could not read %s from storage: %s", key, exc)
            return None

    def _write(self, key: str, value: str) -> bool:
        if self.storage is None:
            _logger.debug("no storage attached; %s not persisted", key)
            return False
        try:
            self.storage.set_item(key, value)
        except (StorageError, OSError) as exc:
            _logger.error("could not persist %s: %s", key, exc)
            return False
        return True


def _syntax_token(role: str) -> str:
    return "syntax" + role[:1].upper() + role[1:]
