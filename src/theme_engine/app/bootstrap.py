"""Theme engine composition root.

Responsibilities:
 - Load the engine config
 - Build storage, event bus and theme store
 - Seed builtin themes, load persisted user themes and restore the last
   active theme
 - Start the builtin warm loader
 - Persist the active theme id whenever it changes

Nothing is stored globally: every call returns an independent `EngineContext`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from PyQt6.QtCore import QCoreApplication

from ..design.background import BackgroundMediaHost
from ..design.editor_syntax import EditorThemingHost
from ..design.style_scope import StyleScope
from ..services.event_bus import Event, EventBus, ThemeEvent
from ..services.theme_storage import JsonFileStorage, ThemeStorage
from ..services.theme_store import ActivationResult, ThemeStore
from ..services.theme_warm_loader import BuiltinThemeLoader
from .config_store import EngineConfig, load_config, save_config
from .timing import TimingLogger

__all__ = ["EngineContext", "create_engine", "USER_DATA_DIRNAME"]

_logger = logging.getLogger(__name__)

USER_DATA_DIRNAME = "theme_data"


@dataclass
class EngineContext:
    """References created during bootstrap.

    Attributes
    ----------
    config: Loaded (and kept current) engine config
    config_dir: Directory the config is saved to (None = CWD)
    event_bus: Bus the store publishes `ThemeEvent` notifications on
    storage: Key/value backend for user themes and background overrides
    theme_store: The theme registry
    warm_loader: Builtin enhancement loader (None when disabled)
    activation: Result of restoring the initial theme
    timing: Bootstrap phase durations
    """

    config: EngineConfig
    config_dir: Optional[Path]
    event_bus: EventBus
    storage: ThemeStorage
    theme_store: ThemeStore
    warm_loader: Optional[BuiltinThemeLoader]
    activation: ActivationResult
    timing: TimingLogger
    metadata: dict[str, Any] = field(default_factory=dict)


def _warm_loader_delay(config: EngineConfig, delay_ms: int | None) -> int:
    delay = config.enhancement_delay_ms if delay_ms is None else delay_ms
    if delay > 0 and QCoreApplication.instance() is None:
        _logger.info("no Qt application running; loading builtin documents synchronously")
        return 0
    return delay


def create_engine(
    *,
    config_dir: str | Path | None = None,
    storage: ThemeStorage | None = None,
    scope: StyleScope | None = None,
    editor_host: EditorThemingHost | None = None,
    background_host: BackgroundMediaHost | None = None,
    enable_warm_loader: bool = True,
    delay_ms: int | None = None,
    persist_config: bool = True,
) -> EngineContext:
    """Create and initialize a theme engine.

    Parameters
    ----------
    config_dir: Directory for ``theme_engine.json`` and the default file storage.
    storage: Storage backend override (defaults to `JsonFileStorage` under config_dir).
    scope, editor_host, background_host: Rendering collaborators; all optional
        and attachable later on the returned store.
    enable_warm_loader: Fetch the full builtin documents after startup.
    delay_ms: Warm loader delay override (config value when None).
    persist_config: Save the active theme id to the config file on change.
    """
    timing = TimingLogger()
    base_dir = Path(config_dir) if config_dir else None

    with timing.measure("load_config"):
        config = load_config(base_dir)

    if storage is None:
        storage = JsonFileStorage((base_dir or Path.cwd()) / USER_DATA_DIRNAME)

    bus = EventBus()
    store = ThemeStore(
        scope=scope,
        editor_host=editor_host,
        background_host=background_host,
        storage=storage,
        event_bus=bus,
        default_theme_id=config.default_theme_id,
        user_themes_key=config.user_themes_key,
    )

    with timing.measure("seed_builtin_themes"):
        store.restore_builtin_themes()
    with timing.measure("load_user_themes"):
        loaded = store.load_user_themes()
    _logger.debug("loaded %d user themes", loaded)

    def _remember_active(event: Event) -> None:
        theme_id = (event.payload or {}).get("theme_id")
        if not theme_id or theme_id == config.active_theme_id:
            return
        config.active_theme_id = theme_id
        if persist_config:
            try:
                save_config(config, base_dir)
            except OSError as exc:
                _logger.warning("could not save active theme %s: %s", theme_id, exc)

    bus.subscribe(ThemeEvent.THEME_CHANGED, _remember_active)

    with timing.measure("initial_activation"):
        activation = store.set_theme(config.active_theme_id or config.default_theme_id)

    loader: BuiltinThemeLoader | None = None
    if enable_warm_loader:
        with timing.measure("start_warm_loader"):
            loader = BuiltinThemeLoader(
                store,
                delay_ms=_warm_loader_delay(config, delay_ms),
                themes_dir=config.builtin_themes_dir,
            )
    timing.stop()

    _logger.debug("theme engine ready in %.4fs", timing.total_duration)
    return EngineContext(
        config=config,
        config_dir=base_dir,
        event_bus=bus,
        storage=storage,
        theme_store=store,
        warm_loader=loader,
        activation=activation,
        timing=timing,
    )
