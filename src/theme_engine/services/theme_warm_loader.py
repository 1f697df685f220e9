"""Builtin theme warm loader.

Seeds are registered synchronously for an instant first frame; this loader
then fetches the richer shipped document for every builtin id and registers
it under the same id, superseding the seed in place.

Scheduling:
 - One single-shot QTimer per id on the Qt event loop, so no id waits on
   another and startup never blocks on the fetch
 - ``delay_ms=0`` runs every task immediately (tests, headless tools)
 - ``run_now()`` stops pending timers and runs what is left

Each task catches and logs its own failure; the seed stays registered.
Only the currently active id is re-applied when its document lands (the
store's register rule), so a late result never steals activation.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Mapping

from PyQt6.QtCore import QObject, QTimer

from ..design.builtin_themes import BUILTIN_THEME_IDS, load_builtin_document
from ..design.theme_model import resolve_theme_id
from .theme_store import ThemeStore

__all__ = ["BuiltinThemeLoader", "MAX_DELAY_MS"]

_logger = logging.getLogger(__name__)

MAX_DELAY_MS = 5000

Fetcher = Callable[[str], Mapping[str, Any]]


class BuiltinThemeLoader(QObject):
    def __init__(
        self,
        store: ThemeStore,
        *,
        delay_ms: int = 300,
        theme_ids: Iterable[str] | None = None,
        fetcher: Fetcher | None = None,
        themes_dir: str | Path | None = None,
    ):
        super().__init__()
        self._store = store
        self._delay_ms = max(0, min(delay_ms, MAX_DELAY_MS))
        ids = list(theme_ids) if theme_ids is not None else list(BUILTIN_THEME_IDS)
        self._theme_ids: List[str] = list(dict.fromkeys(ids))
        if fetcher is None:
            directory = Path(themes_dir) if themes_dir else None
            fetcher = lambda theme_id: load_builtin_document(theme_id, directory)  # noqa: E731
        self._fetch = fetcher
        self._done: set[str] = set()
        self._loaded: List[str] = []
        self._failures: Dict[str, str] = {}
        self._timers: Dict[str, QTimer] = {}
        self._schedule()

    # Scheduling --------------------------------------------------------
    def _schedule(self):
        if self._delay_ms == 0:
            for theme_id in self._theme_ids:
                self._run(theme_id)
            return
        for theme_id in self._theme_ids:
            timer = QTimer(self)
            timer.setSingleShot(True)
            timer.timeout.connect(lambda tid=theme_id: self._run(tid))  # type: ignore[attr-defined]
            timer.start(self._delay_ms)
            self._timers[theme_id] = timer

    # Execution ---------------------------------------------------------
    def _run(self, theme_id: str) -> None:
        if theme_id in self._done:
            return
        self._done.add(theme_id)
        self._timers.pop(theme_id, None)
        try:
            document = self._fetch(theme_id)
            fetched_id = resolve_theme_id(document)
            if fetched_id != theme_id:
                raise ValueError(f"document id {fetched_id!r} does not match {theme_id!r}")
            self._store.register_theme(document)
        except Exception as exc:  # noqa: BLE001 - one failed fetch must not affect siblings
            self._failures[theme_id] = str(exc)
            _logger.warning("failed to load full definition for %s: %s", theme_id, exc)
        else:
            self._loaded.append(theme_id)
            _logger.debug("loaded full definition for %s", theme_id)

    # Public ------------------------------------------------------------
    def is_completed(self) -> bool:
        return len(self._done) == len(self._theme_ids)

    def pending(self) -> List[str]:
        return [t for t in self._theme_ids if t not in self._done]

    @property
    def loaded(self) -> List[str]:
        return list(self._loaded)

    @property
    def failures(self) -> Dict[str, str]:
        return dict(self._failures)

    def run_now(self) -> None:
        for theme_id in self.pending():
            timer = self._timers.pop(theme_id, None)
            if timer is not None:
                timer.stop()
            self._run(theme_id)
