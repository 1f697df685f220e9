"""Engine configuration persistence.

Stores the few settings the theme engine needs across sessions: which theme
was active, the fallback id, where the shipped documents live and how long the
warm loader waits before fetching them.

Design principles:
- Pure logic (no Qt import) so it can be unit-tested headless.
- Explicit schema with version field to enable future migrations.
- Graceful fallback: corrupt or incompatible files produce defaults instead of raising.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from ..design.builtin_themes import DEFAULT_THEME_ID

__all__ = ["EngineConfig", "load_config", "save_config", "CONFIG_VERSION", "DEFAULT_FILENAME"]

_logger = logging.getLogger(__name__)

CONFIG_VERSION = 1

DEFAULT_FILENAME = "theme_engine.json"


@dataclass(slots=True)
class EngineConfig:
    """Serializable engine configuration.

    Attributes
    ----------
    version: Schema version for migration handling.
    default_theme_id: Fallback for unknown ids and deleted active themes.
    active_theme_id: Theme active at last shutdown (None on first run).
    builtin_themes_dir: Directory holding shipped ``<id>.json`` documents
        (None uses the packaged ``design/themes``).
    enhancement_delay_ms: Warm loader delay before fetching full documents.
    user_themes_key: Storage key of the persisted user theme list.
    """

    version: int = CONFIG_VERSION
    default_theme_id: str = DEFAULT_THEME_ID
    active_theme_id: Optional[str] = None
    builtin_themes_dir: Optional[str] = None
    enhancement_delay_ms: int = 300
    user_themes_key: str = "user-themes"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EngineConfig":
        defaults = cls()
        return cls(
            version=int(data.get("version", CONFIG_VERSION)),
            default_theme_id=str(data.get("default_theme_id") or defaults.default_theme_id),
            active_theme_id=data.get("active_theme_id"),
            builtin_themes_dir=data.get("builtin_themes_dir"),
            enhancement_delay_ms=int(data.get("enhancement_delay_ms", defaults.enhancement_delay_ms)),
            user_themes_key=str(data.get("user_themes_key") or defaults.user_themes_key),
        )


def _resolve_path(base_dir: str | Path | None) -> Path:
    base = Path(base_dir) if base_dir else Path.cwd()
    return base / DEFAULT_FILENAME


def load_config(base_dir: str | Path | None = None) -> EngineConfig:
    """Load engine config from ``base_dir`` (defaults to CWD)."""
    path = _resolve_path(base_dir)
    if not path.exists():
        return EngineConfig()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        cfg = EngineConfig.from_dict(data)
    except Exception as exc:  # noqa: BLE001
        _logger.warning("ignoring unreadable config %s: %s", path, exc)
        return EngineConfig()
    if cfg.version != CONFIG_VERSION:
        # Reset on schema change but keep the user's last theme choice.
        return EngineConfig(active_theme_id=cfg.active_theme_id)
    return cfg


def save_config(cfg: EngineConfig, base_dir: str | Path | None = None) -> Path:
    """Persist engine config; returns the path written."""
    path = _resolve_path(base_dir)
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    tmp.write_text(json.dumps(cfg.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8")
    tmp.replace(path)
    return path
