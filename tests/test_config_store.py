import json
from pathlib import Path

from theme_engine.app.config_store import (
    CONFIG_VERSION,
    DEFAULT_FILENAME,
    EngineConfig,
    load_config,
    save_config,
)


def test_load_returns_defaults_when_missing(tmp_path: Path):
    cfg = load_config(tmp_path)
    assert cfg.version == CONFIG_VERSION
    assert cfg.default_theme_id == "kawaii-dark"
    assert cfg.active_theme_id is None


def test_save_and_reload_round_trip(tmp_path: Path):
    cfg = EngineConfig(active_theme_id="nord", enhancement_delay_ms=0, builtin_themes_dir="themes")
    path = save_config(cfg, tmp_path)
    assert path.name == DEFAULT_FILENAME
    assert load_config(tmp_path).to_dict() == cfg.to_dict()
    assert not list(tmp_path.glob("*.tmp"))


def test_corrupt_file_graceful_fallback(tmp_path: Path):
    (tmp_path / DEFAULT_FILENAME).write_text("not json", encoding="utf-8")
    cfg = load_config(tmp_path)
    assert isinstance(cfg, EngineConfig)
    assert cfg.active_theme_id is None


def test_version_mismatch_resets_but_keeps_active_theme(tmp_path: Path):
    data = {"version": CONFIG_VERSION + 1, "active_theme_id": "sakura", "default_theme_id": "nord"}
    (tmp_path / DEFAULT_FILENAME).write_text(json.dumps(data), encoding="utf-8")
    cfg = load_config(tmp_path)
    assert cfg.version == CONFIG_VERSION
    assert cfg.default_theme_id == "kawaii-dark"
    assert cfg.active_theme_id == "sakura"
