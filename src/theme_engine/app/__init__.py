"""Application composition: configuration and engine bootstrap."""

from .config_store import EngineConfig, load_config, save_config  # noqa: F401
from .bootstrap import EngineContext, create_engine  # noqa: F401
