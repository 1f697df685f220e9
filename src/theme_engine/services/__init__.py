"""Runtime services: theme store, storage, events and Qt adapters.

Qt-dependent modules (`theme_warm_loader`, `qt_style_scope`) are not imported
here so the headless store can be used without a Qt platform plugin.
"""

from .event_bus import EventBus, ThemeEvent, Event, Subscription  # noqa: F401
from .theme_storage import ThemeStorage, MemoryStorage, JsonFileStorage, StorageError  # noqa: F401
from .theme_store import (  # noqa: F401
    ThemeStore,
    ThemeSummary,
    OperationResult,
    ActivationResult,
    ActivationStatus,
    USER_THEMES_KEY,
    background_key,
)
