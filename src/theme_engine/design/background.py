"""Background media references.

The engine only classifies the theme's ``appBackground`` value; showing,
hiding, playing and releasing the media is the background host's job.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Protocol

__all__ = [
    "BackgroundKind",
    "BackgroundReference",
    "BackgroundMediaHost",
    "MOTION_EXTENSIONS",
    "classify_background",
    "show_background",
]

_logger = logging.getLogger(__name__)

MOTION_EXTENSIONS: tuple[str, ...] = (".webm", ".mp4")
_MOTION_DATA_PREFIX = "data:video/"


class BackgroundKind:
    NONE = "none"
    IMAGE = "image"
    MOTION = "motion"


@dataclass(frozen=True)
class BackgroundReference:
    value: str | None
    kind: str = BackgroundKind.NONE

    @property
    def is_motion(self) -> bool:
        return self.kind == BackgroundKind.MOTION


class BackgroundMediaHost(Protocol):
    """Shows a reference; a NONE or IMAGE reference must stop and release motion media."""

    def show_background(self, reference: BackgroundReference) -> None: ...  # pragma: no cover


def classify_background(value: Any) -> BackgroundReference:
    if not value or value == "none":
        return BackgroundReference(None, BackgroundKind.NONE)
    text = str(value)
    if text.endswith(MOTION_EXTENSIONS) or text.startswith(_MOTION_DATA_PREFIX):
        return BackgroundReference(text, BackgroundKind.MOTION)
    return BackgroundReference(text, BackgroundKind.IMAGE)


def show_background(host: BackgroundMediaHost | None, reference: BackgroundReference) -> bool:
    if host is None:
        return False
    try:
        host.show_background(reference)
    except Exception as exc:  # noqa: BLE001 - host boundary
        _logger.warning("background host failed for %r: %s", reference.value, exc)
        return False
    return True
