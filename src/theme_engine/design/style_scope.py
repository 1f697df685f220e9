"""Style scope capability.

The engine never assumes a concrete visual root. Anything that can set and
remove a named style variable is a valid target: the document root of the
host, a preview wrapper, a Qt object (see `services.qt_style_scope`) or the
in-memory scope used headless and in tests.
"""

from __future__ import annotations

from typing import Dict, Mapping, Protocol, runtime_checkable

__all__ = ["StyleScope", "InMemoryStyleScope"]


@runtime_checkable
class StyleScope(Protocol):
    def set_variable(self, name: str, value: str) -> None: ...  # pragma: no cover

    def remove_variable(self, name: str) -> None: ...  # pragma: no cover


class InMemoryStyleScope:
    """Dictionary-backed style scope."""

    def __init__(self) -> None:
        self._values: Dict[str, str] = {}

    def set_variable(self, name: str, value: str) -> None:
        self._values[name] = value

    def remove_variable(self, name: str) -> None:
        self._values.pop(name, None)

    def get_variable(self, name: str) -> str | None:
        return self._values.get(name)

    @property
    def values(self) -> Mapping[str, str]:
        return dict(self._values)

    def __len__(self) -> int:
        return len(self._values)
