"""Style scope backed by Qt dynamic properties.

Each style variable becomes a dynamic property on the target object so
stylesheets and property-aware widgets can read it. A widget target is
re-polished after every change so property selectors pick up the new value.
"""

from __future__ import annotations

from typing import Set

from PyQt6.QtCore import QObject
from PyQt6.QtWidgets import QWidget

__all__ = ["QObjectStyleScope"]


class QObjectStyleScope:
    def __init__(self, target: QObject, *, repolish: bool = True) -> None:
        self._target = target
        self._repolish = repolish
        self._names: Set[str] = set()

    @property
    def target(self) -> QObject:
        return self._target

    def set_variable(self, name: str, value: str) -> None:
        self._target.setProperty(name, value)
        self._names.add(name)
        self._refresh()

    def remove_variable(self, name: str) -> None:
        if name not in self._names:
            return
        self._target.setProperty(name, None)
        self._names.discard(name)
        self._refresh()

    def get_variable(self, name: str) -> str | None:
        if name not in self._names:
            return None
        value = self._target.property(name)
        return None if value is None else str(value)

    def names(self) -> Set[str]:
        return set(self._names)

    def _refresh(self) -> None:
        if self._repolish and isinstance(self._target, QWidget):
            style = self._target.style()
            style.unpolish(self._target)
            style.polish(self._target)
