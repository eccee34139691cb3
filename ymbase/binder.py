"""Binders: objects that receive events broadcast by a bind manager."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

__all__ = ["Binder", "BindMgr"]


class Binder(ABC):
    """Receives the events of the :class:`BindMgr` it is registered with.

    A binder belongs to at most one manager at a time.  Subclasses implement
    :meth:`event_proc`, which gets the values passed to
    :meth:`BindMgr.prop_event`.
    """

    def __init__(self) -> None:
        self._mgr: BindMgr | None = None

    def mgr(self) -> BindMgr | None:
        """Return the manager this binder is registered with, or None."""
        return self._mgr

    def unbind(self) -> None:
        """Remove this binder from its manager, if it has one."""
        if self._mgr is not None:
            self._mgr.unreg_binder(self)

    @abstractmethod
    def event_proc(self, *args: Any) -> None:
        """Handle one event carrying ``args``."""


class BindMgr:
    """Holds registered binders and broadcasts events to them in order."""

    def __init__(self) -> None:
        self._binders: list[Binder] = []

    @property
    def binders(self) -> tuple[Binder, ...]:
        """The registered binders in registration order."""
        return tuple(self._binders)

    def __len__(self) -> int:
        return len(self._binders)

    def __contains__(self, binder: object) -> bool:
        return any(b is binder for b in self._binders)

    def reg_binder(self, binder: Binder) -> None:
        """Register ``binder``, taking it away from any other manager first."""
        if not isinstance(binder, Binder):
            raise TypeError(f"expected a Binder, not {type(binder).__name__}")
        current = binder.mgr()
        if current is self:
            return
        if current is not None:
            current.unreg_binder(binder)
        binder._mgr = self
        self._binders.append(binder)

    def unreg_binder(self, binder: Binder) -> None:
        """Remove ``binder``; do nothing when it is not registered here."""
        for pos, registered in enumerate(self._binders):
            if registered is binder:
                del self._binders[pos]
                binder._mgr = None
                return

    def unreg_all_binders(self) -> None:
        """Remove every registered binder."""
        for binder in self._binders:
            binder._mgr = None
        self._binders.clear()

    def prop_event(self, *args: Any) -> None:
        """Pass ``args`` to the ``event_proc`` of every registered binder."""
        for binder in list(self._binders):
            binder.event_proc(*args)