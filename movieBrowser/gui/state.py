"""
gui.state
~~~~~~~~~
Request lifecycle states and the observable that carries them to widgets.

A request is always in exactly one of `Loading`, `Successful` or `Error`.
States are frozen so a subscriber can keep the object it was handed.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Union

from PySide6.QtCore import QObject, Signal


@dataclass(frozen=True, slots=True)
class Loading:
    pass


@dataclass(frozen=True, slots=True)
class Successful:
    payload: Any


@dataclass(frozen=True, slots=True)
class Error:
    message: str

    def __post_init__(self):
        if not self.message:
            raise ValueError("Error state needs a message")


RequestState = Union[Loading, Successful, Error]

Unsubscribe = Callable[[], None]


class StateStore(QObject):
    """
    Holds the latest `RequestState` and notifies subscribers on every publish.

    Only the owning controller calls `publish`, always from the GUI thread;
    widgets call `subscribe` and keep the returned handle to detach.
    Qt code may also connect to `changed` directly.
    """
    changed = Signal(object)         # RequestState

    def __init__(self, initial: RequestState | None = None, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._value: RequestState = initial if initial is not None else Loading()
        self._subscribers: list[list[Callable[[RequestState], Any]]] = []

    @property
    def value(self) -> RequestState:
        return self._value

    def subscribe(self, callback: Callable[[RequestState], Any]) -> Unsubscribe:
        """Call *callback* with the current state now and with every later one."""
        entry = [callback]             # identity handle; same callback may subscribe twice
        self._subscribers.append(entry)
        callback(self._value)

        def unsubscribe() -> None:
            for i, e in enumerate(self._subscribers):
                if e is entry:
                    del self._subscribers[i]
                    return
        return unsubscribe

    def publish(self, state: RequestState) -> None:
        self._value = state
        for (callback,) in list(self._subscribers):
            callback(state)
        self.changed.emit(state)
