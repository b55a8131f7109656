from __future__ import annotations

from typing import Callable, Generic, List, TypeVar

T = TypeVar("T")

Listener = Callable[[T], None]
Unsubscribe = Callable[[], None]


class Signal(Generic[T]):
    """A mutable value cell that notifies listeners when it changes.

    Setting a value equal to the current one is not a change and notifies
    nobody. Listeners run synchronously, in subscription order, before
    ``set`` returns.
    """

    def __init__(self, value: T):
        self._value = value
        self._listeners: List[Listener[T]] = []

    def get(self) -> T:
        return self._value

    def set(self, value: T) -> bool:
        """Store ``value``; return True if it differed from the old one."""
        if value == self._value:
            return False
        self._value = value
        for listener in list(self._listeners):
            listener(value)
        return True

    def subscribe(self, listener: Listener[T]) -> Unsubscribe:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def __repr__(self) -> str:
        return f"Signal({self._value!r})"
