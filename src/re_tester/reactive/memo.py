from __future__ import annotations

from typing import Any, Callable, Generic, Sequence, TypeVar

from re_tester.reactive.signal import Signal, Unsubscribe

T = TypeVar("T")


class Memo(Signal[T], Generic[T]):
    """A derived cell recomputed eagerly whenever one of its sources changes.

    The recomputed value is stored before any listener of the memo runs, so
    a listener reading ``get()`` (or any other cell) never sees a value
    derived from superseded inputs. Listeners only hear about recomputations
    that produced a different value.
    """

    def __init__(self, compute: Callable[[], T], sources: Sequence[Signal[Any]]):
        self._compute = compute
        self.recompute_count = 1
        super().__init__(compute())
        self._source_unsubscribes: list[Unsubscribe] = [
            source.subscribe(self._on_source_changed) for source in sources
        ]

    def _on_source_changed(self, _value: Any) -> None:
        self.recompute_count += 1
        Signal.set(self, self._compute())

    def set(self, value: T) -> bool:
        raise TypeError("Memo values are derived from their sources and cannot be set")

    def dispose(self) -> None:
        """Stop following the sources."""
        for unsubscribe in self._source_unsubscribes:
            unsubscribe()
        self._source_unsubscribes.clear()

    def __repr__(self) -> str:
        return f"Memo({self._value!r})"
