"""Live evaluation state behind an editor.

The presentation layer owns the widgets; it pushes every edit into
``set_pattern``/``set_subject`` and renders ``current_report()`` (or listens
through ``subscribe``). The report is recomputed synchronously on each real
change of either input, so it never lags behind the inputs.
"""

from __future__ import annotations

from typing import Callable, Optional

from loguru import logger

from re_tester.engine import BaseEngine, get_engine
from re_tester.evaluation.evaluator import evaluate
from re_tester.reactive.memo import Memo
from re_tester.reactive.signal import Signal, Unsubscribe
from re_tester.tester_config import TesterConfig


class ReactiveController:
    """Holds the pattern and subject and the report derived from them."""

    def __init__(
        self,
        engine: Optional[BaseEngine] = None,
        pattern: str = "",
        subject: str = "",
    ):
        """Initialize the controller.

        Args:
            engine: Engine used for every evaluation (default: ``regex`` with the default budget)
            pattern: Initial pattern
            subject: Initial subject
        """
        self.engine = engine if engine is not None else get_engine()
        self._pattern: Signal[str] = Signal(pattern)
        self._subject: Signal[str] = Signal(subject)
        self._report: Memo[str] = Memo(self._evaluate, sources=(self._pattern, self._subject))

    @classmethod
    def from_config(cls, config: TesterConfig) -> ReactiveController:
        return cls(engine=get_engine(config.engine, config.timeout_seconds))

    def _evaluate(self) -> str:
        pattern = self._pattern.get()
        subject = self._subject.get()
        logger.debug(f"Recomputing report (pattern={pattern!r}, subject length={len(subject)})")
        return evaluate(pattern, subject, self.engine)

    @property
    def pattern(self) -> str:
        return self._pattern.get()

    @property
    def subject(self) -> str:
        return self._subject.get()

    @property
    def recompute_count(self) -> int:
        """Number of evaluations run so far, including the initial one."""
        return self._report.recompute_count

    def set_pattern(self, pattern: str) -> None:
        self._pattern.set(pattern)

    def set_subject(self, subject: str) -> None:
        self._subject.set(subject)

    def current_report(self) -> str:
        return self._report.get()

    def subscribe(self, listener: Callable[[str], None]) -> Unsubscribe:
        """Call ``listener`` with the new report each time the report changes."""
        return self._report.subscribe(listener)
