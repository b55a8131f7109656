from __future__ import annotations

import time
from collections.abc import Iterator
from typing import Any, Optional

import regex
from loguru import logger

from re_tester.engine.base_engine import BaseEngine, CompileResult
from re_tester.engine.compiled_matcher import CompiledMatcher
from re_tester.engine.engine_match import EngineMatch
from re_tester.errors import BudgetExceededError


class RegexMatcher(CompiledMatcher):
    """Matcher for the ``regex`` package, scanning under a wall-clock budget.

    The budget covers the whole scan; each search gets whatever time is left.
    """

    def __init__(self, compiled: Any, timeout_seconds: Optional[float]):
        super().__init__(RegexEngine.name, compiled)
        self.timeout_seconds = timeout_seconds
        self._deadline: Optional[float] = None

    def _search(self, subject: str, pos: int) -> Optional[Any]:
        if self._deadline is None:
            return self._compiled.search(subject, pos)
        remaining = self._deadline - time.monotonic()
        if remaining <= 0:
            raise TimeoutError("regex timed out")
        return self._compiled.search(subject, pos, timeout=remaining)

    def captures_iter(self, subject: str) -> Iterator[EngineMatch]:
        if self.timeout_seconds is not None:
            self._deadline = time.monotonic() + self.timeout_seconds
        try:
            yield from super().captures_iter(subject)
        except TimeoutError as exc:
            logger.debug(f"regex scan timed out after {self.timeout_seconds}s on {len(subject)} characters")
            raise BudgetExceededError(self.timeout_seconds) from exc  # type: ignore[arg-type]


class RegexEngine(BaseEngine):
    """Default engine: the ``regex`` package, with an optional time budget per scan.

    ``regex`` backtracks, so a pathological pattern can run for a long time;
    ``timeout_seconds`` bounds each scan. ``None`` disables the bound.
    """

    name = "regex"

    def __init__(self, timeout_seconds: Optional[float] = None):
        self.timeout_seconds = timeout_seconds

    def compile(self, pattern: str) -> CompileResult:
        try:
            rx = regex.compile(pattern)
        except (regex.error, ValueError, OverflowError) as exc:
            logger.debug(f"regex rejected pattern {pattern!r}: {exc}")
            return CompileResult(matcher=None, error=str(exc))
        return CompileResult(matcher=RegexMatcher(rx, self.timeout_seconds), error=None)
