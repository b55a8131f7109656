from __future__ import annotations

import re

from loguru import logger

from re_tester.engine.base_engine import BaseEngine, CompileResult
from re_tester.engine.compiled_matcher import CompiledMatcher


class StdReEngine(BaseEngine):
    """The standard library ``re`` module. Scans are not time-bounded."""

    name = "re"

    def compile(self, pattern: str) -> CompileResult:
        try:
            rx = re.compile(pattern)
        except (re.error, ValueError, OverflowError) as exc:
            logger.debug(f"re rejected pattern {pattern!r}: {exc}")
            return CompileResult(matcher=None, error=str(exc))
        return CompileResult(matcher=CompiledMatcher(self.name, rx), error=None)
