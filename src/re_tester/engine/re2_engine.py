from __future__ import annotations

from loguru import logger

from re_tester.engine.base_engine import BaseEngine, CompileResult
from re_tester.engine.compiled_matcher import CompiledMatcher
from re_tester.errors import EngineUnavailableError


class RE2Engine(BaseEngine):
    """Google RE2 through the ``google-re2`` bindings.

    RE2 matches in time linear in the subject length, so it needs no time
    budget. It rejects backreferences and lookaround.
    """

    name = "re2"

    def __init__(self):
        try:
            import re2
        except ImportError as exc:
            raise EngineUnavailableError(
                "The re2 engine needs the google-re2 package (pip install 're-tester[re2]')"
            ) from exc
        self._re2 = re2

    def compile(self, pattern: str) -> CompileResult:
        try:
            rx = self._re2.compile(pattern)
        except (self._re2.error, ValueError, OverflowError) as exc:
            logger.debug(f"re2 rejected pattern {pattern!r}: {exc}")
            return CompileResult(matcher=None, error=str(exc))
        return CompileResult(matcher=CompiledMatcher(self.name, rx), error=None)
