"""Regex engines the tester can evaluate patterns with."""

from __future__ import annotations

from typing import Optional

from loguru import logger

from re_tester.engine.base_engine import BaseEngine, CompileResult
from re_tester.engine.compiled_matcher import CompiledMatcher
from re_tester.engine.engine_match import EngineMatch
from re_tester.engine.regex_engine import RegexEngine
from re_tester.engine.std_re_engine import StdReEngine
from re_tester.errors import EngineUnavailableError
from re_tester.tester_config import DEFAULT_TIMEOUT_SECONDS, ENGINE_NAMES


def get_engine(name: str = "regex", timeout_seconds: Optional[float] = DEFAULT_TIMEOUT_SECONDS) -> BaseEngine:
    """Create the engine called ``name``.

    ``timeout_seconds`` only applies to the ``regex`` engine; ``re`` cannot be
    interrupted and ``re2`` is linear-time.
    """
    if name == "regex":
        return RegexEngine(timeout_seconds=timeout_seconds)
    if name == "re":
        engine: BaseEngine = StdReEngine()
    elif name == "re2":
        from re_tester.engine.re2_engine import RE2Engine
        engine = RE2Engine()
    else:
        raise EngineUnavailableError(f"Unknown engine '{name}' (expected one of {', '.join(ENGINE_NAMES)})")

    if timeout_seconds is not None:
        logger.debug(f"Engine {name} ignores the {timeout_seconds}s time budget")
    return engine


__all__ = [
    "BaseEngine",
    "CompileResult",
    "CompiledMatcher",
    "EngineMatch",
    "RegexEngine",
    "StdReEngine",
    "get_engine",
]
