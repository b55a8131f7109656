from __future__ import annotations

from re_tester.engine.base_engine import BaseEngine, CompileResult


def compile_pattern(pattern: str, engine: BaseEngine) -> CompileResult:
    """Compile ``pattern`` with ``engine``, Unicode semantics on.

    The result carries either a matcher or the engine's error message exactly
    as the engine worded it. Callers handle the empty pattern themselves;
    it is not a compile error.
    """
    if not pattern:
        raise ValueError("compile_pattern() needs a non-empty pattern")
    return engine.compile(pattern)
