from __future__ import annotations

from typing import Optional

from loguru import logger

from re_tester.engine import BaseEngine, get_engine
from re_tester.errors import BudgetExceededError
from re_tester.evaluation.evaluation_outcome import (
    BudgetExceeded,
    CompileError,
    Empty,
    EvaluationOutcome,
    Matches,
    NoMatches,
)
from re_tester.evaluation.match_formatter import collect_matches, format_outcome
from re_tester.evaluation.pattern_compiler import compile_pattern


def evaluate_outcome(pattern: str, subject: str, engine: Optional[BaseEngine] = None) -> EvaluationOutcome:
    """Compile ``pattern`` and scan ``subject``, resolving every state to an outcome.

    The pattern is compiled from scratch on every call.
    """
    if not pattern:
        return Empty()

    if engine is None:
        engine = get_engine()

    compiled = compile_pattern(pattern, engine)
    if compiled.matcher is None:
        return CompileError(compiled.error or "")

    try:
        results = collect_matches(compiled.matcher, subject)
    except BudgetExceededError as exc:
        logger.warning(f"Evaluation of {pattern!r} stopped: {exc}")
        return BudgetExceeded(message=str(exc), timeout_seconds=exc.timeout_seconds)

    if not results:
        return NoMatches()
    return Matches(results)


def evaluate(pattern: str, subject: str, engine: Optional[BaseEngine] = None) -> str:
    """Return the text report for ``pattern`` against ``subject``.

    Empty pattern gives ``""``, an invalid pattern gives the engine's
    diagnostic, no occurrence gives ``None``, and otherwise one block per
    match lists every capture group.
    """
    return format_outcome(evaluate_outcome(pattern, subject, engine))
