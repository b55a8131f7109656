"""Pattern compilation, match collection and report formatting."""

from re_tester.evaluation.capture_group import Absent, CaptureGroup, Present
from re_tester.evaluation.evaluation_outcome import (
    BudgetExceeded,
    CompileError,
    Empty,
    EvaluationOutcome,
    Matches,
    NoMatches,
)
from re_tester.evaluation.evaluator import evaluate, evaluate_outcome
from re_tester.evaluation.match_formatter import (
    NO_MATCH,
    collect_matches,
    debug_quote,
    format_captures,
    format_outcome,
)
from re_tester.evaluation.match_result import MatchResult
from re_tester.evaluation.pattern_compiler import compile_pattern

__all__ = [
    # Model
    "Absent",
    "CaptureGroup",
    "MatchResult",
    "Present",
    # Outcomes
    "BudgetExceeded",
    "CompileError",
    "Empty",
    "EvaluationOutcome",
    "Matches",
    "NoMatches",
    # Pipeline
    "NO_MATCH",
    "collect_matches",
    "compile_pattern",
    "debug_quote",
    "evaluate",
    "evaluate_outcome",
    "format_captures",
    "format_outcome",
]
