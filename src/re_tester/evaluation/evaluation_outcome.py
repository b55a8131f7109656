"""Tagged outcome of one evaluation.

Every state the tester can end up in is a value here; nothing about user
input is reported by raising.
"""

from dataclasses import dataclass
from typing import Tuple, Union

from re_tester.evaluation.match_result import MatchResult


@dataclass(frozen=True, slots=True)
class Empty:
    """The pattern is empty; there is nothing to evaluate."""


@dataclass(frozen=True, slots=True)
class CompileError:
    message: str  # engine diagnostic, verbatim


@dataclass(frozen=True, slots=True)
class NoMatches:
    """The pattern compiled but does not occur in the subject."""


@dataclass(frozen=True, slots=True)
class Matches:
    results: Tuple[MatchResult, ...]  # scan order, never empty


@dataclass(frozen=True, slots=True)
class BudgetExceeded:
    message: str
    timeout_seconds: float


EvaluationOutcome = Union[Empty, CompileError, NoMatches, Matches, BudgetExceeded]
