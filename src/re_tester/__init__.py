"""Interactive regular-expression tester.

Compiles a pattern, scans a subject and reports every match with all of its
capture groups, recomputed live as either input changes.
"""

from re_tester.engine import get_engine
from re_tester.errors import BudgetExceededError, EngineUnavailableError, ReTesterError
from re_tester.evaluation import evaluate, evaluate_outcome
from re_tester.reactive import ReactiveController
from re_tester.tester_config import TesterConfig

__all__ = [
    "BudgetExceededError",
    "EngineUnavailableError",
    "ReTesterError",
    "ReactiveController",
    "TesterConfig",
    "evaluate",
    "evaluate_outcome",
    "get_engine",
]
