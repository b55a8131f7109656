"""Exceptions raised by re_tester.

User input never raises: bad patterns, missing matches and blown time budgets
are all turned into report text. These exceptions cover configuration faults
and the internal signal used to carry a budget overrun out of a scan.
"""


class ReTesterError(Exception):
    """Base class for re_tester errors."""
    pass


class EngineUnavailableError(ReTesterError):
    """Raised when an engine name is unknown or its library is not installed."""
    pass


class BudgetExceededError(ReTesterError):
    """Raised by a matcher when a scan runs past its time budget."""

    def __init__(self, timeout_seconds: float):
        self.timeout_seconds = timeout_seconds
        super().__init__(f"evaluation exceeded the {timeout_seconds:g}s time budget")
