"""Configuration for the regex tester."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Literal, Optional

from loguru import logger

EngineName = Literal["regex", "re", "re2"]

ENGINE_NAMES: tuple[str, ...] = ("regex", "re", "re2")
DEFAULT_ENGINE: EngineName = "regex"
DEFAULT_TIMEOUT_SECONDS = 1.0


@dataclass
class TesterConfig:
    """Which engine evaluates patterns and how long one scan may run."""

    engine: EngineName = DEFAULT_ENGINE
    timeout_seconds: Optional[float] = DEFAULT_TIMEOUT_SECONDS  # None disables the budget

    def __post_init__(self):
        if self.engine not in ENGINE_NAMES:
            raise ValueError(f"Unknown engine '{self.engine}' (expected one of {', '.join(ENGINE_NAMES)})")
        if self.timeout_seconds is not None and self.timeout_seconds <= 0:
            raise ValueError(f"timeout_seconds must be positive, got {self.timeout_seconds}")

    @classmethod
    def from_env(cls) -> TesterConfig:
        """Build a config from RE_TESTER_ENGINE and RE_TESTER_TIMEOUT.

        RE_TESTER_TIMEOUT accepts a number of seconds, or ``none``/``0`` to
        disable the budget. Unset variables keep the defaults.
        """
        engine = os.environ.get("RE_TESTER_ENGINE", DEFAULT_ENGINE)
        raw_timeout = os.environ.get("RE_TESTER_TIMEOUT")

        timeout: Optional[float] = DEFAULT_TIMEOUT_SECONDS
        if raw_timeout is not None:
            timeout = parse_timeout(raw_timeout)

        logger.debug(f"Config from environment: engine={engine}, timeout={timeout}")
        return cls(engine=engine, timeout_seconds=timeout)  # type: ignore[arg-type]


def parse_timeout(raw: str) -> Optional[float]:
    """Parse a timeout value; ``none``, ``off`` and ``0`` mean no budget."""
    value = raw.strip().lower()
    if value in ("", "none", "off"):
        return None
    seconds = float(value)
    if seconds == 0:
        return None
    return seconds
