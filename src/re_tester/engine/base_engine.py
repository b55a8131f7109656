from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

from re_tester.engine.compiled_matcher import CompiledMatcher


@dataclass(slots=True)
class CompileResult:
    """Either a usable matcher or the engine's error message, never both."""
    matcher: Optional[CompiledMatcher]
    error: Optional[str]

    @property
    def ok(self) -> bool:
        return self.matcher is not None


class BaseEngine(Protocol):
    name: str

    def compile(self, pattern: str) -> CompileResult:
        ...
