from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

from re_tester.engine.engine_match import EngineMatch, Span
from re_tester.evaluation.capture_group import Absent, CaptureGroup, Present


@dataclass(frozen=True, slots=True)
class MatchResult:
    span: Span                         # UTF-8 byte span of the whole match
    groups: Tuple[CaptureGroup, ...]   # every group of the pattern, index 0 first

    @classmethod
    def from_engine_match(cls, engine_match: EngineMatch, subject: str, offsets: Sequence[int]) -> MatchResult:
        """Build a result from character spans; ``offsets`` maps them to byte offsets."""
        whole = engine_match.spans[0]
        if whole is None:
            raise ValueError("group 0 of a match has no span")

        groups: list[CaptureGroup] = []
        for index, span in enumerate(engine_match.spans):
            if span is None:
                groups.append(Absent(index))
            else:
                start, end = span
                groups.append(Present(index, subject[start:end]))
        return cls(span=(offsets[whole[0]], offsets[whole[1]]), groups=tuple(groups))

    @property
    def text(self) -> str:
        whole = self.groups[0]
        return whole.value if isinstance(whole, Present) else ""
