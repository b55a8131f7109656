from dataclasses import dataclass
from typing import Any, Optional, Tuple

Span = Tuple[int, int]


@dataclass(frozen=True, slots=True)
class EngineMatch:
    """Character spans of every group of one match; None where a group did not participate."""
    spans: Tuple[Optional[Span], ...]

    @classmethod
    def from_match(cls, m: Any, group_count: int) -> "EngineMatch":
        spans = []
        for index in range(group_count + 1):
            span = m.span(index)
            spans.append(None if span == (-1, -1) else span)
        return cls(spans=tuple(spans))
