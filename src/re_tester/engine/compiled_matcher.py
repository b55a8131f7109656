from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Optional

from re_tester.engine.engine_match import EngineMatch


class CompiledMatcher:
    """A compiled pattern, ready to scan one subject.

    Matchers are created per evaluation and never shared between calls.
    """

    def __init__(self, engine_name: str, compiled: Any):
        self.engine_name = engine_name
        self._compiled = compiled
        self.group_count: int = compiled.groups

    def _search(self, subject: str, pos: int) -> Optional[Any]:
        return self._compiled.search(subject, pos)

    def captures_iter(self, subject: str) -> Iterator[EngineMatch]:
        """Yield every non-overlapping match, left to right.

        An empty match ending where the previous match ended is not reported;
        the search resumes one character further on instead.
        """
        pos = 0
        last_end: Optional[int] = None
        while pos <= len(subject):
            m = self._search(subject, pos)
            if m is None:
                return
            start, end = m.span()
            if start == end and end == last_end:
                pos = end + 1
                continue
            yield EngineMatch.from_match(m, self.group_count)
            pos = last_end = end
