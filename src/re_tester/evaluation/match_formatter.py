"""Text rendering of evaluation outcomes.

A report lists one block per match, in scan order, and every group of the
pattern inside each block:

    Some(Captures({
        0: Some("ab"),
        1: Some("a"),
        2: None,
    })),

A pattern without any match renders as ``None``.
"""

from __future__ import annotations

from collections.abc import Iterable

from re_tester.engine.compiled_matcher import CompiledMatcher
from re_tester.evaluation.byte_text import utf8_offsets
from re_tester.evaluation.capture_group import CaptureGroup, Present
from re_tester.evaluation.evaluation_outcome import (
    BudgetExceeded,
    CompileError,
    Empty,
    EvaluationOutcome,
    Matches,
    NoMatches,
)
from re_tester.evaluation.match_result import MatchResult

NO_MATCH = "None"
BLOCK_OPEN = "Some(Captures({\n"
BLOCK_CLOSE = "})),\n"

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\0": "\\0",
}


def debug_quote(text: str) -> str:
    """Quote ``text`` the way a debug string is printed.

    Lone surrogates left by undecodable input bytes print as ``\\xNN``.
    """
    out = ['"']
    for ch in text:
        code = ord(ch)
        if ch in _ESCAPES:
            out.append(_ESCAPES[ch])
        elif 0xDC80 <= code <= 0xDCFF:
            out.append(f"\\x{code - 0xDC00:02x}")
        elif not ch.isprintable():
            out.append(f"\\u{{{code:x}}}")
        else:
            out.append(ch)
    out.append('"')
    return "".join(out)


def collect_matches(matcher: CompiledMatcher, subject: str) -> tuple[MatchResult, ...]:
    """Scan ``subject`` and return every match in scan order.

    Raises BudgetExceededError when the matcher's time budget runs out.
    """
    offsets = utf8_offsets(subject)
    return tuple(MatchResult.from_engine_match(m, subject, offsets) for m in matcher.captures_iter(subject))


def format_group(group: CaptureGroup) -> str:
    if isinstance(group, Present):
        return f"    {group.index}: Some({debug_quote(group.value)}),\n"
    return f"    {group.index}: None,\n"


def format_match(result: MatchResult) -> str:
    return BLOCK_OPEN + "".join(format_group(g) for g in result.groups) + BLOCK_CLOSE


def format_matches(results: Iterable[MatchResult]) -> str:
    blocks = "".join(format_match(r) for r in results)
    return blocks or NO_MATCH


def format_captures(matcher: CompiledMatcher, subject: str) -> str:
    """Scan ``subject`` with ``matcher`` and render every match."""
    return format_matches(collect_matches(matcher, subject))


def format_outcome(outcome: EvaluationOutcome) -> str:
    if isinstance(outcome, Empty):
        return ""
    if isinstance(outcome, (CompileError, BudgetExceeded)):
        return outcome.message
    if isinstance(outcome, NoMatches):
        return NO_MATCH
    if isinstance(outcome, Matches):
        return format_matches(outcome.results)
    raise TypeError(f"Unknown evaluation outcome: {outcome!r}")
