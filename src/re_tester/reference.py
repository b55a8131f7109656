"""Syntax cheat sheet shown next to the editor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple


@dataclass(frozen=True)
class Code:
    code: str
    desc: str


REFERENCE: Tuple[Code, ...] = (
    Code(".", "non-newline char"),
    Code("^", "start of line"),
    Code("$", "end of line"),
    Code("\\b", "word boundary"),
    Code("\\B", "non-word boundary"),
    Code("\\A", "start of subject"),
    Code("\\Z", "end of subject"),
    Code("\\d", "decimal digit"),
    Code("\\D", "non-decimal digit"),
    Code("\\s", "whitespace"),
    Code("\\S", "non-whitespace"),
    Code("\\w", "word character"),
    Code("\\W", "non-word character"),
    Code("(a|z)", "a or z"),
    Code("[az]", "a or z"),
    Code("[^az]", "not a or z"),
    Code("[a-z]", "a through z"),
    Code("(foo)", "capture foo"),
    Code("(?:foo)", "group foo without capturing"),
    Code("a?", "0 or 1 a"),
    Code("a*", "0 or more a"),
    Code("a+", "1 or more a"),
    Code("a{3}", "3 of a"),
    Code("a{3,}", "3 or more a"),
    Code("a{3,5}", "3 through 5 a"),
)

# Enable with (?a), disable with (?-a).
MODIFIERS: Tuple[Code, ...] = (
    Code("u", "unicode"),
    Code("i", "case insensitive"),
    Code("m", "multiline"),
    Code("s", "dot matches newline"),
    Code("x", "whitespace ignored"),
)


def _format_table(title: str, entries: Iterable[Code]) -> str:
    entries = list(entries)
    width = max(len(e.code) for e in entries)
    lines = [title]
    lines.extend(f"  {e.code.ljust(width)}  {e.desc}" for e in entries)
    return "\n".join(lines)


def format_reference() -> str:
    return "\n\n".join([
        _format_table("Reference:", REFERENCE),
        _format_table("Modifiers (enable: (?a), disable: (?-a)):", MODIFIERS),
    ]) + "\n"
