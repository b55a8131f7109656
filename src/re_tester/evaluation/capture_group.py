from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class Present:
    """A group that took part in the match."""
    index: int
    value: str


@dataclass(frozen=True, slots=True)
class Absent:
    """A group that did not take part in the match, e.g. an untaken alternation branch."""
    index: int


CaptureGroup = Union[Present, Absent]
