"""Reactive cells and the controller that keeps the report in step with its inputs."""

from re_tester.reactive.memo import Memo
from re_tester.reactive.reactive_controller import ReactiveController
from re_tester.reactive.signal import Signal

__all__ = [
    "Memo",
    "ReactiveController",
    "Signal",
]
