"""Feedback contract for synchronization lifecycle and progress events.

This is engine-level instrumentation. The synchronizer emits events and never
inspects what a sink does with them; sinks must not raise.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class Feedback(ABC):
    """Observer interface for a reconciliation pass."""

    @abstractmethod
    def info(self, message: str) -> None:
        """A lifecycle message."""
        ...  # pragma: no cover

    @abstractmethod
    def progress_start(self, total: int) -> None:
        """*total* advances are expected to follow."""
        ...  # pragma: no cover

    @abstractmethod
    def progress_advance(self, steps: int = 1) -> None:
        """*steps* units of work completed."""
        ...  # pragma: no cover

    @abstractmethod
    def progress_stop(self) -> None:
        """The progress phase is over."""
        ...  # pragma: no cover
