"""No-op feedback."""

from __future__ import annotations

from productsync.contracts.feedback import Feedback


class NoFeedback(Feedback):
    """No-op implementation used when no feedback sink is supplied."""

    def info(self, message: str) -> None:
        pass

    def progress_start(self, total: int) -> None:
        pass

    def progress_advance(self, steps: int = 1) -> None:
        pass

    def progress_stop(self) -> None:
        pass
