"""Fan-out feedback with per-sink failure isolation."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable

from productsync.contracts.feedback import Feedback

_LOG = logging.getLogger(__name__)


class CompositeFeedback(Feedback):
    """Delivers every event to each sink, in order.

    A sink that raises is logged and skipped for that event only; the
    remaining sinks still receive it and the caller never sees the error.
    The most recent ``max_errors`` isolated failures are kept on
    :attr:`errors` as ``(sink, method, exc)``.
    """

    def __init__(self, sinks: Iterable[Feedback], *, max_errors: int = 100) -> None:
        if max_errors < 1:
            raise ValueError("max_errors must be at least 1")
        self._sinks: tuple[Feedback, ...] = tuple(sinks)
        self.errors: deque[tuple[Feedback, str, Exception]] = deque(maxlen=max_errors)

    @property
    def sinks(self) -> tuple[Feedback, ...]:
        return self._sinks

    def clear_errors(self) -> None:
        self.errors.clear()

    def info(self, message: str) -> None:
        self._dispatch("info", message)

    def progress_start(self, total: int) -> None:
        self._dispatch("progress_start", total)

    def progress_advance(self, steps: int = 1) -> None:
        self._dispatch("progress_advance", steps)

    def progress_stop(self) -> None:
        self._dispatch("progress_stop")

    def _dispatch(self, method: str, *args: object) -> None:
        for sink in self._sinks:
            try:
                getattr(sink, method)(*args)
            except Exception as exc:
                self.errors.append((sink, method, exc))
                _LOG.warning("Feedback sink %s failed in %s: %s", type(sink).__name__, method, exc, exc_info=True)
