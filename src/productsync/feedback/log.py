"""Feedback that writes events to a :mod:`logging` logger."""

from __future__ import annotations

import logging

from productsync.contracts.feedback import Feedback

_LOG = logging.getLogger(__name__)


class LoggingFeedback(Feedback):
    """Logs lifecycle messages and progress counts.

    Progress entries carry the running count against the declared total,
    e.g. ``progress advance 3/10``. Counts past the total are logged as-is.
    """

    def __init__(self, logger: logging.Logger | None = None, *, level: int = logging.INFO) -> None:
        self._logger = logger or _LOG
        self._level = level
        self._total = 0
        self._completed = 0

    def info(self, message: str) -> None:
        self._logger.log(self._level, "%s", message)

    def progress_start(self, total: int) -> None:
        self._total = total
        self._completed = 0
        self._logger.log(self._level, "progress start %d/%d", self._completed, self._total)

    def progress_advance(self, steps: int = 1) -> None:
        self._completed += steps
        self._logger.log(self._level, "progress advance %d/%d", self._completed, self._total)

    def progress_stop(self) -> None:
        self._logger.log(self._level, "progress stop %d/%d", self._completed, self._total)
