"""Feedback backed by plain callables."""

from __future__ import annotations

import logging
from collections.abc import Callable

from productsync.contracts.feedback import Feedback

_LOG = logging.getLogger(__name__)


def _noop(*_args: object) -> None:
    return None


class CallbackFeedback(Feedback):
    """Routes each event to an independently supplied callable.

    Callables left as ``None`` behave as no-ops::

        feedback = CallbackFeedback(info=print, progress_advance=bar.update)

    A callable that raises is logged as a warning and otherwise ignored.
    """

    def __init__(
        self,
        *,
        info: Callable[[str], object] | None = None,
        progress_start: Callable[[int], object] | None = None,
        progress_advance: Callable[[int], object] | None = None,
        progress_stop: Callable[[], object] | None = None,
    ) -> None:
        self._info = info or _noop
        self._progress_start = progress_start or _noop
        self._progress_advance = progress_advance or _noop
        self._progress_stop = progress_stop or _noop

    def info(self, message: str) -> None:
        self._call("info", self._info, message)

    def progress_start(self, total: int) -> None:
        self._call("progress_start", self._progress_start, total)

    def progress_advance(self, steps: int = 1) -> None:
        self._call("progress_advance", self._progress_advance, steps)

    def progress_stop(self) -> None:
        self._call("progress_stop", self._progress_stop)

    @staticmethod
    def _call(event: str, callback: Callable[..., object], *args: object) -> None:
        try:
            callback(*args)
        except Exception as exc:
            _LOG.warning("Feedback callback for %s failed: %s", event, exc, exc_info=True)
