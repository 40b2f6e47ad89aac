"""Rich-based sync feedback display."""

from __future__ import annotations

from types import TracebackType

from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.progress import TaskID as RichTaskID

from productsync.contracts.feedback import Feedback


class RichFeedback(Feedback):
    """Live terminal progress bar powered by Rich.

    Use as a context manager so the live display is properly started/stopped::

        with RichFeedback() as feedback:
            result = Synchronizer(source, store, feedback=feedback).run()
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(stderr=True)
        self._progress = Progress(
            SpinnerColumn(finished_text="[green]✓[/green]"),
            TextColumn("{task.description:>14}"),
            BarColumn(bar_width=30),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            console=self._console,
            transient=False,
        )
        self._task_id: RichTaskID | None = None

    def __enter__(self) -> RichFeedback:
        self._progress.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self._progress.stop()

    def info(self, message: str) -> None:
        self._progress.console.log(message, markup=False)

    def progress_start(self, total: int) -> None:
        self._task_id = self._progress.add_task("[green]Products[/]", total=total)

    def progress_advance(self, steps: int = 1) -> None:
        if self._task_id is not None:
            self._progress.advance(self._task_id, steps)

    def progress_stop(self) -> None:
        if self._task_id is None:
            return
        task = self._progress.tasks[self._task_id]
        if task.total is not None and task.completed < task.total:
            self._progress.update(self._task_id, completed=task.total)
        self._progress.stop_task(self._task_id)
