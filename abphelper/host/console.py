"""Rich console implementations of the progress and notification sinks."""

from __future__ import annotations

from rich.progress import Progress, TaskID

from abphelper.scaffolder.models import Severity
from abphelper.utils import create_progress, print_success, print_warning


class RichProgressReporter:
    """Shows scaffold steps as a Rich progress bar.

    The bar is started lazily on the first active report and stopped by
    :meth:`finish`.
    """

    def __init__(self, progress: Progress | None = None) -> None:
        self._progress = progress or create_progress()
        self._task: TaskID | None = None
        self.finished = False

    def report(
        self,
        active: bool,
        message: str | None = None,
        step: int | None = None,
        total: int | None = None,
    ) -> None:
        if not active:
            self.finish()
            return
        if self._task is None:
            self._progress.start()
            self._task = self._progress.add_task(message or "", total=total)
        self._progress.update(
            self._task,
            description=message or "",
            completed=step or 0,
            total=total,
        )

    def finish(self) -> None:
        if self._task is not None:
            self._progress.stop()
            self._task = None
        self.finished = True


class ConsoleNotifier:
    """Prints user notifications: INFO in green, WARNING in yellow."""

    def notify(self, message: str, severity: Severity = Severity.INFO) -> None:
        if severity is Severity.WARNING:
            print_warning(message)
        else:
            print_success(message)
