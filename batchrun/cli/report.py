from __future__ import annotations

import sys
import threading
from typing import TextIO

from batchrun.commands import CommandSpec
from batchrun.config import RunConfig
from batchrun.executor import CommandResult, Outcome, RunSummary


def format_elapsed(seconds: float) -> str:
    return f"{seconds:.3f}s"


class ConsoleReporter:
    """Prints status lines for commands running on several threads.

    Each notification goes out as one write under a lock so lines from
    different commands never interleave.
    """

    def __init__(self, config: RunConfig, stream: TextIO | None = None):
        self.config = config
        self.stream = stream or sys.stdout
        self._lock = threading.Lock()

    def command_started(self, index: int, total: int, spec: CommandSpec) -> None:
        self._emit(f"START: {spec.line} ({index}/{total})\n")

    def command_finished(self, result: CommandResult) -> None:
        line = result.spec.line
        elapsed = format_elapsed(result.elapsed_s)

        match result.outcome:
            case Outcome.SUCCESS:
                text = f"PASS : {line} ({elapsed})\n"
                if self.config.verbose:
                    text += f"{result.output}\n\n"
            case Outcome.FAILURE:
                text = (
                    f"FAIL : {line}\n"
                    f"{result.output}\n"
                    f"=====: {line} ({elapsed}, exit code = {result.returncode})\n"
                )
            case Outcome.LAUNCH_ERROR:
                text = (
                    f"FAIL : {line}\n"
                    f"could not start: {result.error}\n"
                    f"=====: {line} ({elapsed})\n"
                )
            case _:
                raise AssertionError("Unreachable")

        self._emit(text)

    def summary(self, summary: RunSummary) -> None:
        self._emit(
            f"Result: {summary.passed} passed, {summary.failed} failed, {summary.total} total\n"
            f"Elapsed time: {format_elapsed(summary.elapsed_s)}\n"
        )

    def _emit(self, text: str) -> None:
        with self._lock:
            self.stream.write(text)
            self.stream.flush()
