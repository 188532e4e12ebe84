import logging
import subprocess
import time

from batchrun.commands import CommandSpec

from .types import CommandResult, NullReporter, Outcome, Reporter

logger = logging.getLogger(__name__)


class CommandExecutor:
    def __init__(self, reporter: Reporter | None = None):
        self.reporter = reporter or NullReporter()

    def execute(
        self, spec: CommandSpec, index: int = 1, total: int = 1
    ) -> CommandResult:
        self.reporter.command_started(index, total, spec)
        result = self._run(spec, index)
        self.reporter.command_finished(result)
        return result

    def _run(self, spec: CommandSpec, index: int) -> CommandResult:
        start = time.monotonic()
        try:
            proc = subprocess.Popen(
                spec.argv,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as exc:
            logger.debug("could not start %r: %s", spec.line, exc)
            return CommandResult(index, spec, Outcome.LAUNCH_ERROR, "", 0.0, error=exc)

        # stdout and stderr share one pipe, communicate() buffers all of it
        output, _ = proc.communicate()
        duration = time.monotonic() - start

        outcome = Outcome.SUCCESS if proc.returncode == 0 else Outcome.FAILURE
        logger.debug(
            "%r exited with %d after %.3fs", spec.line, proc.returncode, duration
        )
        return CommandResult(
            index, spec, outcome, output or "", duration, returncode=proc.returncode
        )
