import logging
import time
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Sequence

from batchrun.commands import CommandSpec
from batchrun.config import RunConfig

from .executor import CommandExecutor
from .pool import SlotPool
from .types import CommandResult, Reporter, RunResult, RunSummary

logger = logging.getLogger(__name__)


class RunCoordinator:
    def __init__(
        self,
        config: RunConfig,
        reporter: Reporter | None = None,
        executor: CommandExecutor | None = None,
    ):
        if executor is not None and reporter is not None:
            raise ValueError("pass the reporter to the executor, not to both")
        self.config = config
        self.executor = executor or CommandExecutor(reporter)

    def run(self, specs: Sequence[CommandSpec]) -> RunResult:
        total = len(specs)
        pool = SlotPool(self.config.concurrency)
        futures: list[Future[CommandResult]] = []

        logger.debug("running %d commands, concurrency %d", total, pool.capacity)
        start = time.monotonic()

        # Leaving the with-block joins every worker, even on error
        with ThreadPoolExecutor(
            max_workers=pool.capacity, thread_name_prefix="batchrun"
        ) as workers:
            for index, spec in enumerate(specs, start=1):
                pool.acquire()
                try:
                    futures.append(
                        workers.submit(self._execute, pool, spec, index, total)
                    )
                except BaseException:
                    pool.release()
                    raise

        results = tuple(future.result() for future in futures)
        elapsed = time.monotonic() - start

        passed = sum(1 for result in results if result.passed)
        summary = RunSummary(passed, len(results) - passed, elapsed)
        return RunResult(results, summary)

    def _execute(
        self, pool: SlotPool, spec: CommandSpec, index: int, total: int
    ) -> CommandResult:
        try:
            return self.executor.execute(spec, index, total)
        finally:
            pool.release()
