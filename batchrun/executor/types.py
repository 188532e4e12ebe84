from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Protocol

from batchrun.commands import CommandSpec


class Outcome(Enum):
    SUCCESS = auto()
    FAILURE = auto()
    LAUNCH_ERROR = auto()


@dataclass(frozen=True)
class CommandResult:
    index: int
    spec: CommandSpec
    outcome: Outcome
    output: str
    elapsed_s: float
    returncode: int | None = None
    error: OSError | None = None

    @property
    def passed(self) -> bool:
        return self.outcome is Outcome.SUCCESS


@dataclass(frozen=True)
class RunSummary:
    passed: int
    failed: int
    elapsed_s: float

    @property
    def total(self) -> int:
        return self.passed + self.failed

    @property
    def ok(self) -> bool:
        return self.failed == 0


@dataclass(frozen=True)
class RunResult:
    results: tuple[CommandResult, ...]
    summary: RunSummary


class Reporter(Protocol):
    def command_started(self, index: int, total: int, spec: CommandSpec) -> None: ...

    def command_finished(self, result: CommandResult) -> None: ...


class NullReporter:
    def command_started(self, index: int, total: int, spec: CommandSpec) -> None:
        pass

    def command_finished(self, result: CommandResult) -> None:
        pass
