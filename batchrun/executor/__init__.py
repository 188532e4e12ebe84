from .coordinator import RunCoordinator
from .executor import CommandExecutor
from .pool import SlotPool
from .types import (
    CommandResult,
    NullReporter,
    Outcome,
    Reporter,
    RunResult,
    RunSummary,
)

__all__ = [
    "RunCoordinator",
    "CommandExecutor",
    "SlotPool",
    "CommandResult",
    "Outcome",
    "Reporter",
    "NullReporter",
    "RunResult",
    "RunSummary",
]
