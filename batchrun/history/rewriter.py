"""Reorder a command file so the slowest commands come first.

Scheduling the longest commands early keeps the slot pool busy towards the
end of the next run instead of leaving one long straggler.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from batchrun.executor import CommandResult

from .types import HistoryRewriteError

logger = logging.getLogger(__name__)

BACKUP_SUFFIX = ".old"


def backup_path(path: str | Path) -> Path:
    path = Path(path)
    return path.with_name(path.name + BACKUP_SUFFIX)


def order_by_elapsed(results: Iterable[CommandResult]) -> list[CommandResult]:
    """Slowest first. Equal durations keep their input order."""
    return sorted(results, key=lambda result: result.elapsed_s, reverse=True)


def rewrite_by_elapsed(path: str | Path, results: Iterable[CommandResult]) -> Path:
    """Rewrite ``path`` slowest first, keeping the previous file as ``<path>.old``.

    The original file is only replaced after it has been renamed to the
    backup name. If that rename fails nothing is written.
    """
    path = Path(path)
    backup = backup_path(path)
    ordered = order_by_elapsed(results)

    try:
        backup.unlink()
    except FileNotFoundError:
        pass
    except OSError as exc:
        logger.debug("could not remove stale backup %s: %s", backup, exc)

    try:
        path.rename(backup)
    except OSError as exc:
        raise HistoryRewriteError(
            f"failed to rename {path} to {backup}: {exc}"
        ) from exc

    try:
        with path.open("x", encoding="utf-8", newline="\n") as fh:
            for result in ordered:
                fh.write(result.spec.line + "\n")
    except OSError as exc:
        raise HistoryRewriteError(f"failed to create {path}: {exc}") from exc

    logger.debug(
        "rewrote %s with %d commands, backup at %s", path, len(ordered), backup
    )
    return backup
