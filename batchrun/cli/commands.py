from __future__ import annotations

import argparse
import dataclasses
import logging
import sys

from batchrun import __version__
from batchrun.commands import CommandFileError, CommandSpec, load_commands
from batchrun.config import ConfigError, RunConfig, load_settings
from batchrun.executor import RunCoordinator, RunResult
from batchrun.history import HistoryRewriteError, rewrite_by_elapsed

from .args import build_parser
from .report import ConsoleReporter


def run_cli(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_level)

    print(f"batchrun version: {__version__}", flush=True)

    try:
        config = _build_config(args)
        specs = load_commands(args.file)
    except (ConfigError, CommandFileError) as exc:
        print(str(exc), file=sys.stderr)
        return 1

    try:
        return cmd_run(args, config, specs)
    except KeyboardInterrupt:
        return 130


def main() -> None:
    sys.exit(run_cli())


def cmd_run(
    args: argparse.Namespace, config: RunConfig, specs: list[CommandSpec]
) -> int:
    reporter = ConsoleReporter(config)
    rr = RunCoordinator(config, reporter).run(specs)
    reporter.summary(rr.summary)

    if config.rewrite:
        _rewrite_history(args.file, rr)

    return 0 if rr.summary.ok else 1


def _build_config(args: argparse.Namespace) -> RunConfig:
    config = load_settings(args.config) if args.config else RunConfig()

    overrides = {
        name: getattr(args, name)
        for name in ("concurrency", "verbose", "rewrite")
        if getattr(args, name) is not None
    }
    return dataclasses.replace(config, **overrides)


def _rewrite_history(path: str, rr: RunResult) -> None:
    try:
        rewrite_by_elapsed(path, rr.results)
    except HistoryRewriteError as exc:
        print(str(exc), file=sys.stderr)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
