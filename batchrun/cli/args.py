from __future__ import annotations

import argparse
import sys

from batchrun import __version__


USAGE_EXIT_CODE = 1


class _Parser(argparse.ArgumentParser):
    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(USAGE_EXIT_CODE, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="batchrun",
        description="Run the commands listed in a file, several at a time.",
    )

    parser.add_argument(
        "file",
        help="Command list file, one command per line ('#' starts a comment line)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Settings file (.yaml/.yml, .toml, .json)",
    )
    parser.add_argument(
        "-c",
        "--concurrency",
        type=int,
        default=None,
        help="Maximum number of commands running at once (default: 20)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=None,
        help="Print the output of passing commands too",
    )
    parser.add_argument(
        "-w",
        "--rewrite",
        action="store_true",
        default=None,
        help="Rewrite the command file ordered by elapsed time, slowest first",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Diagnostic log level on stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser
