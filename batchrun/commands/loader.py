from pathlib import Path
from typing import Iterable

from .types import CommandFileError, CommandSpec


def load_commands(path: str | Path) -> list[CommandSpec]:
    pure_path = Path(path).expanduser()

    if not pure_path.exists():
        raise CommandFileError(f"Command file not found: {pure_path}")

    if not pure_path.is_file():
        raise CommandFileError(f"Command path is not a file: {pure_path}")

    try:
        text = pure_path.read_bytes().decode("utf-8")
    except UnicodeDecodeError as exc:
        raise CommandFileError(f"{pure_path}: not valid UTF-8") from exc
    except OSError as exc:
        raise CommandFileError(f"{pure_path}: {exc.strerror or exc}") from exc

    return parse_lines(split_lines(text), source=str(pure_path))


def split_lines(text: str) -> list[str]:
    # Only "\n" ends a line, unlike str.splitlines()
    lines = [line.removesuffix("\r") for line in text.split("\n")]
    if lines[-1] == "":
        lines.pop()
    return lines


def is_command_line(line: str) -> bool:
    return len(line) > 0 and line[0] != "#"


def parse_lines(lines: Iterable[str], *, source: str = "<string>") -> list[CommandSpec]:
    specs = []

    for lineno, line in enumerate(lines, start=1):
        if not is_command_line(line):
            continue

        try:
            specs.append(parse_line(line))
        except CommandFileError as exc:
            raise CommandFileError(f"{source}:{lineno}: {exc}") from exc

    return specs


def parse_line(line: str) -> CommandSpec:
    # Plain single-space split: no quoting, "a  b" gives an empty argument.
    tokens = line.split(" ")

    if len(tokens[0]) < 1:
        raise CommandFileError(f"missing program name in {line!r}")

    return CommandSpec(tokens[0], tuple(tokens[1:]))
