from .loader import (
    is_command_line,
    load_commands,
    parse_line,
    parse_lines,
    split_lines,
)
from .types import CommandFileError, CommandSpec

__all__ = [
    "load_commands",
    "parse_line",
    "parse_lines",
    "split_lines",
    "is_command_line",
    "CommandSpec",
    "CommandFileError",
]
