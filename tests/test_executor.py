# tests/test_executor.py
from __future__ import annotations

import sys

import pytest

from batchrun.commands import CommandSpec
from batchrun.executor import CommandExecutor, CommandResult, Outcome


def _py(code: str) -> CommandSpec:
    """
    Build a command running `python -c <code>` with the current interpreter.
    No shell is involved, so the code is passed as a single argument.
    """
    return CommandSpec(sys.executable, ("-c", code))


class RecordingReporter:
    def __init__(self) -> None:
        self.events: list[tuple] = []

    def command_started(self, index: int, total: int, spec: CommandSpec) -> None:
        self.events.append(("start", index, total, spec))

    def command_finished(self, result: CommandResult) -> None:
        self.events.append(("finish", result.index, result.outcome))


def test_exit_zero_is_success() -> None:
    result = CommandExecutor().execute(_py("print('hello')"))

    assert result.outcome is Outcome.SUCCESS
    assert result.passed
    assert result.returncode == 0
    assert result.output.strip() == "hello"
    assert result.elapsed_s > 0
    assert result.error is None


def test_nonzero_exit_is_failure() -> None:
    result = CommandExecutor().execute(_py("raise SystemExit(5)"))

    assert result.outcome is Outcome.FAILURE
    assert not result.passed
    assert result.returncode == 5


def test_missing_program_is_launch_error(tmp_path) -> None:
    spec = CommandSpec(str(tmp_path / "no-such-binary"), ("arg",))

    result = CommandExecutor().execute(spec)

    assert result.outcome is Outcome.LAUNCH_ERROR
    assert not result.passed
    assert result.returncode is None
    assert isinstance(result.error, OSError)
    assert result.elapsed_s == 0.0
    assert result.output == ""


def test_stdout_and_stderr_are_merged() -> None:
    code = (
        "import sys; "
        "sys.stdout.write('out\\n'); sys.stdout.flush(); "
        "sys.stderr.write('err\\n'); sys.stderr.flush()"
    )

    result = CommandExecutor().execute(_py(code))

    assert result.output.splitlines() == ["out", "err"]


def test_failure_output_is_captured() -> None:
    result = CommandExecutor().execute(
        _py("import sys; print('boom', file=sys.stderr); sys.exit(2)")
    )

    assert result.outcome is Outcome.FAILURE
    assert "boom" in result.output


def test_invalid_utf8_output_is_replaced() -> None:
    result = CommandExecutor().execute(
        _py("import sys; sys.stdout.buffer.write(b'ok \\xff')")
    )

    assert result.passed
    assert result.output.startswith("ok ")
    assert "\ufffd" in result.output


def test_arguments_are_passed_verbatim() -> None:
    spec = CommandSpec(
        sys.executable, ("-c", "import sys; print(sys.argv[1:])", "a", "", "b")
    )

    result = CommandExecutor().execute(spec)

    assert result.output.strip() == "['a', '', 'b']"


@pytest.mark.parametrize("code", ["pass", "raise SystemExit(1)"])
def test_start_and_finish_are_reported(code: str) -> None:
    reporter = RecordingReporter()
    spec = _py(code)

    result = CommandExecutor(reporter).execute(spec, index=3, total=7)

    assert result.index == 3
    assert reporter.events == [
        ("start", 3, 7, spec),
        ("finish", 3, result.outcome),
    ]


def test_launch_error_is_reported(tmp_path) -> None:
    reporter = RecordingReporter()

    CommandExecutor(reporter).execute(CommandSpec(str(tmp_path / "missing")))

    assert [e[0] for e in reporter.events] == ["start", "finish"]
    assert reporter.events[-1][2] is Outcome.LAUNCH_ERROR
