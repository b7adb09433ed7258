"""Tests for the example harness."""

import subprocess
import sys
from unittest.mock import patch

import pytest

from precip_analyzer.examples import (
    ANALYZER_COMMAND,
    BUILD_COMMAND,
    EXAMPLES,
    main,
    run_examples,
)


class FakeRunner:
    """Records commands and returns scripted exit codes."""

    def __init__(self, codes=None):
        self.commands = []
        self.codes = list(codes or [])

    def __call__(self, command):
        self.commands.append(tuple(command))
        code = self.codes.pop(0) if self.codes else 0
        return subprocess.CompletedProcess(command, code)


class TestExampleDefinitions:
    """Test the literal example arguments."""

    def test_three_examples(self):
        assert len(EXAMPLES) == 3

    def test_seattle_arguments(self):
        assert EXAMPLES[0].args == (
            "--city", "Seattle, WA", "--start", "2026-02-09", "--end", "2026-02-16", "--unit", "inch",
        )

    def test_new_york_is_verbose(self):
        assert EXAMPLES[1].args == (
            "--city", "New York", "--start", "2026-02-09", "--end", "2026-02-13", "--verbose",
        )

    def test_miami_uses_coordinates(self):
        assert EXAMPLES[2].args == (
            "--lat", "25.7617", "--lon", "-80.1918", "--start", "2026-02-09", "--end", "2026-02-16",
        )

    def test_build_uses_current_interpreter(self):
        assert BUILD_COMMAND[0] == sys.executable
        assert ANALYZER_COMMAND == (sys.executable, "-m", "precip_analyzer")


class TestRunExamples:
    """Test sequencing and error propagation."""

    def test_build_once_then_examples_in_order(self):
        runner = FakeRunner()

        code = run_examples(runner=runner, echo=lambda line: None)

        assert code == 0
        assert runner.commands == [BUILD_COMMAND] + [ANALYZER_COMMAND + e.args for e in EXAMPLES]

    def test_arguments_not_mutated(self):
        before = [e.args for e in EXAMPLES]
        run_examples(runner=FakeRunner(), echo=lambda line: None)
        run_examples(runner=FakeRunner(), echo=lambda line: None)
        assert [e.args for e in EXAMPLES] == before

    def test_continue_on_error_runs_everything(self):
        runner = FakeRunner(codes=[1, 2, 0, 0])

        code = run_examples(runner=runner, echo=lambda line: None)

        assert len(runner.commands) == 4
        assert code == 0

    def test_failing_last_example_still_exits_zero(self):
        runner = FakeRunner(codes=[0, 0, 0, 7])

        code = run_examples(runner=runner, echo=lambda line: None)

        assert code == 0
        assert len(runner.commands) == 4

    def test_fail_fast_stops_at_build(self):
        runner = FakeRunner(codes=[1])

        code = run_examples(runner=runner, continue_on_error=False, echo=lambda line: None)

        assert code == 1
        assert runner.commands == [BUILD_COMMAND]

    def test_fail_fast_stops_at_example(self):
        runner = FakeRunner(codes=[0, 0, 5])

        code = run_examples(runner=runner, continue_on_error=False, echo=lambda line: None)

        assert code == 5
        assert len(runner.commands) == 3

    def test_progress_output(self):
        lines = []

        run_examples(runner=FakeRunner(), echo=lines.append)

        assert lines[0] == "Building precip-analyzer..."
        assert "=== Example 1: Seattle next 7 days with ensemble ===" in lines
        assert "=== Example 2: New York with verbose output ===" in lines
        assert "=== Example 3: Coordinates (Miami) ===" in lines
        assert lines[-1] == "All examples completed successfully!"


class TestMain:
    """Test the harness entry point."""

    def test_fail_fast_flag(self):
        with patch.object(sys, "argv", ["precip-examples", "--fail-fast"]):
            with patch("precip_analyzer.examples.run_examples", return_value=4) as run:
                with pytest.raises(SystemExit) as exc:
                    main()

        run.assert_called_once_with(continue_on_error=False)
        assert exc.value.code == 4
