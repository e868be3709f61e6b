from unittest.mock import patch

import pytest

from coreason_coderunner import run
from coreason_coderunner.config import RunnerConfig
from coreason_coderunner.models import Assertion, GradingResult


def test_hello_world() -> None:
    result = run('console.log("Hello, World!")')
    assert result == GradingResult(output="Hello, World!", error=None, verdicts=[], all_passed=True)


def test_console_error_is_output_not_failure() -> None:
    result = run('console.error("bad")')
    assert result.output == "Error: bad"
    assert result.error is None
    assert result.all_passed is True


def test_thrown_primitive() -> None:
    result = run('throw "boom"')
    assert result.output == ""
    assert result.error == "boom"
    assert result.all_passed is False


def test_mixed_verdicts() -> None:
    result = run(
        'console.log("Hello")',
        [
            Assertion(name="t1", expected_output="Hello"),
            Assertion(name="t2", expected_output="Goodbye"),
        ],
    )
    assert result.verdicts[0].passed is True
    assert result.verdicts[1].passed is False
    assert result.verdicts[1].expected == "Goodbye"
    assert result.verdicts[1].actual == "Hello"
    assert result.all_passed is False


def test_containment_match() -> None:
    result = run("console.log('start middle end')", [Assertion(name="t", expected_output="middle")])
    assert result.verdicts[0].passed is True


def test_multiline_expectation_across_separate_lines() -> None:
    result = run(
        "console.log('Line 1'); console.log('Line 2')",
        [Assertion(name="t", expected_output="Line 1\nLine 2")],
    )
    assert result.verdicts[0].passed is True


def test_failure_after_output() -> None:
    result = run(
        'console.log("a"); console.log("b"); throw new Error("late")',
        [Assertion(name="t", expected_output="a")],
    )
    assert result.output == "a\nb"
    assert result.error == "late"
    assert result.verdicts[0].passed is False


@pytest.mark.parametrize("count", [0, 1, 5])
def test_line_count_matches_calls(count: int) -> None:
    source = "".join(f"console.log({i});" for i in range(count))
    output = run(source).output
    assert (output.split("\n") if output else []) == [str(i) for i in range(count)]


def test_audit_hook_receives_source() -> None:
    with patch("coreason_coderunner.runner.AuditLogger") as mock_audit:
        run("console.log(1)", config=RunnerConfig(enable_audit_logging=True))

    mock_audit.assert_called_once_with(enabled=True)
    mock_audit.return_value.log_pre_execution.assert_called_once_with("console.log(1)", "javascript")


def test_config_limits_reach_engine() -> None:
    result = run("while (true) {}", config=RunnerConfig(execution_timeout=0.5))
    assert result.error == "Execution timed out after 0.5s"
    assert result.all_passed is False
