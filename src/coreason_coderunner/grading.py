# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_coderunner

"""Grading of captured output against expected-output assertions."""

from typing import Sequence

from coreason_coderunner.models import Assertion, AssertionVerdict, ExecutionOutcome, GradingResult


def expected_lines(expected_output: str) -> list[str]:
    """Split an expectation into its stripped, non-blank lines."""
    return [line.strip() for line in expected_output.split("\n") if line.strip()]


def output_contains(captured_output: str, expected_output: str) -> bool:
    """Check that every expected line occurs somewhere in the output.

    Lines are matched independently as substrings of the whole output, in any
    order and position. An expectation with no non-blank lines is satisfied.
    """
    return all(line in captured_output for line in expected_lines(expected_output))


def grade(outcome: ExecutionOutcome, assertions: Sequence[Assertion] = ()) -> GradingResult:
    """Turn an execution outcome into per-assertion verdicts.

    Args:
        outcome: The outcome of a single evaluation.
        assertions: Checks to apply, in the order the verdicts should appear.

    Returns:
        GradingResult: One verdict per assertion. A failed run fails every verdict
        and the aggregate.
    """
    failed = outcome.failure is not None
    verdicts = [
        AssertionVerdict(
            name=assertion.name,
            passed=not failed and output_contains(outcome.captured_output, assertion.expected_output),
            expected=assertion.expected_output,
            actual=outcome.captured_output,
        )
        for assertion in assertions
    ]

    return GradingResult(
        output=outcome.captured_output,
        error=outcome.failure,
        verdicts=verdicts,
        all_passed=not failed and all(verdict.passed for verdict in verdicts),
    )
