# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_coderunner

"""Data models for code runs and their grading."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _RunnerModel(BaseModel):
    # Lesson metadata and UI consumers speak camelCase; Python callers use field names.
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class Assertion(_RunnerModel):
    """A named expected-output check supplied with an exercise.

    Attributes:
        name: Label shown next to the verdict.
        expected_output: Text that must appear in the captured output. May be
            multi-line; a blank value always passes.
        input: Exercise input carried along with the test case. Not used for grading.
    """

    name: str = Field(..., min_length=1)
    expected_output: str = ""
    input: str | None = None


class ExecutionOutcome(_RunnerModel):
    """What a single evaluation produced.

    Attributes:
        captured_output: Console lines joined with newlines, "" if none.
        failure: Message of the error that aborted evaluation, None if it completed.
    """

    captured_output: str = ""
    failure: str | None = None


class AssertionVerdict(_RunnerModel):
    """Pass/fail verdict for one assertion."""

    name: str
    passed: bool
    expected: str
    actual: str


class GradingResult(_RunnerModel):
    """
    Encapsulates the output, error and per-assertion verdicts of a run.
    """

    output: str = Field(..., description="The captured console output of the run.")
    error: str | None = Field(None, description="The failure that aborted the run, if any.")
    verdicts: list[AssertionVerdict] = Field(
        default_factory=list,
        description="One verdict per assertion, in input order.",
    )
    all_passed: bool = Field(..., description="True when the run did not fail and every verdict passed.")
