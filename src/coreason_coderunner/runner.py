# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_coderunner

from typing import Sequence

from coreason_coderunner.config import RunnerConfig
from coreason_coderunner.factory import RunnerFactory
from coreason_coderunner.grading import grade
from coreason_coderunner.models import Assertion, GradingResult
from coreason_coderunner.runtime import ExecutionEngine
from coreason_coderunner.utils.audit import AuditLogger
from coreason_coderunner.utils.logger import logger


def evaluate(
    engine: ExecutionEngine,
    source: str,
    assertions: Sequence[Assertion],
    audit: AuditLogger,
    language: str = "javascript",
) -> GradingResult:
    """Execute source once with the given engine and grade the outcome."""
    audit.log_pre_execution(source, language)
    outcome = engine.execute(source)
    result = grade(outcome, assertions)
    logger.info(
        f"Graded run: {sum(v.passed for v in result.verdicts)}/{len(result.verdicts)} assertions passed, "
        f"error={'yes' if result.error is not None else 'no'}"
    )
    return result


def run(
    source: str,
    assertions: Sequence[Assertion] = (),
    config: RunnerConfig | None = None,
) -> GradingResult:
    """Run source and grade it against the assertions.

    Never raises for any source content: syntax errors, runtime errors and
    thrown values are reported in ``GradingResult.error``.

    Args:
        source: The JavaScript source to evaluate.
        assertions: Expected-output checks, graded in order.
        config: Runner configuration. Defaults are read from the environment.

    Returns:
        GradingResult: Captured output, failure, verdicts and the aggregate verdict.
    """
    config = config or RunnerConfig()
    engine = RunnerFactory.get_engine(config)
    audit = AuditLogger(enabled=config.enable_audit_logging)
    return evaluate(engine, source, assertions, audit, config.language)
