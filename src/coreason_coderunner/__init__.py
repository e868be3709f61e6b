# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_coderunner

"""
coreason-coderunner
"""

__version__ = "0.1.0"
__author__ = "Gowtham A Rao"
__email__ = "gowtham.rao@coreason.ai"

from .config import RunnerConfig
from .factory import RunnerFactory
from .grading import grade
from .models import Assertion, AssertionVerdict, ExecutionOutcome, GradingResult
from .report import render_report
from .runner import run
from .runtime import ExecutionEngine
from .runtimes.javascript import MiniRacerRuntime
from .session import CodeRunner, CodeRunnerSession

__all__ = [
    "Assertion",
    "AssertionVerdict",
    "CodeRunner",
    "CodeRunnerSession",
    "ExecutionEngine",
    "ExecutionOutcome",
    "GradingResult",
    "MiniRacerRuntime",
    "RunnerConfig",
    "RunnerFactory",
    "grade",
    "render_report",
    "run",
]
