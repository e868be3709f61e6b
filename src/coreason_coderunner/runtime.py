# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_coderunner

from abc import ABC, abstractmethod

from coreason_coderunner.models import ExecutionOutcome


class ExecutionEngine(ABC):
    """
    Abstract base class for execution engines.
    Follows the Strategy Pattern.
    """

    @abstractmethod
    def execute(self, source: str) -> ExecutionOutcome:
        """Evaluate source once and capture its console output.

        The evaluated source receives a ``console`` object exposing only
        ``log``, ``error`` and ``warn``. Each call appends one line to an
        in-memory buffer; ``error`` lines are prefixed with ``"Error: "`` and
        ``warn`` lines with ``"Warning: "``.

        Args:
            source: The source text to evaluate. May be empty or invalid.

        Returns:
            ExecutionOutcome: The buffered output and, if evaluation threw, the
            failure message. Lines emitted before a throw are kept.

        Implementations must not raise for any source content.
        """
        pass  # pragma: no cover
