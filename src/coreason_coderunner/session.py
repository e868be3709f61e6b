# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_coderunner

from typing import Callable, Sequence

import anyio
import anyio.to_thread

from coreason_coderunner.config import RunnerConfig
from coreason_coderunner.factory import RunnerFactory
from coreason_coderunner.models import Assertion, GradingResult
from coreason_coderunner.runner import evaluate
from coreason_coderunner.runtime import ExecutionEngine
from coreason_coderunner.utils.audit import AuditLogger
from coreason_coderunner.utils.logger import logger

AllPassedListener = Callable[[GradingResult], None]


class CodeRunnerSession:
    """Async-native editor session (The Core).

    Holds the code being edited, the exercise assertions and the latest result.
    Only the most recent submission's result is kept.
    """

    def __init__(
        self,
        starter_code: str = "",
        assertions: Sequence[Assertion] = (),
        config: RunnerConfig | None = None,
        engine: ExecutionEngine | None = None,
    ):
        """Initializes the session.

        Args:
            starter_code: Code the editor starts with and returns to on reset.
            assertions: The exercise's expected-output checks.
            config: Configuration for the runner.
            engine: Optional engine override. Built from config when omitted.
        """
        self.config = config or RunnerConfig()
        self.engine: ExecutionEngine = engine or RunnerFactory.get_engine(self.config)
        self.audit = AuditLogger(enabled=self.config.enable_audit_logging)
        self.starter_code = starter_code
        self.code = starter_code
        self.assertions: list[Assertion] = list(assertions)
        self.result: GradingResult | None = None
        self.running = False
        self._generation = 0
        self._listeners: list[AllPassedListener] = []

    def on_all_passed(self, listener: AllPassedListener) -> None:
        """Registers a listener called whenever a kept result passes every assertion.

        Listener errors are logged and never affect the session.
        """
        self._listeners.append(listener)

    async def run(
        self,
        code: str | None = None,
        assertions: Sequence[Assertion] | None = None,
    ) -> GradingResult:
        """Runs the current code against the current assertions.

        Args:
            code: Replaces the session code before running, if given.
            assertions: Replaces the session assertions before running, if given.

        Returns:
            GradingResult: The result of this submission. It is stored on the
            session only if no newer submission or reset happened meanwhile.
        """
        if code is not None:
            self.code = code
        if assertions is not None:
            self.assertions = list(assertions)

        source = self.code
        checks = list(self.assertions)

        self._generation += 1
        generation = self._generation
        self.result = None
        self.running = True

        if self.config.run_delay > 0:
            await anyio.sleep(self.config.run_delay)

        result = await anyio.to_thread.run_sync(
            evaluate, self.engine, source, checks, self.audit, self.config.language
        )

        if generation != self._generation:
            logger.debug(f"Discarding result of superseded run #{generation}")
            return result

        self.result = result
        self.running = False

        if result.all_passed:
            self._notify_all_passed(result)
        return result

    def reset(self) -> None:
        """Restores the starter code and clears any result, including in-flight runs."""
        self._generation += 1
        self.code = self.starter_code
        self.result = None
        self.running = False

    def _notify_all_passed(self, result: GradingResult) -> None:
        for listener in list(self._listeners):
            try:
                listener(result)
            except Exception as e:
                logger.error(f"All-passed listener failed: {e}")


class CodeRunner:
    """Sync Facade for CodeRunnerSession (The Facade).

    Wraps CodeRunnerSession and executes methods via anyio.run.
    """

    def __init__(
        self,
        starter_code: str = "",
        assertions: Sequence[Assertion] = (),
        config: RunnerConfig | None = None,
        engine: ExecutionEngine | None = None,
    ):
        self._async = CodeRunnerSession(starter_code, assertions, config, engine)

    @property
    def code(self) -> str:
        return self._async.code

    @property
    def result(self) -> GradingResult | None:
        return self._async.result

    @property
    def running(self) -> bool:
        return self._async.running

    def on_all_passed(self, listener: AllPassedListener) -> None:
        self._async.on_all_passed(listener)

    def run(
        self,
        code: str | None = None,
        assertions: Sequence[Assertion] | None = None,
    ) -> GradingResult:
        """Runs the code synchronously.

        Args:
            code: Replaces the session code before running, if given.
            assertions: Replaces the session assertions before running, if given.

        Returns:
            GradingResult: The result of the run.
        """
        return anyio.run(self._async.run, code, assertions)

    def reset(self) -> None:
        self._async.reset()
