from typing import Any, Generator
from unittest.mock import MagicMock, patch

import pytest

from coreason_coderunner.config import RunnerConfig
from coreason_coderunner.models import ExecutionOutcome
from coreason_coderunner.runtimes.javascript import MiniRacerRuntime


@pytest.fixture
def engine() -> MiniRacerRuntime:
    return MiniRacerRuntime()


@pytest.fixture
def fast_config() -> RunnerConfig:
    return RunnerConfig(run_delay=0, enable_audit_logging=False)


@pytest.fixture
def mock_engine() -> Any:
    mock = MagicMock()
    mock.execute = MagicMock(return_value=ExecutionOutcome(captured_output="out", failure=None))
    return mock


@pytest.fixture
def clean_env() -> Generator[None, None, None]:
    with patch.dict("os.environ", {}, clear=True):
        yield
