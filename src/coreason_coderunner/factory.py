from coreason_coderunner.config import RunnerConfig
from coreason_coderunner.runtime import ExecutionEngine
from coreason_coderunner.runtimes.javascript import MiniRacerRuntime


class RunnerFactory:
    """
    Factory to create ExecutionEngine instances based on configuration.
    """

    @staticmethod
    def get_engine(config: RunnerConfig) -> ExecutionEngine:
        """
        Returns an instance of the configured ExecutionEngine.
        """
        if config.runtime == "mini_racer":
            return MiniRacerRuntime(
                timeout=config.execution_timeout,
                max_memory=config.max_memory,
            )
        else:
            # This should be unreachable due to Pydantic validation, but for safety:
            raise ValueError(f"Unknown runtime: {config.runtime}")  # pragma: no cover
