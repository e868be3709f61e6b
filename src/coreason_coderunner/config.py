from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RunnerConfig(BaseSettings):
    """
    Configuration for the code runner.
    """

    runtime: Literal["mini_racer"] = "mini_racer"
    language: Literal["javascript"] = "javascript"

    # None disables the limit; evaluation then runs until it returns or throws.
    execution_timeout: float | None = Field(None, gt=0)
    max_memory: int | None = Field(None, gt=0)

    run_delay: float = Field(0.1, ge=0)  # seconds before a session run starts
    enable_audit_logging: bool = True
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="COREASON_CODERUNNER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
