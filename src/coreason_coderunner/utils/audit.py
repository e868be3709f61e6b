import hashlib

from coreason_coderunner.utils.logger import logger


class AuditLogger:
    """
    Emits an audit record for every execution attempt.
    """

    def __init__(self, service_name: str = "coreason-coderunner", enabled: bool = True):
        self.enabled = enabled
        self.logger = logger.bind(service=service_name, audit=True)

    def log_pre_execution(self, source: str, language: str) -> str:
        """
        Log the execution attempt. Returns a hash of the source.
        """
        code_hash = hashlib.sha256(source.encode("utf-8")).hexdigest()

        if self.enabled:
            try:
                self.logger.info(
                    "EXECUTION_START",
                    language=language,
                    code_hash=code_hash,
                    code_length=len(source),
                )
            except Exception as e:
                logger.error(f"Audit logging failed: {e}")

        return code_hash
