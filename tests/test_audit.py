from unittest.mock import MagicMock

from coreason_coderunner.utils.audit import AuditLogger

HELLO_HASH = "96f43d529af3430cb6b0e2c02f6b38ef1a121e8a31d2d09a3ebb716f2f35c9de"  # sha256 of "print('hello')"


def test_audit_logs_execution_start() -> None:
    audit = AuditLogger()
    audit.logger = MagicMock()

    code_hash = audit.log_pre_execution("print('hello')", "javascript")

    assert code_hash == HELLO_HASH
    audit.logger.info.assert_called_once()
    args, kwargs = audit.logger.info.call_args
    assert args[0] == "EXECUTION_START"
    assert kwargs["code_hash"] == HELLO_HASH
    assert kwargs["language"] == "javascript"
    assert kwargs["code_length"] == len("print('hello')")


def test_audit_disabled() -> None:
    audit = AuditLogger(enabled=False)
    audit.logger = MagicMock()

    code_hash = audit.log_pre_execution("print('hello')", "javascript")

    assert code_hash == HELLO_HASH  # Still returns hash
    audit.logger.info.assert_not_called()


def test_audit_failure_is_swallowed() -> None:
    audit = AuditLogger()
    audit.logger = MagicMock()
    audit.logger.info.side_effect = RuntimeError("sink closed")

    assert audit.log_pre_execution("", "javascript") is not None
