"""logging_config 모듈 테스트"""
import json
import logging
import sys

from unicon.logging_config import (
    JSONFormatter,
    TextFormatter,
    get_logger,
    reset_logging,
    setup_logging,
)


def _record(msg="Test message", level=logging.INFO, name="test_module", exc_info=None):
    return logging.LogRecord(
        name=name, level=level, pathname="", lineno=0,
        msg=msg, args=(), exc_info=exc_info,
    )


class TestLoggingConfig:
    """로깅 설정 테스트"""

    def test_json_formatter(self):
        data = json.loads(JSONFormatter().format(_record()))
        assert data["level"] == "INFO"
        assert data["module"] == "test_module"
        assert data["message"] == "Test message"
        assert "timestamp" in data

    def test_json_formatter_with_exception(self):
        try:
            raise ValueError("Test error")
        except ValueError:
            record = _record(msg="Error occurred", level=logging.ERROR, exc_info=sys.exc_info())
        data = json.loads(JSONFormatter().format(record))
        assert "ValueError" in data["exception"]
        assert "Test error" in data["exception"]

    def test_text_formatter(self):
        output = TextFormatter().format(_record(msg="Warning message", level=logging.WARNING))
        assert "[WARNING]" in output
        assert "[test_module]" in output
        assert "Warning message" in output

    def test_setup_logging_creates_handlers(self):
        setup_logging(level="DEBUG", log_format="text")
        logger = logging.getLogger("unicon")
        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG

    def test_setup_logging_idempotent(self):
        setup_logging()
        setup_logging()
        assert len(logging.getLogger("unicon").handlers) == 1

    def test_unknown_level_falls_back_to_warning(self):
        setup_logging(level="LOUD")
        assert logging.getLogger("unicon").level == logging.WARNING

    def test_console_handler_writes_stderr(self, capsys):
        setup_logging(level="INFO")
        get_logger("converter").info("hello stderr")
        captured = capsys.readouterr()
        assert "hello stderr" in captured.err
        assert captured.out == ""

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "logs" / "unicon.log"
        setup_logging(level="INFO", log_format="json", log_file=str(log_file))
        get_logger("cli").info("written to file")
        for handler in logging.getLogger("unicon").handlers:
            handler.flush()
        line = log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
        assert json.loads(line)["message"] == "written to file"

    def test_get_logger_returns_correct_name(self):
        assert get_logger("my_module").name == "unicon.my_module"

    def test_reset_logging_clears_handlers(self):
        setup_logging()
        reset_logging()
        logger = logging.getLogger("unicon")
        assert len(logger.handlers) == 0
        assert logger.level == logging.WARNING
