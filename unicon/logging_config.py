"""
unicon 로깅 설정

text/JSON 포맷, 선택적 로그 파일 회전.
콘솔 출력은 stderr로 보내 stdout에는 변환 결과 한 줄만 남깁니다.

사용법:
    from unicon.logging_config import setup_logging, get_logger
    setup_logging(level="DEBUG", log_format="text")
    logger = get_logger("converter")
    logger.debug("변환 완료")
"""

import os
import sys
import json
import logging
import logging.handlers
from datetime import datetime
from typing import Optional

ROOT_LOGGER_NAME = "unicon"


class JSONFormatter(logging.Formatter):
    """JSON 구조화 로그 포매터"""

    def format(self, record):
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "module": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[0]:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, ensure_ascii=False)


class TextFormatter(logging.Formatter):
    """텍스트 로그 포매터"""

    def __init__(self):
        super().__init__(
            fmt="[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


_initialized = False


def setup_logging(
    level: str = "WARNING",
    log_format: str = "text",
    log_file: Optional[str] = None,
    max_bytes: int = 1_048_576,
    backup_count: int = 3,
) -> None:
    """전역 로깅 설정 (최초 1회만 적용)

    Args:
        level: 로그 레벨 (DEBUG, INFO, WARNING, ERROR)
        log_format: 포맷 ("text" 또는 "json")
        log_file: 로그 파일 경로 (None/빈 문자열이면 stderr만)
        max_bytes: 로그 파일 최대 크기
        backup_count: 보관할 백업 파일 수
    """
    global _initialized
    if _initialized:
        return
    _initialized = True

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    if log_format == "json":
        formatter = JSONFormatter()
    else:
        formatter = TextFormatter()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """모듈별 로거 반환 (unicon.{name})"""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def reset_logging() -> None:
    """로깅 설정 초기화 (테스트용)"""
    global _initialized
    _initialized = False
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.WARNING)
