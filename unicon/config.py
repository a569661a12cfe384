"""
unicon 중앙 집중식 설정 모듈

우선순위: 환경변수 > unicon.json > 기본값
CLI 시작 시 .env 파일은 python-dotenv로 환경변수에 로드됩니다.

사용법:
    from unicon.config import get_config
    cfg = get_config()
    print(cfg.default_places)  # 2
"""

import os
import json
from dataclasses import dataclass
from typing import Optional

DEFAULT_CONFIG_PATH = "unicon.json"


@dataclass(frozen=True)
class Config:
    """unicon 설정 (불변 객체)"""

    # 출력
    default_places: int = 2          # -r 미지정 시 소수점 자릿수

    # 로깅
    log_level: str = "WARNING"
    log_format: str = "text"         # "text" | "json"
    log_file: str = ""               # 빈 문자열이면 stderr만
    log_max_bytes: int = 1_048_576   # 1MB
    log_backup_count: int = 3


# 환경변수 매핑 (ENV_NAME -> (field_name, type_converter))
_ENV_MAP = {
    "UNICON_DEFAULT_PLACES": ("default_places", int),
    "UNICON_LOG_LEVEL": ("log_level", str),
    "UNICON_LOG_FORMAT": ("log_format", str),
    "UNICON_LOG_FILE": ("log_file", str),
    "UNICON_LOG_MAX_BYTES": ("log_max_bytes", int),
    "UNICON_LOG_BACKUP_COUNT": ("log_backup_count", int),
}


# 설정 필드 범위 제한
_FIELD_BOUNDS = {
    "default_places": (0, 15),
    "log_max_bytes": (1024, 104_857_600),
    "log_backup_count": (0, 20),
}


def _clamp(field_name, value):
    """설정값의 범위를 제한"""
    if field_name in _FIELD_BOUNDS:
        lo, hi = _FIELD_BOUNDS[field_name]
        return type(value)(max(lo, min(hi, value)))
    return value


def _load_config_file(path: str = DEFAULT_CONFIG_PATH) -> dict:
    """unicon.json 로드 (없거나 손상되면 빈 dict 반환)"""
    if not os.path.exists(path):
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return data if isinstance(data, dict) else {}
    except (json.JSONDecodeError, OSError):
        return {}


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> Config:
    """설정 로드 (환경변수 > unicon.json > 기본값)"""
    file_config = _load_config_file(config_path)
    overrides = {}

    for env_name, (field_name, converter) in _ENV_MAP.items():
        # 1. 환경변수 확인
        env_val = os.environ.get(env_name)
        if env_val is not None:
            try:
                overrides[field_name] = _clamp(field_name, converter(env_val))
            except (ValueError, TypeError):
                pass  # 변환 실패 시 기본값 유지
            continue

        # 2. unicon.json 확인
        if field_name in file_config:
            try:
                overrides[field_name] = _clamp(field_name, converter(file_config[field_name]))
            except (ValueError, TypeError):
                pass

    return Config(**overrides)


# 싱글턴 캐시
_cached_config: Optional[Config] = None


def get_config(config_path: str = DEFAULT_CONFIG_PATH) -> Config:
    """설정 싱글턴 반환 (최초 호출 시 로드)"""
    global _cached_config
    if _cached_config is None:
        _cached_config = load_config(config_path)
    return _cached_config


def reset_config() -> None:
    """설정 캐시 초기화 (테스트용)"""
    global _cached_config
    _cached_config = None
