import os
import sys
import pytest

# 프로젝트 루트를 path에 추가
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from unicon.config import reset_config
from unicon.logging_config import reset_logging
from unicon.units import Unit, UnitCategory, UnitDefinition, UnitRegistry


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch, tmp_path):
    """설정/로깅 캐시 초기화 + 작업 디렉토리 격리 (.env, unicon.json 영향 차단)"""
    monkeypatch.chdir(tmp_path)
    for name in list(os.environ):
        if name.startswith("UNICON_"):
            monkeypatch.delenv(name)
    reset_config()
    reset_logging()
    yield
    reset_config()
    reset_logging()


@pytest.fixture
def mini_registry():
    """테스트용 소형 레지스트리 (온도 2개 + 길이 2개 + 시간 1개)"""
    return UnitRegistry([
        UnitDefinition(UnitCategory.TEMPERATURE, Unit.CELSIUS, "celsius"),
        UnitDefinition(UnitCategory.TEMPERATURE, Unit.KELVIN, "kelvin"),
        UnitDefinition(UnitCategory.LENGTH, Unit.METERS, "meters", 1.0),
        UnitDefinition(UnitCategory.LENGTH, Unit.FEET, "feet", 3.28084),
        UnitDefinition(UnitCategory.TIME, Unit.SECONDS, "seconds", 1.0),
    ])
