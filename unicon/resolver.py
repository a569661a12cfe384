"""
unicon 단위 이름 해석

사용자가 입력한 단위명을 레지스트리의 UnitDefinition으로 매핑합니다.
대소문자 무시 정확 일치만 지원 (부분/약어/퍼지 매칭 없음).
"""

from __future__ import annotations

from typing import Optional

from unicon.errors import UnknownUnitError
from unicon.logging_config import get_logger
from unicon.units import UnitDefinition, UnitRegistry, default_registry

logger = get_logger("resolver")


def resolve_unit(
    name: str, registry: Optional[UnitRegistry] = None
) -> Optional[UnitDefinition]:
    """단위명 해석. 없으면 None.

    레지스트리 순서대로 검사해 첫 일치 항목을 반환합니다.
    이름 중복은 레지스트리 생성 시 거부되므로 첫 일치 = 유일 일치.
    """
    if registry is None:
        registry = default_registry()
    key = name.casefold()
    for definition in registry:
        if definition.name.casefold() == key:
            return definition
    logger.debug("단위 해석 실패: '%s'", name)
    return None


def require_unit(name: str, registry: Optional[UnitRegistry] = None) -> UnitDefinition:
    """단위명 해석 (없으면 UnknownUnitError)"""
    definition = resolve_unit(name, registry)
    if definition is None:
        raise UnknownUnitError(name)
    return definition
