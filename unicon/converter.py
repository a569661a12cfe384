"""
unicon 변환 엔진

두 가지 모드:
  - 온도: 섭씨/화씨/켈빈 간 공식 변환 (영점이 달라 비율로 처리 불가)
  - 계수: 같은 카테고리 내에서 기준 단위를 거쳐 비율 변환

사용법:
    from unicon.converter import convert_by_name
    convert_by_name(100, "celsius", "fahrenheit").result  # 212.0
    convert_by_name(5, "kilometers", "miles").result      # 3.106855
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from unicon.errors import CategoryMismatchError, ConversionError
from unicon.logging_config import get_logger
from unicon.resolver import require_unit
from unicon.units import Unit, UnitDefinition, UnitRegistry

logger = get_logger("converter")


@dataclass(frozen=True)
class ConversionResult:
    """이름 기반 변환 결과 (해석된 단위 포함)"""

    value: float
    result: float
    from_unit: UnitDefinition
    to_unit: UnitDefinition


# (from, to) -> 공식. 양방향 모두 명시.
_TEMPERATURE_FORMULAS: dict[tuple[Unit, Unit], Callable[[float], float]] = {
    (Unit.CELSIUS, Unit.FAHRENHEIT): lambda v: v * 9 / 5 + 32,
    (Unit.CELSIUS, Unit.KELVIN): lambda v: v + 273.15,
    (Unit.FAHRENHEIT, Unit.CELSIUS): lambda v: (v - 32) * 5 / 9,
    (Unit.FAHRENHEIT, Unit.KELVIN): lambda v: (v - 32) * 5 / 9 + 273.15,
    (Unit.KELVIN, Unit.CELSIUS): lambda v: v - 273.15,
    (Unit.KELVIN, Unit.FAHRENHEIT): lambda v: (v - 273.15) * 9 / 5 + 32,
}


def _convert_temperature(value: float, from_def: UnitDefinition, to_def: UnitDefinition) -> float:
    formula = _TEMPERATURE_FORMULAS.get((from_def.unit, to_def.unit))
    if formula is None:
        raise ConversionError(
            f"no temperature formula for {from_def.name} -> {to_def.name}"
        )
    return formula(value)


def convert(value: float, from_def: UnitDefinition, to_def: UnitDefinition) -> float:
    """value를 from_def 단위에서 to_def 단위로 변환 (반올림 없음)

    Raises:
        CategoryMismatchError: 카테고리가 다른 경우 (온도 vs 비온도 포함)
        ConversionError: 온도 공식이 정의되지 않은 경우
    """
    if from_def.unit == to_def.unit:
        return value

    if from_def.is_temperature or to_def.is_temperature:
        if not (from_def.is_temperature and to_def.is_temperature):
            raise CategoryMismatchError(from_def.name, to_def.name)
        result = _convert_temperature(value, from_def, to_def)
    else:
        if from_def.category is not to_def.category:
            raise CategoryMismatchError(from_def.name, to_def.name)
        # factor = 기준 단위 1개당 수량 -> 기준 단위로 나눈 뒤 대상 단위로 곱함
        result = value / from_def.factor * to_def.factor

    logger.debug("변환: %r %s -> %r %s", value, from_def.name, result, to_def.name)
    return result


def convert_by_name(
    value: float,
    from_name: str,
    to_name: str,
    registry: Optional[UnitRegistry] = None,
) -> ConversionResult:
    """단위명으로 해석 후 변환 (UnknownUnitError / CategoryMismatchError 전파)"""
    from_def = require_unit(from_name, registry)
    to_def = require_unit(to_name, registry)
    return ConversionResult(
        value=value,
        result=convert(value, from_def, to_def),
        from_unit=from_def,
        to_unit=to_def,
    )
