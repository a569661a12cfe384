"""
unicon 단위 레지스트리

단위별 카테고리, 표시 이름, 환산 계수를 보관하는 불변 테이블입니다.
환산 계수 = 카테고리 기준 단위 1개에 해당하는 이 단위의 수량
(예: 미터 기준 kilometers = 0.001). 온도는 공식으로 변환하므로 계수를 쓰지 않습니다.

사용법:
    from unicon.units import Unit, default_registry

    registry = default_registry()
    meters = registry.get(Unit.METERS)
    print(meters.name, meters.factor)  # meters 1.0
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Iterator, Optional

from unicon.errors import DuplicateUnitError, InvalidRegistryError
from unicon.logging_config import get_logger

logger = get_logger("units")


class UnitCategory(enum.Enum):
    """변환 가능한 단위 묶음"""

    TEMPERATURE = "TEMPERATURE"
    LENGTH = "LENGTH"
    TIME = "TIME"
    MASS = "MASS"
    DIGITAL = "DIGITAL STORAGE"

    @property
    def label(self) -> str:
        """카탈로그 출력용 이름"""
        return self.value


class Unit(enum.IntEnum):
    """단위 식별자 (선언 순서 = 카탈로그 순서)"""

    # 온도
    CELSIUS = enum.auto()
    FAHRENHEIT = enum.auto()
    KELVIN = enum.auto()
    # 길이
    MILLIMETERS = enum.auto()
    CENTIMETERS = enum.auto()
    DECIMETERS = enum.auto()
    METERS = enum.auto()
    DECAMETERS = enum.auto()
    HECTOMETERS = enum.auto()
    KILOMETERS = enum.auto()
    MILES = enum.auto()
    INCHES = enum.auto()
    FEET = enum.auto()
    # 시간
    MILLISECONDS = enum.auto()
    SECONDS = enum.auto()
    MINUTES = enum.auto()
    HOURS = enum.auto()
    DAYS = enum.auto()
    MONTHS = enum.auto()
    YEARS = enum.auto()
    # 질량
    MILLIGRAMS = enum.auto()
    CENTIGRAMS = enum.auto()
    DECIGRAMS = enum.auto()
    GRAMS = enum.auto()
    DECAGRAMS = enum.auto()
    HECTOGRAMS = enum.auto()
    KILOGRAMS = enum.auto()
    POUNDS = enum.auto()
    OUNCES = enum.auto()
    # 디지털 저장 용량
    BYTES = enum.auto()
    KILOBYTES = enum.auto()
    MEGABYTES = enum.auto()
    GIGABYTES = enum.auto()
    TERABYTES = enum.auto()
    PETABYTES = enum.auto()
    EXABYTES = enum.auto()


@dataclass(frozen=True)
class UnitDefinition:
    """단위 한 개의 정의"""

    category: UnitCategory
    unit: Unit
    name: str
    factor: Optional[float] = None

    @property
    def is_temperature(self) -> bool:
        return self.category is UnitCategory.TEMPERATURE

    @property
    def display_name(self) -> str:
        """카탈로그 표기 (첫 글자 대문자)"""
        return self.name.capitalize()


_T = UnitCategory.TEMPERATURE
_L = UnitCategory.LENGTH
_TM = UnitCategory.TIME
_M = UnitCategory.MASS
_D = UnitCategory.DIGITAL

# 기준 단위: meters, seconds, grams, bytes
DEFAULT_UNITS: tuple[UnitDefinition, ...] = (
    UnitDefinition(_T, Unit.CELSIUS, "celsius"),
    UnitDefinition(_T, Unit.FAHRENHEIT, "fahrenheit"),
    UnitDefinition(_T, Unit.KELVIN, "kelvin"),
    UnitDefinition(_L, Unit.MILLIMETERS, "millimeters", 1000.0),
    UnitDefinition(_L, Unit.CENTIMETERS, "centimeters", 100.0),
    UnitDefinition(_L, Unit.DECIMETERS, "decimeters", 10.0),
    UnitDefinition(_L, Unit.METERS, "meters", 1.0),
    UnitDefinition(_L, Unit.DECAMETERS, "decameters", 0.1),
    UnitDefinition(_L, Unit.HECTOMETERS, "hectometers", 0.01),
    UnitDefinition(_L, Unit.KILOMETERS, "kilometers", 0.001),
    UnitDefinition(_L, Unit.MILES, "miles", 0.000621371),
    UnitDefinition(_L, Unit.INCHES, "inches", 39.3701),
    UnitDefinition(_L, Unit.FEET, "feet", 3.28084),
    UnitDefinition(_TM, Unit.MILLISECONDS, "milliseconds", 1000.0),
    UnitDefinition(_TM, Unit.SECONDS, "seconds", 1.0),
    UnitDefinition(_TM, Unit.MINUTES, "minutes", 1.0 / 60.0),
    UnitDefinition(_TM, Unit.HOURS, "hours", 1.0 / 3600.0),
    UnitDefinition(_TM, Unit.DAYS, "days", 1.0 / 86400.0),
    UnitDefinition(_TM, Unit.MONTHS, "months", 1.0 / 2592000.0),
    UnitDefinition(_TM, Unit.YEARS, "years", 1.0 / 31536000.0),
    UnitDefinition(_M, Unit.MILLIGRAMS, "milligrams", 1000.0),
    UnitDefinition(_M, Unit.CENTIGRAMS, "centigrams", 100.0),
    UnitDefinition(_M, Unit.DECIGRAMS, "decigrams", 10.0),
    UnitDefinition(_M, Unit.GRAMS, "grams", 1.0),
    UnitDefinition(_M, Unit.DECAGRAMS, "decagrams", 0.1),
    UnitDefinition(_M, Unit.HECTOGRAMS, "hectograms", 0.01),
    UnitDefinition(_M, Unit.KILOGRAMS, "kilograms", 0.001),
    UnitDefinition(_M, Unit.POUNDS, "pounds", 0.00220462),
    UnitDefinition(_M, Unit.OUNCES, "ounces", 0.03527396),
    UnitDefinition(_D, Unit.BYTES, "bytes", 1.0),
    UnitDefinition(_D, Unit.KILOBYTES, "kilobytes", 1.0 / 1024 ** 1),
    UnitDefinition(_D, Unit.MEGABYTES, "megabytes", 1.0 / 1024 ** 2),
    UnitDefinition(_D, Unit.GIGABYTES, "gigabytes", 1.0 / 1024 ** 3),
    UnitDefinition(_D, Unit.TERABYTES, "terabytes", 1.0 / 1024 ** 4),
    UnitDefinition(_D, Unit.PETABYTES, "petabytes", 1.0 / 1024 ** 5),
    UnitDefinition(_D, Unit.EXABYTES, "exabytes", 1.0 / 1024 ** 6),
)


class UnitRegistry:
    """불변 단위 레지스트리

    생성 시 검증:
      - 비어 있지 않을 것
      - 식별자 중복 없음
      - 이름 중복 없음 (대소문자 무시)
      - 온도 외 단위는 유한한 양수 계수
    """

    def __init__(self, definitions: Iterable[UnitDefinition]):
        defs = tuple(definitions)
        if not defs:
            raise InvalidRegistryError("unit registry must contain at least one unit")

        by_unit: dict[Unit, UnitDefinition] = {}
        seen_names: dict[str, UnitDefinition] = {}
        for d in defs:
            if d.unit in by_unit:
                raise DuplicateUnitError(f"duplicate unit identifier: {d.unit.name}")
            key = d.name.casefold()
            if key in seen_names:
                raise DuplicateUnitError(
                    f"duplicate unit name: {d.name!r} ({seen_names[key].unit.name}, {d.unit.name})"
                )
            if not d.is_temperature:
                if d.factor is None or not math.isfinite(d.factor) or d.factor <= 0:
                    raise InvalidRegistryError(f"invalid conversion factor for {d.name}: {d.factor!r}")
            by_unit[d.unit] = d
            seen_names[key] = d

        self._definitions = defs
        self._by_unit = by_unit
        logger.debug("단위 레지스트리 구성: %d개 단위", len(defs))

    def __iter__(self) -> Iterator[UnitDefinition]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def __contains__(self, unit) -> bool:
        return unit in self._by_unit

    def get(self, unit: Unit) -> UnitDefinition:
        """식별자로 정의 조회 (없으면 KeyError)"""
        return self._by_unit[unit]

    def categories(self) -> list[UnitCategory]:
        """등장 순서대로 카테고리 목록"""
        result: list[UnitCategory] = []
        for d in self._definitions:
            if d.category not in result:
                result.append(d.category)
        return result

    def by_category(self) -> dict[UnitCategory, list[UnitDefinition]]:
        """카테고리별 단위 묶음 (테이블 순서 유지)"""
        groups: dict[UnitCategory, list[UnitDefinition]] = {}
        for d in self._definitions:
            groups.setdefault(d.category, []).append(d)
        return groups


@lru_cache(maxsize=1)
def default_registry() -> UnitRegistry:
    """기본 단위 테이블 레지스트리 (프로세스당 1회 생성)"""
    return UnitRegistry(DEFAULT_UNITS)
