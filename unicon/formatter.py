"""
unicon 결과 출력 포맷

- format_result: "<value> <from> = <result> <to>" 한 줄
- format_catalog: --show 단위 목록
"""

from __future__ import annotations

import math
from typing import Optional

from unicon.units import UnitRegistry

DEFAULT_PLACES = 2

_FLOAT_EXACT_LIMIT = 2.0 ** 52


def round_half_away(value: float, places: int) -> float:
    """0에서 먼 쪽으로 반올림 (C round()와 동일, 파이썬 round()의 은행가 반올림 아님)

    >>> round_half_away(2.5, 0)
    3.0
    >>> round_half_away(-0.125, 2)
    -0.13
    """
    if places < 0:
        raise ValueError(f"places must be non-negative: {places}")
    if not math.isfinite(value):
        return value
    try:
        scale = float(10 ** places)
    except OverflowError:
        return value
    scaled = abs(value) * scale
    # 2**52 이상이면 소수부가 없어 반올림할 것이 없음
    if not math.isfinite(scaled) or scaled >= _FLOAT_EXACT_LIMIT:
        return value
    return math.copysign(math.floor(scaled + 0.5) / scale, value)


def format_result(
    value: float,
    from_name: str,
    result: float,
    to_name: str,
    round_places: Optional[int] = None,
    default_places: int = DEFAULT_PLACES,
) -> str:
    """변환 결과 한 줄 렌더링

    round_places가 지정되면 결과를 반올림하고 해당 자릿수로 표시,
    없으면 결과 값은 그대로 두고 default_places 자릿수로만 표시합니다.
    """
    if round_places is not None:
        result = round_half_away(result, round_places)
        places = round_places
    else:
        places = default_places
    return f"{value:.{places}f} {from_name} = {result:.{places}f} {to_name}"


def format_catalog(registry: UnitRegistry) -> str:
    """카테고리별 지원 단위 목록"""
    lines = ["Supported units:"]
    for category, definitions in registry.by_category().items():
        lines.append(f"{category.label}:")
        for d in definitions:
            lines.append(f"\t- {d.display_name}")
    return "\n".join(lines)
