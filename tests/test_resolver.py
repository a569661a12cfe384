"""resolver 모듈 테스트"""
import pytest

from unicon.errors import UnknownUnitError
from unicon.resolver import require_unit, resolve_unit
from unicon.units import Unit, default_registry


class TestResolveUnit:
    """단위명 해석 테스트"""

    def test_case_insensitive(self):
        """CELSIUS / celsius / Celsius 모두 같은 단위"""
        a = resolve_unit("CELSIUS")
        b = resolve_unit("celsius")
        c = resolve_unit("Celsius")
        assert a is not None
        assert a == b == c
        assert a.unit is Unit.CELSIUS

    def test_every_registered_name_resolves(self):
        for d in default_registry():
            assert resolve_unit(d.name.upper()) is d

    @pytest.mark.parametrize("name", ["banana", "km", "meter", "met", " meters", ""])
    def test_no_partial_or_fuzzy_match(self, name):
        """약어/부분/공백 포함 이름은 해석 불가"""
        assert resolve_unit(name) is None

    def test_uses_injected_registry(self, mini_registry):
        assert resolve_unit("feet", mini_registry).unit is Unit.FEET
        assert resolve_unit("miles", mini_registry) is None


class TestRequireUnit:

    def test_returns_definition(self):
        assert require_unit("Kilograms").unit is Unit.KILOGRAMS

    def test_unknown_raises(self):
        with pytest.raises(UnknownUnitError) as exc_info:
            require_unit("banana")
        assert exc_info.value.name == "banana"
