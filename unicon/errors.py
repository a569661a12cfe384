"""
unicon 예외 정의

모든 예외는 UniconError(ValueError)를 상속합니다.
변환 엔진은 프로세스를 종료하지 않고 예외를 올리며,
종료 코드 매핑은 cli.main()에서만 처리합니다.
"""


class UniconError(ValueError):
    """unicon 기본 예외"""


class InvalidValueError(UniconError):
    """숫자가 아닌 변환 값"""

    def __init__(self, token: str):
        super().__init__(f"invalid numeric value: {token!r}")
        self.token = token


class UnknownUnitError(UniconError):
    """레지스트리에 없는 단위명"""

    def __init__(self, name: str):
        super().__init__(f"unknown unit: {name!r}")
        self.name = name


class CommandFormatError(UniconError):
    """VALUE from UNIT to UNIT 문법 위반"""


class ConversionError(UniconError):
    """변환 계산 실패"""


class CategoryMismatchError(ConversionError):
    """서로 다른 카테고리 간 변환 시도"""

    def __init__(self, from_name: str, to_name: str):
        super().__init__(
            f"cannot convert between different unit types: {from_name} -> {to_name}"
        )
        self.from_name = from_name
        self.to_name = to_name


class InvalidRegistryError(UniconError):
    """레지스트리 구성 검증 실패 (빈 테이블, 잘못된 계수)"""


class DuplicateUnitError(InvalidRegistryError):
    """레지스트리 구성 시 단위명/식별자 중복"""
