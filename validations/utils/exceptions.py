"""
라이브러리 예외

검증 실패는 예외가 아니라 False 반환이다.
예외는 지원하지 않는 검증 타입을 요청한 경우에만 발생한다.
"""


class ValidationsError(Exception):
    """라이브러리 기본 예외"""


class UnsupportedValidationTypeError(ValidationsError, ValueError):
    """닫힌 ValidationType 열거형에 없는 타입 요청"""

    def __init__(self, validation_type):
        self.validation_type = validation_type
        super().__init__(f"지원하지 않는 검증 타입: {validation_type!r}")
