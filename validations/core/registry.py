"""
검증 디스패처

[역할]
- ValidationType → 검증기 인스턴스 매핑 (레지스트리)
- 요청 타입에 해당하는 검증기 하나만 실행하고 결과를 그대로 반환

검증기는 상태가 없으므로 인스턴스를 하나씩만 만들어 공유한다.
"""
from types import MappingProxyType
from typing import List

from .validation_type import ValidationType
from ..validators import (
    BaseValidator,
    EmailValidator,
    PasswordValidator,
    CardValidator,
    IdentityNumberValidator,
    NameValidator,
    URLValidator,
    PhoneValidator,
    PostalCodeValidator,
    IPValidator,
    ISBNValidator,
)


VALIDATOR_REGISTRY = MappingProxyType({
    ValidationType.EMAIL: EmailValidator(),
    ValidationType.PASSWORD: PasswordValidator(),
    ValidationType.CREDIT_CARD: CardValidator(),
    ValidationType.IDENTITY_NUMBER: IdentityNumberValidator(),
    ValidationType.NAME: NameValidator(),
    ValidationType.URL: URLValidator(),
    ValidationType.PHONE_NUMBER: PhoneValidator(),
    ValidationType.POSTAL_CODE: PostalCodeValidator(),
    ValidationType.IPV4_ADDRESS: IPValidator(),
    ValidationType.ISBN: ISBNValidator(),
})


def get_validator(validation_type) -> BaseValidator:
    """
    검증 타입에 해당하는 검증기 반환
    
    Raises:
        UnsupportedValidationTypeError: 열거형에 없는 타입
    """
    return VALIDATOR_REGISTRY[ValidationType.coerce(validation_type)]


def is_valid(value, validation_type) -> bool:
    """
    문자열이 검증 타입 형식에 맞는지 판정
    
    Args:
        value: 검증할 문자열
        validation_type: ValidationType 멤버 (또는 이름/값 문자열)
        
    Returns:
        bool: 형식(및 체크섬)이 맞으면 True. 잘못된 입력은 항상 False
        
    Raises:
        UnsupportedValidationTypeError: 열거형에 없는 타입
    """
    return get_validator(validation_type).is_valid(value)


def validate_all(value) -> List[ValidationType]:
    """값이 통과하는 모든 검증 타입 (선언 순서)"""
    return [kind for kind in ValidationType if VALIDATOR_REGISTRY[kind].is_valid(value)]
