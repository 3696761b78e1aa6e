"""
문자열 형식 검증 라이브러리

[사용법]
    from validations import ValidationType, is_valid
    
    is_valid("user@example.com", ValidationType.EMAIL)          # True
    is_valid("4532 0151 1283 0366", ValidationType.CREDIT_CARD)  # True (Luhn)
    is_valid("999.999.999.999", "ipv4_address")                 # True (범위 미검증)
"""
from .core import ValidationType, VALIDATOR_REGISTRY, get_validator, is_valid, validate_all
from .utils.exceptions import ValidationsError, UnsupportedValidationTypeError

__version__ = "1.0.0"

__all__ = [
    'ValidationType',
    'VALIDATOR_REGISTRY',
    'get_validator',
    'is_valid',
    'validate_all',
    'ValidationsError',
    'UnsupportedValidationTypeError',
]
