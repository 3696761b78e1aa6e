"""
검증기 패키지

[사용법]
    from validations.validators import CardValidator
    
    validator = CardValidator()
    validator.is_valid("4532-0151-1283-0366")   # 입력 가드 포함
    validator.verify_luhn("4532015112830366")    # 체크섬만

[디스패치]
    ValidationType → 검증기 매핑은 validations.core.registry 참고
"""
from .base_validator import BaseValidator
from .email_validator import EmailValidator
from .password_validator import PasswordValidator
from .card_validator import CardValidator
from .identity_validator import IdentityNumberValidator
from .name_validator import NameValidator
from .url_validator import URLValidator
from .phone_validator import PhoneValidator
from .postal_code_validator import PostalCodeValidator
from .ip_validator import IPValidator
from .isbn_validator import ISBNValidator

__all__ = [
    'BaseValidator',
    'EmailValidator',
    'PasswordValidator',
    'CardValidator',
    'IdentityNumberValidator',
    'NameValidator',
    'URLValidator',
    'PhoneValidator',
    'PostalCodeValidator',
    'IPValidator',
    'ISBNValidator',
]
