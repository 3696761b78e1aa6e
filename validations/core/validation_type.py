"""
검증 타입 (닫힌 열거형)
"""
from enum import Enum

from ..utils.exceptions import UnsupportedValidationTypeError


class ValidationType(Enum):
    """지원하는 검증 타입 10종"""
    
    EMAIL = "email"
    PASSWORD = "password"
    CREDIT_CARD = "credit_card"
    IDENTITY_NUMBER = "identity_number"
    NAME = "name"
    URL = "url"
    PHONE_NUMBER = "phone_number"
    POSTAL_CODE = "postal_code"
    IPV4_ADDRESS = "ipv4_address"
    ISBN = "isbn"
    
    @classmethod
    def coerce(cls, value) -> "ValidationType":
        """
        멤버 또는 이름 문자열(대소문자, 밑줄 무시)을 ValidationType으로 변환
        
        Raises:
            UnsupportedValidationTypeError: 열거형에 없는 타입
        """
        if isinstance(value, cls):
            return value
        
        if isinstance(value, str):
            # "credit_card", "CREDIT_CARD", "CreditCard" 모두 허용
            key = value.strip().replace('_', '').lower()
            for member in cls:
                if member.name.replace('_', '').lower() == key:
                    return member
        
        raise UnsupportedValidationTypeError(value)
