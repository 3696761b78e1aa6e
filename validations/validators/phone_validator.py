"""
전화번호 검증기

- 단일 형식만 인정: 000-000-0000 (북미 형식)
"""
import re
from .base_validator import BaseValidator


class PhoneValidator(BaseValidator):
    """전화번호 검증기"""
    
    name = "phone_number"
    
    PHONE_PATTERN = re.compile(r'[0-9]{3}-[0-9]{3}-[0-9]{4}')
    
    def validate(self, value: str) -> bool:
        return bool(self.PHONE_PATTERN.fullmatch(value))
