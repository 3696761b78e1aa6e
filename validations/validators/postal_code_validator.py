"""
우편번호 검증기

- 캐나다 형식: A1A 1A1 (가운데 공백/하이픈 선택)
"""
import re
from .base_validator import BaseValidator


class PostalCodeValidator(BaseValidator):
    """우편번호 검증기"""
    
    name = "postal_code"
    
    POSTAL_CODE_PATTERN = re.compile(r'[A-Za-z][0-9][A-Za-z][ -]?[0-9][A-Za-z][0-9]')
    
    def validate(self, value: str) -> bool:
        return bool(self.POSTAL_CODE_PATTERN.fullmatch(value))
