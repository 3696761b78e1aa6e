"""
비밀번호 검증기

- 8자 이상, 영문/숫자만
- 영문 1자 이상 + 숫자 1자 이상 필수
"""
import re
from .base_validator import BaseValidator


class PasswordValidator(BaseValidator):
    """비밀번호 검증기"""
    
    name = "password"
    
    log_value = False
    
    MIN_LENGTH = 8
    
    ALLOWED = re.compile(r'[A-Za-z0-9]+')
    LETTER = re.compile(r'[A-Za-z]')
    DIGIT = re.compile(r'[0-9]')
    
    def validate(self, value: str) -> bool:
        if len(value) < self.MIN_LENGTH:
            return False
        
        if not self.ALLOWED.fullmatch(value):
            return False
        
        return bool(self.LETTER.search(value) and self.DIGIT.search(value))
