"""
ISBN 검증기

[형식]
- ISBN-10: 숫자 9자리 + 숫자 또는 'X'
- ISBN-13: 숫자 13자리
- 체크 디짓 검증 없음 (길이/모양만)
"""
import re
from typing import Optional

from .base_validator import BaseValidator


class ISBNValidator(BaseValidator):
    """ISBN 검증기"""
    
    name = "isbn"
    
    ISBN10_PATTERN = re.compile(r'[0-9]{9}[0-9X]')
    ISBN13_PATTERN = re.compile(r'[0-9]{13}')
    
    def validate(self, value: str) -> bool:
        return self.get_format(value) is not None
    
    def get_format(self, value: str) -> Optional[str]:
        """ISBN 형식 판별 ("ISBN-10", "ISBN-13", 해당 없으면 None)"""
        if self.ISBN10_PATTERN.fullmatch(value):
            return "ISBN-10"
        if self.ISBN13_PATTERN.fullmatch(value):
            return "ISBN-13"
        return None
