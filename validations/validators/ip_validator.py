"""
IPv4 주소 검증기

[주의]
- 형식만 검증 (숫자 1-3자리 × 4, 점 구분)
- 옥텟 범위(0-255)는 검증하지 않음: 999.999.999.999 도 통과
"""
import re
from .base_validator import BaseValidator


class IPValidator(BaseValidator):
    """IPv4 주소 기본 형식 검증기"""
    
    name = "ipv4_address"
    
    IPV4_PATTERN = re.compile(r'[0-9]{1,3}(?:\.[0-9]{1,3}){3}')
    
    def validate(self, value: str) -> bool:
        return bool(self.IPV4_PATTERN.fullmatch(value))
