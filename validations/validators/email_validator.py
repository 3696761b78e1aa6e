"""
이메일 검증기

[형식]
    [A-Za-z0-9._%+-]+ @ [A-Za-z0-9.-]+ . [A-Za-z]{2,}
- DNS/메일박스 확인 없음 (형식만)
"""
import re
from .base_validator import BaseValidator


class EmailValidator(BaseValidator):
    """이메일 주소 검증기"""
    
    name = "email"
    
    LOCAL_PART = re.compile(r"[A-Za-z0-9._%+-]+")
    DOMAIN_CHARS = re.compile(r"[A-Za-z0-9.-]+")
    TLD = re.compile(r"[A-Za-z]{2,}")
    
    def validate(self, value: str) -> bool:
        local, at, domain = value.partition('@')
        if not at or not self.LOCAL_PART.fullmatch(local):
            return False
        
        # TLD는 글자만 허용되므로 반드시 마지막 '.' 뒤
        host, dot, tld = domain.rpartition('.')
        if not dot:
            return False
        
        return bool(self.DOMAIN_CHARS.fullmatch(host) and self.TLD.fullmatch(tld))
