"""
카드번호 검증기

[검증 전략]
- 숫자 이외 문자 모두 제거 (하이픈, 공백 등)
- 13-19자리 숫자 형식 검증
- Luhn 알고리즘으로 체크섬 검증
"""
import re
from .base_validator import BaseValidator


class CardValidator(BaseValidator):
    """카드번호 검증기"""
    
    name = "credit_card"
    
    CARD_NUMBER_PATTERN = re.compile(r'[0-9]{13,19}')
    
    def validate(self, value: str) -> bool:
        """카드번호 전체 검증 (형식 + Luhn)"""
        digits = self.digits_only(value)
        
        # 길이 체크 (13-19자리)
        if not self.CARD_NUMBER_PATTERN.fullmatch(digits):
            return False
        
        return self.verify_luhn(digits)
    
    def verify_luhn(self, value: str) -> bool:
        """
        Luhn 알고리즘 검증 (카드번호 체크섬)
        
        1. 오른쪽부터 짝수 위치 숫자를 2배
        2. 2배한 값이 9보다 크면 9를 뺌
        3. 모든 숫자의 합이 10의 배수면 유효
        """
        digits = self.digits_only(value)
        
        if not digits:
            return False
        
        total = 0
        for i, d in enumerate(reversed(digits)):
            n = int(d)
            if i % 2 == 1:  # 짝수 위치 (0-indexed에서 홀수)
                n *= 2
                if n > 9:
                    n -= 9
            total += n
        
        return total % 10 == 0
    
    def get_card_brand(self, value: str) -> str:
        """카드 브랜드 추정 (판정에는 사용하지 않음)"""
        digits = self.digits_only(value)
        
        if len(digits) < 2:
            return "Unknown"
        
        # 첫 자리(들)로 브랜드 판단
        if digits.startswith('4'):
            return "VISA"
        elif digits.startswith(('51', '52', '53', '54', '55')):
            return "MasterCard"
        elif digits.startswith(('34', '37')):
            return "AMEX"
        elif digits.startswith('35'):
            return "JCB"
        elif digits.startswith('6'):
            return "Discover/UnionPay"
        else:
            return "Other"
