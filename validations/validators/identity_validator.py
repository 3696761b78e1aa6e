"""
신원번호 검증기 (터키 TC Kimlik 11자리)

[검증 전략]
- 숫자 이외 문자 모두 제거
- 정확히 11자리, 첫 자리는 0이 아님
- 앞 10자리 가중합으로 마지막 체크 디짓 검증

[체크섬 공식]
    합계 = Σ 자리[i] × (i 짝수면 1, 홀수면 3)   (i = 0..9)
    체크 디짓 = 합계 % 10 == 0 이면 0, 아니면 10 - (합계 % 10)
"""
from typing import Optional

from .base_validator import BaseValidator


class IdentityNumberValidator(BaseValidator):
    """신원번호 검증기"""
    
    name = "identity_number"
    
    LENGTH = 11
    
    # 체크섬 가중치 (짝수 인덱스 1, 홀수 인덱스 3)
    CHECKSUM_WEIGHTS = [1, 3, 1, 3, 1, 3, 1, 3, 1, 3]
    
    def validate(self, value: str) -> bool:
        """신원번호 형식 + 체크섬 검증"""
        digits = self.digits_only(value)
        
        # 길이 체크
        if len(digits) != self.LENGTH:
            return False
        
        # 첫 자리 0 불가
        if digits[0] == '0':
            return False
        
        return self.checksum_digit(digits) == int(digits[10])
    
    def checksum_digit(self, digits: str) -> Optional[int]:
        """
        앞 10자리로 체크 디짓 계산
        
        Returns:
            0-9 체크 디짓, 숫자 10자리 미만이면 None
        """
        digits = self.digits_only(digits)
        if len(digits) < 10:
            return None
        
        total = 0
        for i in range(10):
            total += int(digits[i]) * self.CHECKSUM_WEIGHTS[i]
        
        remainder = total % 10
        return 0 if remainder == 0 else 10 - remainder
