"""
검증기 기본 클래스

[역할]
- 공통 인터페이스 정의 (validate)
- 공통 입력 가드 (타입, 길이 상한)
- 숫자 정규화 헬퍼
"""
import re
from abc import ABC, abstractmethod

from ..utils.constants import MAX_INPUT_LENGTH
from ..utils.logger import logger, preview


class BaseValidator(ABC):
    """검증기 기본 클래스"""
    
    # 로그 표시용 이름 (하위 클래스에서 지정)
    name = "base"
    
    # 입력 길이 상한 (하위 클래스에서 조정 가능)
    max_length = MAX_INPUT_LENGTH
    
    # 실패 로그에 입력값 앞부분을 남길지 여부 (비밀값은 False)
    log_value = True
    
    _NON_DIGIT = re.compile(r'[^0-9]')
    
    @classmethod
    def digits_only(cls, value: str) -> str:
        """숫자만 추출 (하이픈, 공백 등 모두 제거)"""
        return cls._NON_DIGIT.sub('', value)
    
    def is_valid(self, value) -> bool:
        """
        입력 가드 + 형식 검증
        
        Args:
            value: 검증할 값 (str 이외의 값은 무조건 False)
            
        Returns:
            bool: 형식(및 체크섬)이 맞으면 True. 예외는 발생하지 않음
        """
        if not isinstance(value, str):
            logger.debug(f"[{self.name}] 문자열 아님: {type(value).__name__}")
            return False
        
        if len(value) > self.max_length:
            logger.debug(f"[{self.name}] 길이 초과: {len(value)} > {self.max_length}")
            return False
        
        result = self.validate(value)
        if not result:
            logger.debug(f"[{self.name}] 검증 실패: {preview(value, self.log_value)}")
        return result
    
    @abstractmethod
    def validate(self, value: str) -> bool:
        """
        기본 형식 검증
        
        Args:
            value: 검증할 값
            
        Returns:
            bool: 기본 형식이 맞으면 True
        """
        pass
