"""
이름 검증기

[형식]
- 영문자로 시작
- 이후 영문자, 또는 구분자(' , . 공백 -) + 영문자/공백 한 글자의 반복
- 숫자 불가

예) "John", "O'Neil", "Mary-Jane", "Smith, J. R"
"""
import re
from .base_validator import BaseValidator


class NameValidator(BaseValidator):
    """이름 검증기"""
    
    name = "name"
    
    # [A-Za-z]+(([',. -][A-Za-z ])?[A-Za-z]*)* 와 동일한 언어
    # 각 위치에서 선택지가 하나뿐이라 선형 시간
    NAME_PATTERN = re.compile(r"[A-Za-z](?:[A-Za-z]|[',. \-][A-Za-z ])*")
    
    def validate(self, value: str) -> bool:
        return bool(self.NAME_PATTERN.fullmatch(value))
