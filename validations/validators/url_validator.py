"""
URL 검증기

[검증 전략]
- RFC 3986 허용 문자만 (unreserved / reserved / %HH), 공백·제어 문자 불가
- authority 안의 '@'는 최대 1개
- urllib3 파서로 구조 분해 (파싱 실패 시 False)
- 스킴: http / https / ftp (대소문자 무시)
- 호스트: 비어 있지 않고 reg-name / IPv4 / [IP-literal] 문법
- 접속 확인 없음 (형식만)
"""
import re

from urllib3.exceptions import LocationParseError
from urllib3.util import parse_url

from .base_validator import BaseValidator
from ..utils.constants import ALLOWED_URL_SCHEMES
from ..utils.logger import logger


class URLValidator(BaseValidator):
    """URL 검증기"""
    
    name = "url"
    
    allowed_schemes = ALLOWED_URL_SCHEMES
    
    # urllib3는 허용되지 않는 문자를 퍼센트 인코딩해 통과시키므로 원문을 먼저 검사
    URI_CHARS = re.compile(r"(?:[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=]|%[0-9A-Fa-f]{2})+")
    
    AUTHORITY_END = re.compile(r'[/?#]')
    
    # reg-name / IPv4, [IP-literal] (urllib3 버전에 따라 괄호 없이 올 수 있음)
    HOST_PATTERN = re.compile(r"[A-Za-z0-9._~!$&'()*+,;=%\-]+|\[?[0-9A-Fa-f:.]+\]?")
    
    def validate(self, value: str) -> bool:
        if not self.URI_CHARS.fullmatch(value):
            return False
    
        # 'a@b@c' 같은 중복 userinfo 구분자
        _, sep, rest = value.partition('://')
        if sep and self.AUTHORITY_END.split(rest, 1)[0].count('@') > 1:
            return False
    
        try:
            url = parse_url(value)
        except (LocationParseError, ValueError) as e:
            logger.debug(f"[{self.name}] URL 파싱 실패: {type(e).__name__}")
            return False
    
        if not url.scheme or url.scheme.lower() not in self.allowed_schemes:
            return False
    
        return bool(url.host) and bool(self.HOST_PATTERN.fullmatch(url.host))
