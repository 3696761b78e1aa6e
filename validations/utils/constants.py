"""
공통 설정 상수

[환경 변수]
- VALIDATIONS_MAX_INPUT_LENGTH: 검증 대상 문자열 최대 길이 (기본 4096)
- VALIDATIONS_LOG_LEVEL: 로그 레벨 (기본 WARNING)
- VALIDATIONS_LOG_FILE: 로그 파일 경로 (미설정 시 핸들러 없음)
"""
import os


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


# 입력 길이 상한 (정규식 최악 지연 방지)
MAX_INPUT_LENGTH = _env_int('VALIDATIONS_MAX_INPUT_LENGTH', 4096)

# URL 허용 스킴 (소문자)
ALLOWED_URL_SCHEMES = frozenset({'http', 'https', 'ftp'})

# 로그 설정
LOG_LEVEL = os.environ.get('VALIDATIONS_LOG_LEVEL', 'WARNING').upper()
LOG_FILE = os.environ.get('VALIDATIONS_LOG_FILE') or None

# 로그에 남길 입력값 앞부분 최대 길이 (전체 값은 남기지 않음)
LOG_PREVIEW_LENGTH = 2

__all__ = [
    'MAX_INPUT_LENGTH',
    'ALLOWED_URL_SCHEMES',
    'LOG_LEVEL',
    'LOG_FILE',
    'LOG_PREVIEW_LENGTH',
]
