"""
로깅 설정 모듈
"""
import logging
from typing import Optional

from .constants import LOG_FILE, LOG_LEVEL, LOG_PREVIEW_LENGTH


def setup_logger(name: str = __name__, log_file: Optional[str] = LOG_FILE,
                 level: str = LOG_LEVEL) -> logging.Logger:
    """로거 설정 및 반환"""
    
    logger = logging.getLogger(name)
    
    if logger.handlers:
        return logger
    
    logger.setLevel(getattr(logging, level, logging.WARNING))
    
    # 라이브러리 기본값: 출력은 호출 애플리케이션에 맡김
    if not log_file:
        logger.addHandler(logging.NullHandler())
        return logger
    
    # 파일 핸들러
    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    
    # 콘솔 핸들러
    console_handler = logging.StreamHandler()
    
    # 포맷터
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    file_handler.setFormatter(formatter)
    console_handler.setFormatter(formatter)
    
    logger.addHandler(file_handler)
    logger.addHandler(console_handler)
    
    return logger


def get_logger(name: str = None) -> logging.Logger:
    """로거 가져오기 (setup_logger의 별칭)"""
    if name is None:
        return logger
    return setup_logger(name)


def preview(value: str, reveal: bool = True) -> str:
    """
    로그용 입력값 요약
    
    앞부분은 최대 LOG_PREVIEW_LENGTH자, 그리고 항상 전체 길이의 절반 이하만 남긴다.
    reveal=False 이면 길이만 남긴다.
    """
    text = str(value)
    if not reveal:
        return f"(len={len(text)})"
    head = text[:min(LOG_PREVIEW_LENGTH, len(text) // 2)]
    return f"{head!r}... (len={len(text)})"


# 기본 로거
logger = setup_logger('validations')
