"""
Utils 패키지
"""
from .logger import logger, setup_logger, get_logger, preview
from .exceptions import ValidationsError, UnsupportedValidationTypeError
from .constants import *

__all__ = [
    'logger',
    'setup_logger',
    'get_logger',
    'preview',
    'ValidationsError',
    'UnsupportedValidationTypeError',
]
