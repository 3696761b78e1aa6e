"""
핵심 디스패치 패키지
"""
from .validation_type import ValidationType
from .registry import VALIDATOR_REGISTRY, get_validator, is_valid, validate_all

__all__ = [
    'ValidationType',
    'VALIDATOR_REGISTRY',
    'get_validator',
    'is_valid',
    'validate_all',
]
