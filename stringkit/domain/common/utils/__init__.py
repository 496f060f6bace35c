from .string import StringUtils

__all__ = [
    'StringUtils',
]
