from .log import LogConfiguration

__all__ = [
    'LogConfiguration',
]
