__version__ = '0.1.0'

from loguru import logger

from .domain.common.utils.string import (
    StringUtils,
    append_all,
    concat_range,
    concat_ranges,
    duplicate,
    is_empty_and_not_null,
    is_empty_or_null,
    is_one_of,
    no_one_is_empty_or_null,
    separate_array_by,
    separate_tree_map_values_by,
    split_by_char,
    trim_if_necessary,
)

# Silent until the host application opts in through setup_logging()
logger.disable('stringkit')

__all__ = [
    'StringUtils',
    '__version__',
    'append_all',
    'concat_range',
    'concat_ranges',
    'duplicate',
    'is_empty_and_not_null',
    'is_empty_or_null',
    'is_one_of',
    'no_one_is_empty_or_null',
    'separate_array_by',
    'separate_tree_map_values_by',
    'split_by_char',
    'trim_if_necessary',
]
