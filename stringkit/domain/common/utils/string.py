"""String Utilities Module
Provides null/empty checks, trimming, joining, splitting and ranged
concatenation helpers over strings and sequences.
Uses only the standard Python library.
"""

from collections.abc import Mapping, Sequence
from io import StringIO
from typing import Any

# Trimming removes every character up to and including the space.
_TRIM_CHARS = ''.join(chr(code) for code in range(0x21))


def _trim(text: str) -> str:
    return text.strip(_TRIM_CHARS)


# ---------- Checks ----------
def is_empty_or_null(text: str | None, trim: bool) -> bool:
    """Return ``True`` if *text* is ``None`` or empty (optionally after trim)."""
    return text is None or not (_trim(text) if trim else text)


def is_empty_and_not_null(text: str | None, trim: bool) -> bool:
    """Return ``True`` only if *text* is present and empty (optionally after trim)."""
    return text is not None and not (_trim(text) if trim else text)


def no_one_is_empty_or_null(trim: bool, *strings: str | None) -> bool:
    """Return ``True`` if none of *strings* is ``None`` or empty.

    An empty argument list is vacuously ``True``.
    """
    return not any(is_empty_or_null(text, trim) for text in strings)


def is_one_of(text: str | None, trim: bool, *ors: str | None) -> bool:
    """Check whether *text* equals one of *ors*.

    *text* is always trimmed; each candidate is trimmed only when *trim* is
    set. A ``None`` *text* matches a ``None`` candidate only.
    """
    text = trim_if_necessary(True, text)

    for candidate in ors:
        if text is None:
            if candidate is None:
                return True

        elif text == trim_if_necessary(trim, candidate):
            return True

    return False


def trim_if_necessary(trim: bool, text: str | None) -> str | None:
    """Return *text* trimmed when *trim* is set, otherwise unchanged."""
    return _trim(text) if text is not None and trim else text


# ---------- Joining ----------
def append_all(buffer: StringIO, *elements: Any) -> StringIO:
    """Write ``str()`` of every element to *buffer* and return it for chaining."""
    for element in elements:
        buffer.write(str(element))
    return buffer


def separate_array_by(array: Sequence[Any], separator: str) -> str:
    """Join *array* by *separator*, rendering ``None`` elements as ``''``."""
    return separator.join(
        '' if element is None else str(element) for element in array
    )


def separate_tree_map_values_by(
    mapping: Mapping[Any, str], separator: str
) -> str:
    """Join the values of *mapping* by *separator* in ascending key order.

    Keys must be mutually orderable, a ``TypeError`` propagates otherwise.
    """
    return separator.join(str(mapping[key]) for key in sorted(mapping))


# ---------- Splitting ----------
def split_by_char(text: str, char: str) -> list[str]:
    """Split *text* at every occurrence of the single character *char*.

    Consecutive delimiters yield empty segments, so the result always holds
    ``text.count(char) + 1`` items. *text* must not be ``None``.
    """
    if len(char) != 1:
        msg = f'expected a single character, got: {char!r}'
        raise ValueError(msg)

    return text.split(char)


# ---------- Ranges ----------
def concat_range(array: Sequence[Any], separator: str, start: int, end: int) -> str:
    """Concatenate elements ``array[start]`` to ``array[end]`` inclusive."""
    if end < start:
        msg = 'illegal range'
        raise ValueError(msg)

    if start < 0:
        msg = f'index out of range: {start}'
        raise IndexError(msg)

    return separator.join(str(array[i]) for i in range(start, end + 1))


def concat_ranges(array: Sequence[Any], separator: str, *ranges: int) -> str:
    """Concatenate several ``(start, end)`` ranges of *array*.

    *ranges* is a flat sequence of pairs. Ranges are joined by the same
    *separator* used inside each range.
    """
    if len(ranges) % 2 != 0:
        msg = 'the number of ranges must be even'
        raise ValueError(msg)

    return separator.join(
        concat_range(array, separator, ranges[i], ranges[i + 1])
        for i in range(0, len(ranges), 2)
    )


# ---------- Generation ----------
def duplicate(text: str, times: int) -> str:
    """Repeat *text* *times* times; zero or negative gives ``''``."""
    return text * max(times, 0)


class StringUtils:
    """Collection of static string utility methods."""

    is_empty_or_null = staticmethod(is_empty_or_null)
    is_empty_and_not_null = staticmethod(is_empty_and_not_null)
    no_one_is_empty_or_null = staticmethod(no_one_is_empty_or_null)
    is_one_of = staticmethod(is_one_of)
    trim_if_necessary = staticmethod(trim_if_necessary)
    append_all = staticmethod(append_all)
    separate_array_by = staticmethod(separate_array_by)
    separate_tree_map_values_by = staticmethod(separate_tree_map_values_by)
    split_by_char = staticmethod(split_by_char)
    concat_range = staticmethod(concat_range)
    concat_ranges = staticmethod(concat_ranges)
    duplicate = staticmethod(duplicate)
