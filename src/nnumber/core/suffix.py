from __future__ import annotations

import logging

from .charset import charset, suffix_size
from .errors import InvalidSuffix

_log = logging.getLogger(__name__)


def get_suffix(offset: int) -> str:
    """Compute the suffix for the tail number given an offset.

    An offset of 0 returns a valid empty suffix.
    A non-zero offset returns a string containing one or two characters.

    >>> get_suffix(0)
    ''
    >>> get_suffix(1)
    'A'
    >>> get_suffix(2)
    'AA'
    >>> get_suffix(3)
    'AB'
    >>> get_suffix(24)
    'AY'
    >>> get_suffix(26)
    'B'
    >>> get_suffix(600)
    'ZZ'
    >>> get_suffix(601)
    Traceback (most recent call last):
        ...
    nnumber.core.errors.InvalidSuffix: Invalid offset 601, must be in [0, 601)

    """
    if not 0 <= offset < suffix_size:
        raise InvalidSuffix(
            f"Invalid offset {offset}, must be in [0, {suffix_size})"
        )
    if offset == 0:
        return ""
    index, rem = divmod(offset - 1, len(charset) + 1)
    return charset[index] + (charset[rem - 1] if rem > 0 else "")


def suffix_offset(suffix: str) -> int:
    """Compute the offset corresponding to the given alphabetical suffix.

    >>> suffix_offset("")
    0
    >>> suffix_offset("A")
    1
    >>> suffix_offset("AA")
    2
    >>> suffix_offset("AZ")
    25
    >>> suffix_offset("BA")
    27
    >>> suffix_offset("ZZ")
    600
    """
    length = len(suffix)

    if length == 0:
        return 0

    if length > 2:
        _log.debug(f"Invalid suffix {suffix!r}")
        msg = (
            "Invalid input value:"
            " the suffix must be comprised of at most 2 letters"
        )
        raise InvalidSuffix(msg)

    if any(c not in charset for c in suffix):
        _log.debug(f"Invalid suffix {suffix!r}")
        msg = f"Invalid input value: each letter must be in {charset}"
        raise InvalidSuffix(msg)

    count = (len(charset) + 1) * charset.index(suffix[0]) + 1

    if length == 2:
        count += charset.index(suffix[1]) + 1

    return count
