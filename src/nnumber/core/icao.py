from __future__ import annotations

import logging

from .charset import ICAO_SIZE, US_PREFIX, hexset
from .errors import AddressOverflow, InvalidFormat

_log = logging.getLogger(__name__)


def create_icao(prefix: str, number: int) -> str:
    """
    Creates an ICAO address composed from the prefix ('a' for USA)
    and from the given number.

    The output is an hexadecimal of length 6 starting with the prefix.

    >>> create_icao("a", 11)
    'a0000b'
    >>> create_icao("a", 915399)
    'adf7c7'
    >>> create_icao("a", 0x1000000)
    Traceback (most recent call last):
        ...
    nnumber.core.errors.AddressOverflow: Invalid value 0x1000000, too large for prefix 'a'

    """
    if number < 0:
        raise AddressOverflow(f"Invalid value {number}, must be non-negative")

    suffix = format(number, "x")
    if len(prefix) + len(suffix) > ICAO_SIZE:
        raise AddressOverflow(
            f"Invalid value {number:#x}, too large for prefix {prefix!r}"
        )

    return prefix + suffix.rjust(ICAO_SIZE - len(prefix), "0")


def parse_icao(icao: str) -> int:
    """Parse a US ICAO address and return the value following the prefix.

    >>> parse_icao("a0000b")
    11
    >>> parse_icao("ADF7C7")
    915399
    """
    icao = icao.upper()

    if (
        len(icao) != ICAO_SIZE
        or icao[0] != US_PREFIX.upper()
        or any(c not in hexset for c in icao)
    ):
        _log.debug(f"Invalid ICAO address {icao!r}")
        raise InvalidFormat(f"{icao} is not a valid US register ICAO address")

    return int(icao[1:], base=16)
