# The numbering scheme comes from the following repository
# https://github.com/guillaumemichel/icao-nnumber-converter

from __future__ import annotations

import logging

from .charset import (
    MAX_VALUE,
    NNUMBER_MAX_SIZE,
    US_PREFIX,
    allchars,
    charset,
    digitset,
    factors,
    suffix_size,
)
from .errors import (
    AddressOverflow,
    InvalidFormat,
    InvalidIcaoAddress,
    InvalidNNumber,
    InvalidSuffix,
)
from .icao import create_icao, parse_icao
from .suffix import get_suffix, suffix_offset

_log = logging.getLogger(__name__)


def _check_n_number(n_number: str) -> None:
    if not 0 < len(n_number) <= NNUMBER_MAX_SIZE or n_number[0] != "N":
        raise InvalidNNumber(f"{n_number} is not a valid N number")

    tail = n_number[1:]

    if any(c not in allchars for c in tail):
        raise InvalidNNumber(
            f"{n_number} is not a valid N number: "
            f"each character must be in {allchars}"
        )

    if len(tail) > 0 and tail[0] not in digitset[1:]:
        raise InvalidNNumber(
            f"{n_number} is not a valid N number: must start with N[1-9]"
        )

    # letters, once they start, run until the end of the string
    letters = [i for i, c in enumerate(tail) if c in charset]
    if len(letters) > 0 and letters != list(range(letters[0], len(tail))):
        raise InvalidNNumber(
            f"{n_number} is not a valid N number: no digit after a letter"
        )


def n_to_icao(n_number: str) -> str:
    """Convert a N-number to the corresponding a- ICAO address.

    >>> n_to_icao("N")
    'a00000'
    >>> n_to_icao("N1")
    'a00001'
    >>> n_to_icao("N1AZ")
    'a0001a'
    >>> n_to_icao("N1B")
    'a0001b'
    >>> n_to_icao("N1000Z")
    'a00724'
    >>> n_to_icao("N10000")
    'a00725'
    >>> n_to_icao("N1002")
    'a00752'
    >>> n_to_icao("N102A")
    'a00c22'
    >>> n_to_icao("N9A")
    'ac6a7a'
    >>> n_to_icao("N99999")
    'adf7c7'

    """
    try:
        _check_n_number(n_number)
    except InvalidNNumber as e:
        _log.debug(str(e))
        raise

    tail = n_number[1:]
    if len(tail) == 0:
        return create_icao(US_PREFIX, 0)

    count = 1
    try:
        for i, c in enumerate(tail):
            if i == NNUMBER_MAX_SIZE - 2:
                # last possible char (in allchars)
                count += allchars.index(c) + 1
            elif c in charset:
                # nothing comes after alphabetical chars
                count += suffix_offset(tail[i:])
                break
            elif i == 0:
                count += (int(c) - 1) * factors[0]
            else:
                count += int(c) * factors[i] + suffix_size

        return create_icao(US_PREFIX, count)

    except (InvalidSuffix, AddressOverflow) as e:
        _log.debug(f"{n_number}: {e}")
        raise InvalidNNumber(f"{n_number} is not a valid N number") from e


def icao_to_n(icao: str) -> str:
    """Convert an a- ICAO address to a N-number registration.

    >>> icao_to_n("a00000")
    'N'
    >>> icao_to_n("a00001")
    'N1'
    >>> icao_to_n("a0001a")
    'N1AZ'
    >>> icao_to_n("a0001b")
    'N1B'
    >>> icao_to_n("a00724")
    'N1000Z'
    >>> icao_to_n("a00725")
    'N10000'
    >>> icao_to_n("A00752")
    'N1002'
    >>> icao_to_n("a00c22")
    'N102A'
    >>> icao_to_n("ac6a7a")
    'N9A'
    >>> icao_to_n("adf7c7")
    'N99999'
    """
    try:
        value = parse_icao(icao) - 1
    except InvalidFormat as e:
        _log.debug(str(e))
        raise InvalidIcaoAddress(str(e)) from e

    output = "N"  # digit 0 = N

    if value < 0:
        return output

    if value >= MAX_VALUE:
        _log.debug(f"{icao} is above the last N-Number address")
        raise InvalidIcaoAddress(
            f"{icao} is not in the N-Number range "
            f"{create_icao(US_PREFIX, 0)}-{create_icao(US_PREFIX, MAX_VALUE)}"
        )

    digit, rem = divmod(value, factors[0])
    output += str(digit + 1)

    for factor in factors[1:]:
        if rem < suffix_size:
            return output + get_suffix(rem)

        digit, rem = divmod(rem - suffix_size, factor)
        output += str(digit)

    if rem == 0:
        return output

    # find last character
    return output + allchars[rem - 1]


def is_valid_n_number(n_number: str) -> bool:
    """Returns True if the tail number converts to an ICAO address.

    >>> is_valid_n_number("N123AB")
    True
    >>> is_valid_n_number("N0")
    False
    """
    try:
        n_to_icao(n_number)
    except InvalidNNumber:
        return False
    return True


def is_valid_icao(icao: str) -> bool:
    """Returns True if the ICAO address converts to a tail number."""
    try:
        icao_to_n(icao)
    except InvalidIcaoAddress:
        return False
    return True
