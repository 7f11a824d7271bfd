from itertools import product
from typing import Iterator

import pytest

from nnumber import icao_to_n, n_to_icao
from nnumber.core import InvalidIcaoAddress, InvalidNNumber, NNumberError
from nnumber.core.charset import MAX_VALUE, charset
from nnumber.core.convert import is_valid_icao, is_valid_n_number
from nnumber.core.suffix import get_suffix


def all_n_numbers() -> Iterator[str]:
    """All valid tail numbers, built from the FAA rules."""
    suffixes = [get_suffix(offset) for offset in range(601)]
    yield "N"
    for length in range(1, 5):
        digitsets = ["0123456789"] * (length - 1)
        for head, *tail in product("123456789", *digitsets):
            digits = "N" + head + "".join(tail)
            if length < 4:
                for suffix in suffixes:
                    yield digits + suffix
            else:
                yield digits
                for last in charset + "0123456789":
                    yield digits + last


def test_boundaries() -> None:
    assert n_to_icao("N") == "a00000"
    assert icao_to_n("A00000") == "N"
    assert n_to_icao("N1") == "a00001"
    assert icao_to_n(n_to_icao("N1")) == "N1"
    assert n_to_icao("N1A") == "a00002"
    assert n_to_icao("N99999") == "adf7c7"
    assert icao_to_n("ADF7C7") == "N99999"


def test_known_values() -> None:
    # lower bound of the address range reserved for the PIA program
    assert icao_to_n("a4d691") == "N41000"
    assert n_to_icao("N42") == "a4f945"
    assert n_to_icao("N123AB") == "a05ed9"
    assert icao_to_n("ac6a7a") == "N9A"


@pytest.mark.parametrize(
    "n_number",
    [
        "",
        "1234",
        "X123",
        "n1",
        "N0",
        "N01",
        "NA",
        "NA1",
        "N1I",
        "N1O",
        "N1A1",
        "N12A3",
        "N1ABC",
        "N12ABC",
        "N123456",
        "N1234AB",
        "N-123",
        "N12 ",
    ],
)
def test_invalid_n_number(n_number: str) -> None:
    with pytest.raises(InvalidNNumber):
        n_to_icao(n_number)
    assert not is_valid_n_number(n_number)


@pytest.mark.parametrize(
    "icao",
    ["", "A1234", "B12345", "A123456", "A1234G", "adf7c8", "ae0000", "afffff"],
)
def test_invalid_icao(icao: str) -> None:
    with pytest.raises(InvalidIcaoAddress):
        icao_to_n(icao)
    assert not is_valid_icao(icao)


def test_errors_are_chained() -> None:
    with pytest.raises(InvalidNNumber) as excinfo:
        n_to_icao("N1ABC")
    assert excinfo.value.__cause__ is not None

    with pytest.raises(NNumberError):
        icao_to_n("B12345")


def test_round_trip_icao() -> None:
    for value in range(MAX_VALUE + 1):
        icao = f"a{value:05x}"
        n_number = icao_to_n(icao)
        assert n_to_icao(n_number) == icao, n_number
        assert is_valid_n_number(n_number)


def test_round_trip_n_number() -> None:
    values = set()
    for n_number in all_n_numbers():
        icao = n_to_icao(n_number)
        assert icao_to_n(icao) == n_number
        values.add(int(icao[1:], 16))

    # injective and covering the whole range
    assert values == set(range(MAX_VALUE + 1))


def test_case_insensitive_icao() -> None:
    for icao in ["a00c22", "A00C22", "a00C22"]:
        assert icao_to_n(icao) == "N102A"
        assert n_to_icao(icao_to_n(icao)) == icao.lower()
