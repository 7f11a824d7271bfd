import doctest
from types import ModuleType

import pytest

from nnumber.core import convert, icao, registers, suffix


@pytest.mark.parametrize("module", [suffix, icao, convert, registers])
def test_doctest(module: ModuleType) -> None:
    result = doctest.testmod(module)
    assert result.failed == 0
