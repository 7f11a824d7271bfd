# ruff: noqa: I001, E402
"""
It is crucial that the imports do not change order,
hence the following line:
# ruff: noqa: I001
"""

import logging
from typing import Any, Dict, Iterable, Iterator, TypeVar

from tqdm.auto import tqdm as _tqdm_auto
from tqdm.autonotebook import tqdm as _tqdm_autonotebook
from tqdm.rich import tqdm as _tqdm_rich
from tqdm.std import tqdm as _tqdm_std

from .. import tqdm_style
from .types import ProgressbarType

T = TypeVar("T")


def silent_tqdm(
    iterable: Iterable[T], *args: Any, **kwargs: Any
) -> Iterator[T]:
    yield from iterable  # Dummy tqdm function


tqdm_dict: Dict[str, ProgressbarType] = {
    "autonotebook": _tqdm_autonotebook,
    "auto": _tqdm_auto,
    "rich": _tqdm_rich,
    "silent": silent_tqdm,
    "std": _tqdm_std,
}


tqdm = tqdm_dict[tqdm_style]

# WARNING!! Don't change order of import in this file
from .errors import InvalidIcaoAddress, InvalidNNumber, NNumberError
from .convert import icao_to_n, is_valid_icao, is_valid_n_number, n_to_icao
from .registers import Registers


__all__ = [
    "InvalidIcaoAddress",
    "InvalidNNumber",
    "NNumberError",
    "Registers",
    "icao_to_n",
    "is_valid_icao",
    "is_valid_n_number",
    "loglevel",
    "n_to_icao",
    "tqdm",
]


def loglevel(mode: str) -> None:
    """
    Changes the log level of the libraries root logger.

    :param mode:
        New log level.
    """
    _log = logging.getLogger("nnumber")
    if not any(isinstance(h, logging.StreamHandler) for h in _log.handlers):
        _log.addHandler(logging.StreamHandler())
        _log.info("Setting a default StreamHandler")
    _log.setLevel(getattr(logging, mode))
