from __future__ import annotations

import logging
from typing import Any, Callable, Iterable

import pandas as pd

from . import tqdm
from .convert import icao_to_n, is_valid_icao, n_to_icao
from .errors import NNumberError
from .mixins import DataFrameMixin

_log = logging.getLogger(__name__)


def _convert(
    values: Iterable[Any], function: Callable[[str], str], desc: str
) -> list[None | str]:
    result: list[None | str] = []
    for value in tqdm(values, desc=desc, leave=False):
        if not isinstance(value, str):
            result.append(None)
            continue
        try:
            result.append(function(value))
        except NNumberError as e:
            _log.debug(f"Skipping {value!r}: {e}")
            result.append(None)
    return result


def registration(icao24: pd.Series) -> pd.Series:
    """Converts a Series of ICAO addresses to N-Number registrations.

    Invalid addresses are converted to None.

    >>> registration(pd.Series(["a00001", "adf7c7", "3c6444"])).tolist()
    ['N1', 'N99999', None]
    """
    return pd.Series(
        _convert(icao24, icao_to_n, "registration"),
        index=icao24.index,
        dtype=object,
        name="registration",
    )


def icao24(registration: pd.Series) -> pd.Series:
    """Converts a Series of N-Number registrations to ICAO addresses.

    Invalid registrations are converted to None.

    >>> icao24(pd.Series(["N1", "N99999", "F-HNAV"])).tolist()
    ['a00001', 'adf7c7', None]
    """
    return pd.Series(
        _convert(registration, n_to_icao, "icao24"),
        index=registration.index,
        dtype=object,
        name="icao24",
    )


class Registers(DataFrameMixin):
    """A table of US ICAO addresses and their N-Number registrations.

    The underlying DataFrame has an ``icao24`` and a ``registration``
    column. When only one of them is provided, the other one is computed.
    Entries which cannot be converted are kept with an empty value in the
    computed column.

    >>> r = Registers.from_registration(["N1", "N99999"])
    >>> r["adf7c7"]
    {'icao24': 'adf7c7', 'registration': 'N99999'}

    """

    columns_options = dict(
        icao24=dict(),
        registration=dict(),
    )

    def __init__(self, data: pd.DataFrame, *args: Any, **kwargs: Any) -> None:
        if "icao24" not in data.columns and "registration" not in data.columns:
            raise ValueError("Missing column: icao24 or registration")

        # column the table was built from, the other one may be computed
        self.source = "icao24" if "icao24" in data.columns else "registration"

        if "icao24" in data.columns:
            data = data.assign(
                icao24=data.icao24.apply(
                    lambda x: x.lower() if isinstance(x, str) else x
                )
            )
        if "registration" not in data.columns:
            data = data.assign(registration=registration(data.icao24))
        if "icao24" not in data.columns:
            data = data.assign(icao24=icao24(data.registration))

        others = [
            c for c in data.columns if c not in ("icao24", "registration")
        ]
        data = data[["icao24", "registration", *others]]

        super().__init__(data, *args, **kwargs)

    @classmethod
    def from_icao24(cls, icao24: Iterable[str]) -> Registers:
        return cls(pd.DataFrame({"icao24": list(icao24)}, dtype=object))

    @classmethod
    def from_registration(cls, registration: Iterable[str]) -> Registers:
        return cls(
            pd.DataFrame({"registration": list(registration)}, dtype=object)
        )

    def __getitem__(self, key: str) -> None | dict[str, Any]:
        if is_valid_icao(key):
            df = self.data.loc[self.data.icao24 == key.lower()]
        else:
            df = self.data.loc[self.data.registration == key]
        if df.shape[0] == 0:
            return None
        return df.iloc[0].to_dict()  # type: ignore

    @property
    def _valid_mask(self) -> pd.Series:
        return self.data[["icao24", "registration"]].notna().all(axis=1)

    @property
    def valid(self) -> Registers:
        """Entries with both an ICAO address and a registration."""
        return self.__class__(self.data.loc[self._valid_mask])

    @property
    def invalid(self) -> Registers:
        """Entries which could not be converted."""
        return self.__class__(self.data.loc[~self._valid_mask])
