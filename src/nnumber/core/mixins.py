from __future__ import annotations

import logging
from numbers import Integral, Real
from pathlib import Path
from typing import Any, ClassVar

from rich.box import SIMPLE_HEAVY
from rich.console import Console, ConsoleOptions, RenderResult
from rich.table import Table
from typing_extensions import Self

import pandas as pd

_log = logging.getLogger(__name__)


class DataFrameMixin(object):
    """DataFrameMixin aggregates a pandas DataFrame and provides the same
    representation methods.

    """

    __slots__ = ()

    table_options: ClassVar[dict[str, Any]] = dict(
        show_lines=False, box=SIMPLE_HEAVY
    )
    max_rows: int = 10
    columns_options: None | dict[str, dict[str, Any]] = None

    def __init__(self, data: pd.DataFrame, *args: Any, **kwargs: Any) -> None:
        self.data: pd.DataFrame = data

    @classmethod
    def from_file(cls, filename: str | Path, **kwargs: Any) -> Self:
        """Read data from various formats.

        This class method dispatches the loading of data in various format to
        the proper ``pandas.read_*`` method based on the extension of the
        filename. Potential compression of the file is inferred by pandas itself
        based on the extension.

        - .pkl.* or .pickle.* dispatch to :func:`pandas.read_pickle`;
        - .parquet.* dispatch to :func:`pandas.read_parquet`;
        - .json.* dispatch to :func:`pandas.read_json`;
        - .jsonl dispatch to :func:`pandas.read_json` with ``lines=True``;
        - .csv.* dispatch to :func:`pandas.read_csv`.

        Other extensions raise a FileNotFoundError. Specific arguments may be
        passed to the underlying ``pandas.read_*`` method with the kwargs
        argument.

        Example usage:

        >>> from nnumber.core.registers import Registers
        >>> r = Registers.from_file(filename)
        """
        path = Path(filename)
        _log.info(f"Reading {path}")

        if ".pkl" in path.suffixes or ".pickle" in path.suffixes:
            return cls(pd.read_pickle(path, **kwargs))
        if ".parquet" in path.suffixes:  # coverage: ignore
            return cls(pd.read_parquet(path, **kwargs))
        if ".json" in path.suffixes:
            return cls(pd.read_json(path, dtype=False, **kwargs))
        if ".jsonl" in path.suffixes:
            return cls(pd.read_json(path, lines=True, dtype=False, **kwargs))
        if ".csv" in path.suffixes:
            return cls(pd.read_csv(path, dtype=str, **kwargs))

        raise FileNotFoundError(path)

    # --- Special methods ---

    def _repr_html_(self) -> str:
        return self.data._repr_html_()  # type: ignore

    def __len__(self) -> int:
        return self.data.shape[0]  # type: ignore

    def __rich_console__(
        self, console: Console, options: ConsoleOptions
    ) -> RenderResult:
        my_table = Table(**self.table_options)

        columns_options = self.columns_options
        if columns_options is None:
            columns_options = dict(
                (column, dict()) for column in self.data.columns
            )

        for column, opts in columns_options.items():
            my_table.add_column(column, **opts)

        data = self.data[: self.max_rows]

        for _, elt in data.iterrows():
            my_table.add_row(
                *list(
                    _format(elt.get(column, "")) for column in columns_options
                )
            )

        yield my_table

        delta = self.data.shape[0] - self.max_rows
        if delta > 0:
            yield f"... ({delta} more entries)"

    # --- Redirected to pandas.DataFrame ---

    def assign(self, *args: Any, **kwargs: Any) -> Self:
        """
        Applies the Pandas :meth:`~pandas.DataFrame.assign` method to the
        underlying pandas DataFrame and get the result back in the same
        structure.
        """
        return self.__class__(self.data.assign(*args, **kwargs))

    def query(self, query_str: str, *args: Any, **kwargs: Any) -> None | Self:
        """
        Applies the Pandas :meth:`~pandas.DataFrame.query` method to the
        underlying pandas DataFrame and get the result back in the same
        structure.
        """
        df = self.data.query(query_str, *args, **kwargs)
        if df.shape[0] == 0:
            return None
        return self.__class__(df)

    def to_csv(
        self, filename: str | Path, *args: Any, **kwargs: Any
    ) -> None:  # coverage: ignore
        """Exports to CSV format.

        Options can be passed to :meth:`pandas.DataFrame.to_csv`
        as args and kwargs arguments.

        """
        self.data.to_csv(filename, *args, **kwargs)

    def to_json(
        self, filename: str | Path, *args: Any, **kwargs: Any
    ) -> None:  # coverage: ignore
        """Exports to JSON format.

        Options can be passed to :meth:`pandas.DataFrame.to_json`
        as args and kwargs arguments.

        """
        self.data.to_json(filename, *args, **kwargs)


def _format(value: Any) -> str:
    if value is None or pd.isna(value):
        return ""
    if isinstance(value, Real) and not isinstance(value, Integral):
        return format(value, ".4g")
    return format(value)
