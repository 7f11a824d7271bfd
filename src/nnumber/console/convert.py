from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich.console import Console

import pandas as pd
from nnumber import output_format as default_format
from nnumber.core import Registers, icao_to_n, n_to_icao
from nnumber.core.errors import NNumberError


def input_column(value: str) -> str:
    """Returns the column of a Registers table the value belongs to."""
    return "registration" if value[:1].upper() == "N" else "icao24"


def convert_values(values: list[str]) -> Registers:
    """Converts tail numbers (starting with N) and ICAO addresses.

    Entries are kept in the order of the input, invalid ones with an empty
    value on the side which could not be computed.
    """
    rows: list[dict[str, None | str]] = []
    for value in values:
        is_n_number = input_column(value) == "registration"
        try:
            if is_n_number:
                rows.append(dict(icao24=n_to_icao(value), registration=value))
            else:
                rows.append(dict(icao24=value, registration=icao_to_n(value)))
        except NNumberError as e:
            logging.warning(str(e))
            rows.append(
                dict(icao24=None, registration=value)
                if is_n_number
                else dict(icao24=value, registration=None)
            )

    return Registers(
        pd.DataFrame(rows, columns=["icao24", "registration"], dtype=object)
    )


@click.command()
@click.argument("values", nargs=-1)
@click.option(
    "-i",
    "--input",
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Table (csv, json, parquet) with an icao24 or registration column",
)
@click.option(
    "-f",
    "--format",
    "output_format",
    type=click.Choice(["table", "plain", "json"]),
    default=default_format,
    show_default=True,
    help="Output format",
)
@click.option(
    "-l",
    "--log",
    "log_file",
    default=None,
    help="logging information",
)
@click.option("-v", "--verbose", count=True, help="Verbosity level")
def main(
    values: tuple[str, ...],
    input_file: Path | None = None,
    output_format: str = "table",
    log_file: str | None = None,
    verbose: int = 0,
) -> None:
    """Convert N-Numbers to ICAO addresses and back.

    Values starting with N are considered as tail numbers, all other values
    as ICAO addresses. Values are read from the standard input when none is
    passed on the command line.

    """

    logger = logging.getLogger()
    if verbose == 1:
        logger.setLevel(logging.INFO)
    elif verbose > 1:
        logger.setLevel(logging.DEBUG)

    logger.handlers.clear()

    formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if input_file is not None:
        registers = Registers.from_file(input_file)
        inputs = [registers.source] * len(registers)
    else:
        if len(values) == 0:
            stdin = click.get_text_stream("stdin")
            values = tuple(line.strip() for line in stdin if line.strip())
        registers = convert_values(list(values))
        inputs = [input_column(value) for value in values]

    if output_format == "json":
        click.echo(registers.data.to_json(orient="records"))
    elif output_format == "plain":
        # input first, then output
        for source, (_, elt) in zip(inputs, registers.data.iterrows()):
            target = "registration" if source == "icao24" else "icao24"
            click.echo(
                "\t".join(
                    "-" if pd.isna(elt[column]) else str(elt[column])
                    for column in [source, target]
                )
            )
    else:
        registers.max_rows = len(registers)
        Console().print(registers)

    if len(registers.invalid) > 0:
        sys.exit(1)


if __name__ == "__main__":
    main()
