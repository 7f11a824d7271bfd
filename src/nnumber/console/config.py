import argparse
import logging
from typing import List

from rich.box import SIMPLE_HEAVY
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import dispatch_open

logger = logging.getLogger(__name__)


def settings_table() -> Table:
    """Resolved value and origin of each setting."""
    from .. import NAME_RESOLUTION, config_source

    table = Table(show_lines=False, box=SIMPLE_HEAVY)
    for column in ["setting", "value", "source"]:
        table.add_column(column)

    for setting, resolution in NAME_RESOLUTION.items():
        value, source = config_source(**resolution)
        table.add_row(setting, escape(value or ""), escape(source or ""))

    return table


def main(args_list: List[str]) -> None:
    from .. import config_dir, config_file

    parser = argparse.ArgumentParser(
        prog="nnumber config",
        description="nnumber settings and configuration file",
    )

    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--list",
        "-l",
        dest="list",
        action="store_true",
        help="print the configuration file and the value of each setting",
    )
    group.add_argument(
        "--edit",
        "-e",
        dest="edit",
        action="store_true",
        help="open the configuration file for edition",
    )
    group.add_argument(
        "--open",
        "-o",
        dest="open",
        action="store_true",
        help="open the configuration directory in your native file browser",
    )

    args = parser.parse_args(args_list)

    if args.list:
        print(config_file)
        Console().print(settings_table())

    if args.edit:
        logger.info(f"Open configuration file {config_file}")
        dispatch_open(config_file)

    if args.open:
        logger.info(f"Open configuration directory {config_dir}")
        dispatch_open(config_dir)
