# ruff: noqa: E402
import configparser
import logging
import os
from importlib.metadata import version
from pathlib import Path
from typing import TypedDict

import dotenv
from appdirs import user_config_dir

__version__ = version("nnumber")
__all__ = [
    "config_dir",
    "config_file",
    "icao_to_n",
    "n_to_icao",
    "output_format",
    "tqdm_style",
]

# Set up the library root logger
_log = logging.getLogger(__name__)

dotenv.load_dotenv()

# -- Configuration management --

if (xdg_config := os.environ.get("XDG_CONFIG_HOME")) is not None:
    config_dir = Path(xdg_config) / "nnumber"
else:
    config_dir = Path(user_config_dir("nnumber"))
config_file = config_dir / "nnumber.conf"

if not config_dir.exists():  # coverage: ignore
    config_template = (Path(__file__).parent / "nnumber.conf").read_text()
    config_dir.mkdir(parents=True)
    config_file.write_text(config_template)

config = configparser.ConfigParser()
config.read(config_file.as_posix())


class Resolution(TypedDict, total=False):
    category: str
    name: str
    environment_variable: str
    default: str


NAME_RESOLUTION: dict[str, Resolution] = {
    # Should we get a tqdm progress bar
    "tqdm_style": dict(
        environment_variable="NNUMBER_TQDM_STYLE",
        category="global",
        name="tqdm_style",
        default="auto",
    ),
    # Default output of the command line interface
    "output_format": dict(
        environment_variable="NNUMBER_OUTPUT_FORMAT",
        category="console",
        name="format",
        default="table",
    ),
}


def config_source(
    category: None | str = None,
    name: None | str = None,
    environment_variable: None | str = None,
    default: None | str = None,
) -> tuple[None | str, None | str]:
    """Returns the value of a setting and where it comes from."""
    if category is not None and name is not None:
        if value := config.get(category, name, fallback=None):
            return value, f"{config_file} [{category}] {name}"

    if environment_variable is not None:
        if value := os.environ.get(environment_variable):
            return value, f"${environment_variable}"

    if default is not None:
        return default, "default"

    return None, None


def get_config(
    category: None | str = None,
    name: None | str = None,
    environment_variable: None | str = None,
    default: None | str = None,
) -> None | str:
    value, _ = config_source(category, name, environment_variable, default)
    return value


tqdm_style = get_config(**NAME_RESOLUTION["tqdm_style"])
_log.info(f"Selected tqdm style: {tqdm_style}")
output_format = get_config(**NAME_RESOLUTION["output_format"])
_log.info(f"Selected output format: {output_format}")

from .core import icao_to_n, n_to_icao
