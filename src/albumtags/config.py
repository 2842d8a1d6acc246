"""Load albumtags configuration from a TOML file."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "albumtags.toml"
CONFIG_ENV = "ALBUMTAGS_CONFIG"


@dataclass
class Config:
    """albumtags configuration."""

    library: str | None = None
    tag: str = "genres"
    key_padding: int | None = None
    single_delimiter: str = " = "
    multi_delimiter: str = " : "
    value_delimiter: str = ", "
    verbose: bool = False


def default_config_path() -> Path:
    env = os.environ.get(CONFIG_ENV)
    return Path(env) if env else DEFAULT_CONFIG_PATH


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from a TOML file.

    Returns a :class:`Config` with defaults for any missing keys.
    If the file does not exist, returns a default :class:`Config`.
    """
    path = Path(path) if path is not None else default_config_path()
    if not path.is_file():
        return Config()

    with open(path, "rb") as f:
        data = tomllib.load(f)

    output = data.get("output", {})

    return Config(
        library=data.get("library", Config.library),
        tag=data.get("tag", Config.tag),
        verbose=data.get("verbose", Config.verbose),
        key_padding=output.get("key-padding", Config.key_padding),
        single_delimiter=output.get("single-delimiter", Config.single_delimiter),
        multi_delimiter=output.get("multi-delimiter", Config.multi_delimiter),
        value_delimiter=output.get("value-delimiter", Config.value_delimiter),
    )
