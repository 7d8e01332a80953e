"""Settings from a TOML file, overridden by the command line.

The file is named ``boxascii.toml`` and lives in the current directory or in
``~/.config``; the first one found is used and files are never merged:

    font = "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf"
    font_size = 16
    force_ascii = false
    log_level = "INFO"
"""

import os
from dataclasses import dataclass, fields, replace
from pathlib import Path

import toml

CONFIG_FNAME = "boxascii.toml"

# The search path for configuration files, as an ordered list of directories.
CONFIG_DIRS = [".", "~/.config"]


@dataclass(frozen=True)
class Settings:
    font: str | None = None
    font_size: int = 16
    force_ascii: bool = False
    log_level: str = "WARNING"

    def override(self, **values) -> "Settings":
        """Return a copy with every value that isn't None replaced."""
        return replace(self, **{k: v for k, v in values.items() if v is not None})


def find_config(config_dirs: list[str] = CONFIG_DIRS, config_fname: str = CONFIG_FNAME) -> Path | None:
    for dpath in config_dirs:
        path = Path(os.path.expanduser(dpath)) / config_fname
        if path.is_file():
            return path
    return None


def load_settings(path: str | Path | None = None, config_dirs: list[str] = CONFIG_DIRS) -> Settings:
    """Load settings from path, or from the first config file on the search path."""
    if path is None:
        path = find_config(config_dirs)
        if path is None:
            return Settings()
    path = Path(path)
    try:
        data = toml.loads(path.read_text(encoding="utf-8"))
    except toml.TomlDecodeError as e:
        raise ValueError(f"Invalid config file {path}: {e}") from e

    known = {f.name for f in fields(Settings)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown keys in {path}: {', '.join(unknown)}")
    if "font_size" in data and not isinstance(data["font_size"], int):
        raise ValueError(f"font_size in {path} must be an integer")
    if "force_ascii" in data and not isinstance(data["force_ascii"], bool):
        raise ValueError(f"force_ascii in {path} must be true or false")
    return Settings(**data)
