"""Reading and writing the per-user JSON configuration file."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

CONFIG_FILE_NAME = ".gatorconfig.json"

_JSON_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


@dataclass
class Config:
    """Database location and the name of the logged-in user."""

    db_url: str = ""
    current_user_name: str = ""
    path: Path | None = field(default=None, repr=False, compare=False)

    def set_user(self, user_name: str) -> None:
        """Make ``user_name`` the current user and save the file."""
        self.current_user_name = user_name
        write_config(self, self.path)


def config_file_path() -> Path:
    """Return the location of the configuration file in the home directory."""
    return Path.home() / CONFIG_FILE_NAME


def _resolve(path: str | Path | None) -> Path:
    return Path(path) if path is not None else config_file_path()


def read_config(path: str | Path | None = None) -> Config:
    """Load the configuration; unknown keys are ignored, missing ones stay empty."""
    target = _resolve(path)
    with target.open(encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, dict):
        raise ValueError(f"{target}: configuration must be a JSON object")

    def text(key: str) -> str:
        value = data.get(key)
        if value is None:
            return ""
        if not isinstance(value, str):
            raise ValueError(f"{target}: {key!r} must be a string")
        return value

    return Config(
        db_url=text("db_url"),
        current_user_name=text("current_user_name"),
        path=target,
    )


def write_config(cfg: Config, path: str | Path | None = None) -> None:
    """Write the configuration as one line of compact JSON."""
    target = _resolve(path)
    encoded = json.dumps(
        {"db_url": cfg.db_url, "current_user_name": cfg.current_user_name},
        separators=(",", ":"),
        ensure_ascii=False,
    )
    for char, escape in _JSON_ESCAPES.items():
        encoded = encoded.replace(char, escape)
    target.write_text(encoded + "\n", encoding="utf-8")