"""Settings for a single environment."""

from __future__ import annotations

import datetime
import os
from collections.abc import Mapping
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Any

from poemconf.environment import Environment
from poemconf.errors import BadFilePathError, BadTypeError

DEFAULT_ADDRESS = "localhost"
DEFAULT_PORT = "8000"


def _default_workers() -> int:
    return (os.cpu_count() or 1) * 2


def _toml_type_name(value: Any) -> str:
    """Name a parsed TOML value's type the way TOML itself does."""
    if value is None:
        return "nothing"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "float"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (datetime.datetime, datetime.date, datetime.time)):
        return "datetime"
    if isinstance(value, list):
        return "array"
    if isinstance(value, Mapping):
        return "table"
    return type(value).__name__


def _require_table(name: str, value: Any) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise BadTypeError(name, "a table", _toml_type_name(value))
    return value


def _require_str(table: Mapping[str, Any], key: str) -> str:
    value = table.get(key)
    if not isinstance(value, str):
        raise BadTypeError(key, "a string", _toml_type_name(value))
    return value


def _require_int(table: Mapping[str, Any], key: str) -> int:
    value = table.get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise BadTypeError(key, "an integer", _toml_type_name(value))
    return value


@dataclass
class Database:
    """Connection settings for the application's database."""

    adapter: str
    db_name: str
    pool: int

    @classmethod
    def from_table(cls, table: Any) -> Database:
        """Build the settings from a ``database`` table."""
        table = _require_table("database", table)
        return cls(
            adapter=_require_str(table, "adapter"),
            db_name=_require_str(table, "db_name"),
            pool=_require_int(table, "pool"),
        )


@dataclass(eq=False)
class BasicConfig:
    """The settings of one environment."""

    environment: Environment
    address: str = DEFAULT_ADDRESS
    port: str = DEFAULT_PORT
    database: Database | None = None
    workers: int | None = None
    config_file_path: Path | None = None
    root_path: Path | None = None

    @classmethod
    def default(cls, env: Environment) -> BasicConfig:
        """Default settings for ``env``."""
        return cls(environment=env, workers=_default_workers())

    @classmethod
    def from_table(cls, env: Environment, table: Mapping[str, Any]) -> BasicConfig:
        """Read the settings of ``env`` from a whole parsed configuration.

        The section named after the environment must hold ``address``,
        ``port`` and a ``database`` table; ``workers`` is optional.
        """
        section = _require_table(str(env), table.get(str(env)))
        workers = section.get("workers")
        if isinstance(workers, bool) or not isinstance(workers, int):
            workers = None
        return cls(
            environment=env,
            address=_require_str(section, "address"),
            port=_require_str(section, "port"),
            database=Database.from_table(section.get("database")),
            workers=workers,
        )

    @classmethod
    def default_from(cls, env: Environment, path: str | PathLike[str]) -> BasicConfig:
        """Default settings for ``env`` loaded from the file at ``path``."""
        config_file_path = Path(path)
        parent = config_file_path.parent
        if parent == config_file_path:
            raise BadFilePathError(
                config_file_path,
                "Configuration files must be rooted in a directory.",
            )
        config = cls.default(env)
        config.set_root(parent)
        config.config_file_path = config_file_path
        return config

    def set_root(self, path: str | PathLike[str]) -> None:
        """Set the directory the configuration is rooted in."""
        self.root_path = Path(path)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BasicConfig):
            return NotImplemented
        return (
            self.address == other.address
            and self.port == other.port
            and self.workers == other.workers
        )