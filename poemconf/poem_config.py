"""The configuration of every environment, read from ``config/Poem.toml``."""

from __future__ import annotations

import re
import tomllib
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

from poemconf.basic_config import BasicConfig, _toml_type_name
from poemconf.environment import ALL, Environment
from poemconf.errors import (
    BadTypeError,
    ConfigIOError,
    ConfigNotFoundError,
    ConfigParseError,
)

CONFIG_FILENAME = "config/Poem.toml"

_POSITION = re.compile(r"at line (\d+), column (\d+)")


def find_config_file(start: str | PathLike[str] | None = None) -> Path:
    """Find ``config/Poem.toml`` in ``start`` or one of its ancestors.

    ``start`` defaults to the current directory.
    """
    try:
        current = Path(start).absolute() if start is not None else Path.cwd()
    except OSError:
        raise ConfigNotFoundError() from None
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.exists():
            return candidate
    raise ConfigNotFoundError()


def _line_col(error: tomllib.TOMLDecodeError) -> tuple[int, int] | None:
    match = _POSITION.search(str(error))
    if match is None:
        return None
    return int(match.group(1)), int(match.group(2))


@dataclass
class PoemConfig:
    """Settings of all environments together with the active one."""

    active_env: Environment
    configs: dict[Environment, BasicConfig] = field(default_factory=dict)

    @classmethod
    def read_config(cls, start: str | PathLike[str] | None = None) -> PoemConfig:
        """Locate, read and parse the configuration file."""
        path = find_config_file(start)
        try:
            contents = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            raise ConfigIOError() from None
        return cls.parse(contents, path)

    @classmethod
    def parse(cls, src: str, filename: str | PathLike[str]) -> PoemConfig:
        """Parse TOML text read from ``filename``."""
        path = Path(filename)
        try:
            table = tomllib.loads(src)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigParseError(src, path, str(exc), _line_col(exc)) from None

        for entry, value in table.items():
            if not isinstance(value, dict):
                raise BadTypeError(entry, "a table", _toml_type_name(value), path)

        configs: dict[Environment, BasicConfig] = {}
        for env in ALL:
            located = BasicConfig.default_from(env, path)
            config = BasicConfig.from_table(env, table)
            config.config_file_path = located.config_file_path
            config.root_path = located.root_path
            configs[env] = config

        return cls(active_env=Environment.active(), configs=configs)

    @classmethod
    def active_default_from(
        cls, filename: str | PathLike[str] | None = None
    ) -> PoemConfig:
        """Default settings for every environment, optionally tied to a file."""
        if filename is None:
            configs = {env: BasicConfig.default(env) for env in ALL}
        else:
            configs = {env: BasicConfig.default_from(env, filename) for env in ALL}
        return cls(active_env=Environment.active(), configs=configs)

    @classmethod
    def active(cls) -> BasicConfig:
        """Default settings of the active environment."""
        return BasicConfig.default(Environment.active())

    def get(self, env: Environment) -> BasicConfig:
        """The settings of ``env``."""
        try:
            return self.configs[env]
        except KeyError:
            raise KeyError(f"{env} config is missing.") from None