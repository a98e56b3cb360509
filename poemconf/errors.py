"""Errors raised while locating, reading and parsing configuration."""

from __future__ import annotations

from os import PathLike
from pathlib import Path


def _quoted(value: object) -> str:
    text = str(value).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{text}"'


def _as_path(value: str | PathLike[str] | None) -> Path | None:
    return None if value is None else Path(value)


class ConfigError(Exception):
    """Base class of every configuration error."""

    _description = "configuration error"

    def description(self) -> str:
        """A short, fixed description of the kind of error."""
        return self._description


class ConfigNotFoundError(ConfigError):
    """The configuration file was not found."""

    _description = "config file was not found"

    def __init__(self) -> None:
        super().__init__("config file was not found")


class ConfigIOError(ConfigError):
    """An I/O error occurred while reading the configuration file."""

    _description = "there was an I/O error while reading the config file"

    def __init__(self) -> None:
        super().__init__("I/O error while reading the config file")


class BadFilePathError(ConfigError):
    """The path at which the configuration file was found is invalid."""

    _description = "the config file path is invalid"

    def __init__(self, path: str | PathLike[str], reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{_quoted(self.path)} is not a valid config path")


class BadEnvError(ConfigError):
    """The environment named in ``POEM_ENV`` is invalid."""

    _description = "the environment specified in `ROCKET_ENV` is invalid"

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"{_quoted(value)} is not a valid `ROCKET_ENV` value")


class BadEntryError(ConfigError):
    """An environment given as a ``[environment]`` table is invalid."""

    _description = "an environment specified as `[environment]` is invalid"

    def __init__(self, entry: str, path: str | PathLike[str]) -> None:
        self.entry = entry
        self.path = Path(path)
        super().__init__(f"{_quoted(entry)} is not a valid `[environment]` entry")


class BadTypeError(ConfigError):
    """A configuration key holds a value of the wrong type."""

    _description = "a key was specified with a value of the wrong type"

    def __init__(
        self,
        name: str,
        expected: str,
        actual: str,
        path: str | PathLike[str] | None = None,
    ) -> None:
        self.name = name
        self.expected = expected
        self.actual = actual
        self.path = _as_path(path)
        super().__init__(
            f"type mismatch for '{name}'. expected {expected}, found {actual}"
        )


class ConfigParseError(ConfigError):
    """The configuration file is not valid TOML."""

    _description = "the config file contains invalid TOML"

    def __init__(
        self,
        source: str,
        path: str | PathLike[str],
        message: str,
        line_col: tuple[int, int] | None = None,
    ) -> None:
        self.source = source
        self.path = Path(path)
        self.message = message
        self.line_col = line_col
        super().__init__("the config file contains invalid TOML")