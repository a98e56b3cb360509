"""Deployment environments and selection of the active one."""

from __future__ import annotations

import os
from enum import Enum

from poemconf.errors import BadEnvError

CONFIG_ENV = "POEM_ENV"

_ALIASES = {
    "d": "development",
    "dev": "development",
    "devel": "development",
    "development": "development",
    "s": "staging",
    "stage": "staging",
    "staging": "staging",
    "p": "production",
    "prod": "production",
    "production": "production",
}


class Environment(Enum):
    """The environment an application is configured for."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"

    @classmethod
    def parse(cls, text: str) -> Environment:
        """Parse a full or abbreviated environment name.

        Raises ValueError when the text names no environment.
        """
        try:
            return cls(_ALIASES[text])
        except KeyError:
            raise ValueError(f"unknown environment: {text!r}") from None

    @classmethod
    def active(cls) -> Environment:
        """Return the environment selected by ``POEM_ENV``.

        Without the variable, development is chosen, or production when
        Python runs with optimisations enabled.
        """
        value = os.environ.get(CONFIG_ENV)
        if value is None:
            return cls.DEVELOPMENT if __debug__ else cls.PRODUCTION
        try:
            return cls.parse(value)
        except ValueError:
            raise BadEnvError(value) from None

    def is_dev(self) -> bool:
        return self is Environment.DEVELOPMENT

    def is_stage(self) -> bool:
        return self is Environment.STAGING

    def is_prod(self) -> bool:
        return self is Environment.PRODUCTION

    def __str__(self) -> str:
        return self.value


ALL = (Environment.DEVELOPMENT, Environment.STAGING, Environment.PRODUCTION)
"""Every environment, in order."""

VALID = "development, staging, production"
"""Human-readable list of the valid environment names."""