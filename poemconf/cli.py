"""Command that reads the configuration and prints it."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from poemconf.environment import ALL
from poemconf.errors import ConfigError
from poemconf.poem_config import CONFIG_FILENAME, PoemConfig


def _render(conf: PoemConfig) -> str:
    lines = [f"active environment: {conf.active_env}"]
    for env in ALL:
        config = conf.configs.get(env)
        if config is None:
            continue
        lines.append("")
        lines.append(f"[{env}]")
        lines.append(f"address = {config.address}")
        lines.append(f"port = {config.port}")
        lines.append(f"workers = {config.workers}")
        if config.database is not None:
            db = config.database
            lines.append(
                f"database = adapter={db.adapter}, db_name={db.db_name}, pool={db.pool}"
            )
        if config.config_file_path is not None:
            lines.append(f"config file = {config.config_file_path}")
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Find, read and print the configuration; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="poemconf",
        description=f"Print the settings found in {CONFIG_FILENAME}.",
    )
    parser.add_argument(
        "--dir",
        default=None,
        help="directory to start searching from (default: current directory)",
    )
    args = parser.parse_args(argv)
    try:
        conf = PoemConfig.read_config(args.dir)
    except ConfigError as err:
        print(f"error: {err}", file=sys.stderr)
        return 1
    print(_render(conf))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())