# poemconf

Environment-aware settings for web applications, read from a TOML file.

A configuration file holds one table per environment (`development`,
`staging`, `production`). `poemconf` finds the file by searching upward from
a starting directory, parses it, and gives you a `BasicConfig` for each
environment, with the active environment chosen by the `POEM_ENV` variable.

## Installation

```
pip install .
```

Python 3.11 or later is required; TOML is parsed with the standard library
`tomllib`, so there are no other dependencies.

## Configuration file

The file lives at `config/Poem.toml`, in the starting directory or in one of
its parents. Every environment must have its own table, and each table must
hold `address` and `port` as strings and a `database` table with `adapter`
and `db_name` (strings) and `pool` (an integer). `workers` is optional:

```toml
[development]
address = "localhost"
port = "8100"
workers = 4

[development.database]
adapter = "postgresql"
db_name = "blog_development"
pool = 5

[staging]
address = "0.0.0.0"
port = "9000"

[staging.database]
adapter = "postgresql"
db_name = "blog_staging"
pool = 5

[production]
address = "0.0.0.0"
port = "9000"

[production.database]
adapter = "postgresql"
db_name = "blog_production"
pool = 5
```

Rules applied while parsing:

- Text that is not valid TOML raises `ConfigParseError`; its `message` holds
  the parser's message and `line_col` the line and column when known.
- Every top-level entry must be a table, otherwise `BadTypeError` is raised.
- A missing environment table, a missing or non-string `address` or `port`,
  or a missing or malformed `database` table raises `BadTypeError`.
- `workers` is taken when it is an integer and is `None` otherwise.
- Each resulting `BasicConfig` records the file in `config_file_path` and its
  directory in `root_path`.

## Default settings

`BasicConfig.default(env)` gives address `"localhost"`, port `"8000"`, no
database, and twice the number of CPUs as `workers`. Defaults are used by
`PoemConfig.active_default_from` and `PoemConfig.active`; they are not
filled in for settings missing from a file.

## Choosing the environment

`POEM_ENV` selects the active environment. Accepted values:

| Environment   | Values                                   |
|---------------|------------------------------------------|
| development   | `d`, `dev`, `devel`, `development`       |
| staging       | `s`, `stage`, `staging`                  |
| production    | `p`, `prod`, `production`                |

When the variable is unset, development is used, or production when Python
runs with optimisations enabled (`python -O`). Any other value raises
`BadEnvError`.

## Library use

```python
from poemconf.environment import Environment
from poemconf.errors import ConfigError
from poemconf.poem_config import PoemConfig

try:
    conf = PoemConfig.read_config()
except ConfigError as exc:
    print(f"cannot load configuration: {exc}")
else:
    dev = conf.get(Environment.DEVELOPMENT)
    print(conf.active_env, dev.address, dev.port, dev.workers)
```

Other entry points:

- `Environment.parse("prod")` turns a name or abbreviation into an
  `Environment` and raises `ValueError` for anything else;
  `Environment.active()` reads `POEM_ENV`. `is_dev()`, `is_stage()` and
  `is_prod()` test an environment, and `str()` gives its full name.
- `PoemConfig.read_config(start)` searches from `start` (default: the current
  directory); an unreadable file raises `ConfigIOError`.
- `PoemConfig.parse(src, filename)` parses TOML text you already hold.
- `PoemConfig.active_default_from(filename)` builds default settings for every
  environment without reading a file; with a filename, each records that path
  and its directory.
- `PoemConfig.active()` returns the default `BasicConfig` of the active
  environment.
- `PoemConfig.get(env)` returns one environment's settings, raising
  `KeyError` when it is absent; `configs` holds them all.
- `find_config_file(start)` returns the path of the nearest
  `config/Poem.toml`, raising `ConfigNotFoundError` when there is none.
- `BasicConfig.default_from(env, path)` raises `BadFilePathError` when the
  path has no parent directory.
- Two `BasicConfig` objects compare equal when their `address`, `port` and
  `workers` are equal.

Every error is a subclass of `ConfigError`, whose `description()` gives a
short fixed text for its kind. The module `poemconf.errors` defines
`ConfigNotFoundError`, `ConfigIOError`, `BadFilePathError`, `BadEnvError`,
`BadEntryError`, `BadTypeError` and `ConfigParseError`.

## Command line

```
poemconf
poemconf --dir path/to/project
```

Finds the configuration from the current directory (or `--dir`) upward,
loads it, and prints the active environment followed by each environment's
address, port, workers, database and file path. On a configuration error it
prints `error: ...` to standard error and exits with status 1.

## What it does not do

`poemconf` only reads and validates settings. It does not start a server,
open database connections, or write configuration files.