from pathlib import Path

import pytest

from poemconf.basic_config import BasicConfig, Database
from poemconf.environment import ALL, Environment
from poemconf.errors import BadFilePathError, BadTypeError


def _section(address="localhost", port="8100", workers=4):
    section = {
        "address": address,
        "port": port,
        "database": {
            "adapter": "postgresql",
            "db_name": "blog_development",
            "pool": 5,
        },
    }
    if workers is not None:
        section["workers"] = workers
    return section


@pytest.mark.parametrize("env", ALL)
def test_default_values(env):
    config = BasicConfig.default(env)
    assert config.environment is env
    assert config.address == "localhost"
    assert config.port == "8000"
    assert config.database is None
    assert config.workers > 0 and config.workers % 2 == 0
    assert config.root_path is None
    assert config.config_file_path is None


def test_default_from_sets_paths(tmp_path):
    path = tmp_path / "config" / "Poem.toml"
    config = BasicConfig.default_from(Environment.STAGING, path)
    assert config.environment is Environment.STAGING
    assert config.config_file_path == path
    assert config.root_path == path.parent


def test_default_from_rejects_path_without_parent():
    with pytest.raises(BadFilePathError) as info:
        BasicConfig.default_from(Environment.DEVELOPMENT, Path("/").absolute().anchor)
    assert info.value.reason == "Configuration files must be rooted in a directory."


def test_set_root(tmp_path):
    config = BasicConfig.default(Environment.PRODUCTION)
    config.set_root(str(tmp_path))
    assert config.root_path == tmp_path


def test_from_table_reads_section():
    table = {"development": _section()}
    config = BasicConfig.from_table(Environment.DEVELOPMENT, table)
    assert config.environment is Environment.DEVELOPMENT
    assert config.address == "localhost"
    assert config.port == "8100"
    assert config.workers == 4
    assert config.database == Database("postgresql", "blog_development", 5)


def test_from_table_without_workers():
    table = {"staging": _section(address="0.0.0.0", port="9000", workers=None)}
    config = BasicConfig.from_table(Environment.STAGING, table)
    assert config.workers is None
    assert config.address == "0.0.0.0"
    assert config.port == "9000"


def test_from_table_missing_section():
    with pytest.raises(BadTypeError) as info:
        BasicConfig.from_table(Environment.PRODUCTION, {"development": _section()})
    assert info.value.name == "production"


def test_from_table_port_must_be_string():
    table = {"development": _section(port=8100)}
    with pytest.raises(BadTypeError) as info:
        BasicConfig.from_table(Environment.DEVELOPMENT, table)
    assert info.value.name == "port"
    assert info.value.actual == "integer"


def test_from_table_requires_database():
    section = _section()
    del section["database"]
    with pytest.raises(BadTypeError) as info:
        BasicConfig.from_table(Environment.DEVELOPMENT, {"development": section})
    assert info.value.name == "database"


def test_database_pool_must_be_integer():
    with pytest.raises(BadTypeError) as info:
        Database.from_table({"adapter": "postgresql", "db_name": "x", "pool": True})
    assert info.value.name == "pool"


def test_database_from_table():
    db = Database.from_table({"adapter": "sqlite", "db_name": "app", "pool": 2})
    assert (db.adapter, db.db_name, db.pool) == ("sqlite", "app", 2)


def test_equality_ignores_environment():
    assert BasicConfig.default(Environment.DEVELOPMENT) == BasicConfig.default(
        Environment.PRODUCTION
    )


def test_equality_compares_port():
    first = BasicConfig.default(Environment.DEVELOPMENT)
    second = BasicConfig.default(Environment.DEVELOPMENT)
    second.port = "9000"
    assert not first == second
    assert (first == 3) is False