from collections.abc import Generator
from pathlib import Path

from pytest import MonkeyPatch, fixture

mp = MonkeyPatch()
mp.setenv("PRODUCTION", "False")
mp.setenv("TESTING", "True")
mp.setenv("DB_ENGINE", "sqlite")
mp.setenv("DEFAULT_LOCALE", "en-US")

from sqlalchemy import Engine  # noqa: E402

from keystone.db.db_setup import sql_global_init  # noqa: E402
from keystone.services.user import UserValidator  # noqa: E402
from keystone.testing import DatabaseProvisioner, SchemaState  # noqa: E402


@fixture(scope="session")
def db_path(tmp_path_factory) -> Path:
    return tmp_path_factory.mktemp("db") / "keystone-test.db"


@fixture(scope="session")
def engine(db_path: Path) -> Generator[Engine, None, None]:
    engine = sql_global_init(f"sqlite:///{db_path}")
    yield engine
    engine.dispose()


@fixture(scope="session")
def schema_state() -> SchemaState:
    return SchemaState()


@fixture
def provisioner(engine: Engine, schema_state: SchemaState) -> DatabaseProvisioner:
    return DatabaseProvisioner(engine=engine, state=schema_state)


@fixture
def fresh_provisioner(tmp_path: Path) -> Generator[DatabaseProvisioner, None, None]:
    """Provisioner bound to its own empty database and schema state"""
    engine = sql_global_init(f"sqlite:///{tmp_path / 'fresh.db'}")
    yield DatabaseProvisioner(engine=engine, state=SchemaState())
    engine.dispose()


@fixture
def user_validator() -> UserValidator:
    return UserValidator()
