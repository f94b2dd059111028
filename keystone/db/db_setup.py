from collections.abc import Callable, Generator
from contextlib import contextmanager
from functools import lru_cache

import sqlalchemy as sa
from sqlalchemy.engine import Connection, Engine

from keystone.core.config import get_app_settings


def sql_global_init(db_url: str) -> Engine:
    connect_args = {}
    if "sqlite" in db_url:
        connect_args["check_same_thread"] = False

    return sa.create_engine(db_url, echo=False, connect_args=connect_args, pool_pre_ping=True)


@lru_cache
def get_engine() -> Engine:
    """Engine for the configured `DB_URL`, created once per process"""
    settings = get_app_settings()
    if not settings.DB_URL:
        raise ValueError("No database url found")
    return sql_global_init(settings.DB_URL)


@contextmanager
def connection_context(
    engine: Engine | None = None,
    release: Callable[[Connection], None] | None = None,
) -> Generator[Connection, None, None]:
    """
    connection_context() provides a connection inside a transaction. The transaction
    is committed when the context exits and rolled back if the block raises.

    `release`, when given, is called with the connection after the transaction has
    ended, whether it was committed or rolled back.
    """
    with (engine or get_engine()).connect() as conn:
        try:
            with conn.begin():
                yield conn
        finally:
            if release is not None:
                release(conn)
