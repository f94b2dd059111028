"""
Test support helpers: bring a relational database into a known state before a test
runs by recreating its schema once per process, truncating tables that were
written to, and loading fixture rows.
"""

from .catalog import Catalog, MySQLCatalog, PostgresCatalog, SQLiteCatalog, get_catalog
from .fixtures import BaseFixture, Fixture, FixtureRegistry, StaticFixture, resolve_fixture
from .provisioner import DatabaseProvisioner
from .sql import build_insert, split_sql_statements
from .state import SchemaState

__all__ = [
    "BaseFixture",
    "Catalog",
    "DatabaseProvisioner",
    "Fixture",
    "FixtureRegistry",
    "MySQLCatalog",
    "PostgresCatalog",
    "SQLiteCatalog",
    "SchemaState",
    "StaticFixture",
    "build_insert",
    "get_catalog",
    "resolve_fixture",
    "split_sql_statements",
]
