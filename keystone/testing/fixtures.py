"""
Fixture definitions consumed by `DatabaseProvisioner`.

A fixture is anything exposing a `table` name and an ordered sequence of
`records` (column name -> value mappings). Fixtures can be plain objects,
`BaseFixture` subclasses, or zero argument factories returning either.
"""

from collections.abc import Callable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, ClassVar, Protocol, runtime_checkable

Row = Mapping[str, Any]


@runtime_checkable
class Fixture(Protocol):
    table: str
    records: Sequence[Row]


FixtureFactory = Callable[[], Fixture]
FixtureSource = Fixture | FixtureFactory


class BaseFixture:
    """
    Base class for class based fixtures. Subclasses set `table` and `records`
    as class attributes.

    Example:
        class UserFixture(BaseFixture):
            table = "users"
            records = [{"id": 1, "username": "admin", "email": "admin@example.com"}]
    """

    table: ClassVar[str] = ""
    records: ClassVar[Sequence[Row]] = ()

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        if not isinstance(cls.table, str) or not cls.table:
            raise TypeError(f"{cls.__name__} must define a non-empty 'table'")

    def __iter__(self) -> Iterator[Row]:
        return iter(self.records)


@dataclass
class StaticFixture:
    """Inline fixture, handy for one-off rows in a single test."""

    table: str
    records: list[dict[str, Any]] = field(default_factory=list)


def resolve_fixture(source: FixtureSource) -> Fixture:
    """
    Returns the fixture object for `source`.

    Classes and other callables are invoked without arguments; objects that
    already expose `table` and `records` are returned unchanged.

    Raises:
        TypeError: If `source` does not produce an object with `table` and `records`.
    """
    if isinstance(source, type) or (callable(source) and not isinstance(source, Fixture)):
        fixture = source()
    else:
        fixture = source

    if not isinstance(fixture, Fixture):
        raise TypeError(f"{source!r} does not provide 'table' and 'records'")

    return fixture


class FixtureRegistry:
    """
    Named collection of fixture sources, so tests can request fixtures by name
    instead of importing each class.
    """

    def __init__(self) -> None:
        self._sources: dict[str, FixtureSource] = {}

    def register(self, name: str, source: FixtureSource | None = None):
        """
        Registers `source` under `name`. Without `source` it returns a decorator:

            @registry.register("users")
            class UserFixture(BaseFixture): ...

        Raises:
            ValueError: If `name` is already registered.
        """
        if source is None:

            def decorator(src: FixtureSource) -> FixtureSource:
                self._add(name, src)
                return src

            return decorator

        self._add(name, source)
        return source

    def _add(self, name: str, source: FixtureSource) -> None:
        if name in self._sources:
            raise ValueError(f"Fixture '{name}' is already registered")
        self._sources[name] = source

    def get(self, name: str) -> FixtureSource:
        try:
            return self._sources[name]
        except KeyError:
            raise KeyError(f"Unknown fixture: '{name}'") from None

    def resolve(self, *names: str) -> list[Fixture]:
        return [resolve_fixture(self.get(name)) for name in names]

    def names(self) -> list[str]:
        return list(self._sources)

    def __contains__(self, name: object) -> bool:
        return name in self._sources

    def __len__(self) -> int:
        return len(self._sources)
