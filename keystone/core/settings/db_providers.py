from abc import ABC, abstractmethod
from pathlib import Path
from typing import ClassVar

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL, make_url


class AbstractDBProvider(ABC):
    @property
    @abstractmethod
    def db_url(self) -> str: ...

    @property
    @abstractmethod
    def db_url_public(self) -> str: ...


class SQLiteProvider(AbstractDBProvider, BaseModel):
    data_dir: Path
    name: str = "keystone.db"
    prefix: str = ""

    @property
    def db_path(self):
        return self.data_dir / f"{self.prefix}{self.name}"

    @property
    def db_url(self) -> str:
        return f"sqlite:///{str(self.db_path.absolute())}"

    @property
    def db_url_public(self) -> str:
        return self.db_url


class _ServerProvider(AbstractDBProvider):
    """Shared URL handling for client/server databases"""

    drivername: ClassVar[str]
    allowed_schemas: ClassVar[tuple[str, ...]]

    def _override(self) -> str | None:
        raise NotImplementedError

    def _url(self) -> URL:
        raise NotImplementedError

    def _parsed_url(self) -> URL:
        override = self._override()
        if override:
            url = make_url(override)
            if url.get_backend_name() not in self.allowed_schemas:
                raise ValueError(f"URL override schema must be one of {self.allowed_schemas}")
            return url.set(drivername=self.drivername)
        return self._url()

    @property
    def db_url(self) -> str:
        return self._parsed_url().render_as_string(hide_password=False)

    @property
    def db_url_public(self) -> str:
        url = self._parsed_url()
        if url.username:
            url = url.set(username="*********")
        return url.render_as_string(hide_password=True)


class MySQLProvider(_ServerProvider, BaseSettings):
    drivername: ClassVar[str] = "mysql+pymysql"
    allowed_schemas: ClassVar[tuple[str, ...]] = ("mysql", "mariadb")

    MYSQL_USER: str = ""
    MYSQL_PASSWORD: str = ""
    MYSQL_SERVER: str = "localhost"
    MYSQL_PORT: int = 3306
    MYSQL_DB: str = ""
    MYSQL_URL_OVERRIDE: str | None = None

    model_config = SettingsConfigDict(arbitrary_types_allowed=True, extra="allow")

    def _override(self) -> str | None:
        return self.MYSQL_URL_OVERRIDE

    def _url(self) -> URL:
        return URL.create(
            self.drivername,
            username=self.MYSQL_USER or None,
            password=self.MYSQL_PASSWORD or None,
            host=self.MYSQL_SERVER,
            port=self.MYSQL_PORT,
            database=self.MYSQL_DB or None,
            query={"charset": "utf8mb4"},
        )


class PostgresProvider(_ServerProvider, BaseSettings):
    drivername: ClassVar[str] = "postgresql+psycopg2"
    allowed_schemas: ClassVar[tuple[str, ...]] = ("postgres", "postgresql")

    POSTGRES_USER: str = ""
    POSTGRES_PASSWORD: str = ""
    POSTGRES_SERVER: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_DB: str = ""
    POSTGRES_URL_OVERRIDE: str | None = None

    model_config = SettingsConfigDict(arbitrary_types_allowed=True, extra="allow")

    def _override(self) -> str | None:
        return self.POSTGRES_URL_OVERRIDE

    def _url(self) -> URL:
        return URL.create(
            self.drivername,
            username=self.POSTGRES_USER or None,
            password=self.POSTGRES_PASSWORD or None,
            host=self.POSTGRES_SERVER,
            port=self.POSTGRES_PORT,
            database=self.POSTGRES_DB or None,
        )


def db_provider_factory(provider_name: str, data_dir: Path, env_file: Path, env_encoding="utf-8") -> AbstractDBProvider:
    if provider_name == "postgres":
        return PostgresProvider(_env_file=env_file, _env_file_encoding=env_encoding)
    if provider_name == "mysql":
        return MySQLProvider(_env_file=env_file, _env_file_encoding=env_encoding)
    return SQLiteProvider(data_dir=data_dir)
