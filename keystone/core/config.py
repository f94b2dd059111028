import os
from functools import lru_cache
from pathlib import Path

import dotenv

from keystone.core.settings import AppDirectories, AppSettings, app_settings_constructor

CWD = Path(__file__).parent
BASE_DIR = CWD.parent.parent
ENV = BASE_DIR.joinpath(".env")

dotenv.load_dotenv(ENV)
PRODUCTION = os.getenv("PRODUCTION", "False") == "True"
TESTING = os.getenv("TESTING", "False") == "True"
DATA_DIR = os.getenv("DATA_DIR")


def determine_data_dir() -> Path:
    global PRODUCTION, TESTING, BASE_DIR, DATA_DIR

    if TESTING:
        return BASE_DIR.joinpath(DATA_DIR if DATA_DIR else "tests", ".temp")

    if PRODUCTION:
        return Path(DATA_DIR if DATA_DIR else BASE_DIR.joinpath("app", "data"))

    return BASE_DIR.joinpath("dev", "data")


@lru_cache
def get_app_dirs() -> AppDirectories:
    return AppDirectories(determine_data_dir())


@lru_cache
def get_app_settings() -> AppSettings:
    return app_settings_constructor(
        env_file=ENV,
        production=PRODUCTION,
        data_dir=determine_data_dir(),
    )


def get_schema_file(dialect: str) -> Path:
    """Returns the schema script for `dialect`, honouring the `SCHEMA_FILE` override"""
    settings = get_app_settings()
    if settings.SCHEMA_FILE:
        return settings.SCHEMA_FILE
    return get_app_dirs().schema_file(dialect)
