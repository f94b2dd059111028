from pathlib import Path

from .static import PACKAGE_DIR


class AppDirectories:
    def __init__(self, data_dir: Path) -> None:
        self.DATA_DIR = data_dir
        self.SCHEMA_DIR = PACKAGE_DIR.joinpath("db", "resources", "schema")
        self.MESSAGES_DIR = PACKAGE_DIR.joinpath("lang", "messages")

        self.ensure_directories()

    def schema_file(self, dialect: str) -> Path:
        """Canonical schema script for the given SQLAlchemy dialect name"""
        return self.SCHEMA_DIR.joinpath(f"{dialect}.sql")

    def ensure_directories(self):
        required_dirs = [
            self.DATA_DIR,
        ]
        for dir in required_dirs:
            dir.mkdir(parents=True, exist_ok=True)
