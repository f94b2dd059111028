"""
Message resolution for user facing strings.

Messages are looked up by their English source text (ex. "Input required") in a
per-locale JSON file. Unknown keys and unknown locales resolve to the source text
itself, so a missing translation never hides a message.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Protocol

from keystone.core.config import get_app_dirs, get_app_settings
from keystone.core.root_logger import get_logger

logger = get_logger("lang")


class Translator(Protocol):
    def t(self, key: str, **kwargs) -> str: ...


class JsonTranslator:
    """
    Resolves messages from `<messages_dir>/<locale>.json`.

    Args:
        locale (str): Locale code such as "en-US" or "de-DE".
        messages_dir (Path): Directory holding one JSON object per locale.
    """

    def __init__(self, locale: str, messages_dir: Path) -> None:
        self.locale = locale
        self.messages_dir = messages_dir
        self._messages = self._load(messages_dir / f"{locale}.json")

    def _load(self, path: Path) -> dict[str, str]:
        if not path.is_file():
            logger.warning(f"No message file for locale '{self.locale}', falling back to source strings")
            return {}

        with open(path, encoding="utf-8") as f:
            return json.load(f)

    def t(self, key: str, **kwargs) -> str:
        message = self._messages.get(key) or key
        if kwargs:
            return message.format(**kwargs)
        return message

    def __call__(self, key: str, **kwargs) -> str:
        return self.t(key, **kwargs)


@lru_cache
def local_provider(locale: str | None = None) -> JsonTranslator:
    """Returns a cached translator for `locale`, defaulting to the `DEFAULT_LOCALE` setting"""
    locale = locale or get_app_settings().DEFAULT_LOCALE
    return JsonTranslator(locale, get_app_dirs().MESSAGES_DIR)
