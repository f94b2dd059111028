from .directories import AppDirectories
from .settings import AppSettings, app_settings_constructor

__all__ = ["AppDirectories", "AppSettings", "app_settings_constructor"]
