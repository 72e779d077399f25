from .field import SettingsField
from .settings import TypeTagSettings, get_settings
from .struct import AppSettings

__all__ = ["AppSettings", "SettingsField", "TypeTagSettings", "get_settings"]
