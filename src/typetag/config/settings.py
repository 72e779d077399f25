from functools import lru_cache

from .field import SettingsField
from .struct import AppSettings


class TypeTagSettings(AppSettings):
	TYPETAG_CUSTOM_TYPES: bool = SettingsField(default=False)


@lru_cache
def get_settings() -> TypeTagSettings:
	return TypeTagSettings()
