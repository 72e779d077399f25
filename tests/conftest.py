from collections.abc import Generator

import pytest

from typetag.config import get_settings
from typetag.registry import TypeRegistry, default_registry


@pytest.fixture(autouse=True)
def fresh_default_registry(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
	monkeypatch.delenv("TYPETAG_CUSTOM_TYPES", raising=False)
	get_settings.cache_clear()
	default_registry.cache_clear()
	yield
	get_settings.cache_clear()
	default_registry.cache_clear()


def _point(value: object) -> str | None:
	if isinstance(value, dict) and isinstance(value.get("x"), int | float) and isinstance(value.get("y"), int | float):
		return "Point"
	return None


@pytest.fixture
def registry() -> TypeRegistry:
	reg = TypeRegistry(enabled=True)
	reg.register("object", "Point", _point)
	return reg
