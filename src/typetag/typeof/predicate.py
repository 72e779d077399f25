from typing import Any

from typetag.registry import TypeRegistry
from typetag.tag import Tag

from .resolver import resolve


def is_type(value: Any, *tags: str, registry: TypeRegistry | None = None) -> bool:
	"""check `value` against one or more tags; arrays always satisfy `iterable`"""
	tag = resolve(value, registry=registry)

	if tag == Tag.array and Tag.iterable in tags:
		return True

	return tag in tags
