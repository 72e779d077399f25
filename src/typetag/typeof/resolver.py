import inspect
import numbers
from collections.abc import Iterable, Mapping, Sequence
from enum import Enum
from typing import Any

from typetag.registry import TypeRegistry, default_registry
from typetag.tag import MAX_SAFE_INTEGER, Tag
from typetag.type.generics import strlike
from typetag.type.unset import UnsetType

_bytes_like = strlike.__value__


def _primitive(value: Any) -> Tag:  # noqa: PLR0911
	if isinstance(value, UnsetType):
		return Tag.undefined
	if isinstance(value, bool):
		return Tag.boolean
	# enum members are the closest thing to unique named symbols; checked before str for StrEnum
	if isinstance(value, Enum):
		return Tag.symbol
	if isinstance(value, str):
		return Tag.string
	if isinstance(value, int):
		return Tag.bigint if abs(value) > MAX_SAFE_INTEGER else Tag.number
	if isinstance(value, numbers.Number):
		return Tag.number
	if callable(value):
		return Tag.function
	return Tag.object


def _refine_object(value: Any) -> Tag:
	if value is None:
		return Tag.null
	if isinstance(value, Sequence) and not isinstance(value, _bytes_like):
		return Tag.array
	if inspect.isawaitable(value):
		return Tag.promise
	# mappings are records, not iterables
	if isinstance(value, Mapping):
		return Tag.object
	if isinstance(value, Iterable):
		return Tag.iterable
	return Tag.object


def _refine_function(value: Any) -> Tag:
	return Tag.async_function if inspect.iscoroutinefunction(value) else Tag.function


def _refine_custom(value: Any, tag: Tag, registry: TypeRegistry) -> Tag | str:
	for custom_tag, check in registry.predicates(tag):
		if isinstance(result := check(value), str) and result == custom_tag:
			return custom_tag
	return tag


def resolve(value: Any, *, registry: TypeRegistry | None = None) -> Tag | str:
	"""

	Resolve the type tag of `value`.

	Built-in classification narrows from the primitive tag to object and function subtypes.
	If the registry has custom types enabled, the predicates registered on the built-in tag
	are tried in registration order and the first one returning its own tag wins.

	Args:
		value: any value.
		registry: custom type registry, the process-wide default when omitted.

	"""

	tag = _primitive(value)
	if tag is Tag.object:
		tag = _refine_object(value)
	elif tag is Tag.function:
		tag = _refine_function(value)

	registry = default_registry() if registry is None else registry
	if registry.enabled:
		return _refine_custom(value, tag, registry)

	return tag


type_of = resolve
