from collections.abc import Callable
from functools import lru_cache

from typetag.config import get_settings
from typetag.log import get_logger
from typetag.tag import Tag, is_builtin
from typetag.type.generics import predicate


class TypeRegistry:
	"""

	Custom type predicates keyed by built-in base tag, plus the feature flag that turns
	custom resolution on and off.

	Predicates under one base tag are kept in registration order; resolution tries them in
	that order and the first one returning its own tag wins.

	**Example:**

		>>> registry = TypeRegistry(enabled=True)
		>>> @registry.custom_type(Tag.object, "Point")
		... def point(value):
		...	 return "Point" if isinstance(value, dict) and {"x", "y"} <= value.keys() else None

	"""

	__slots__ = ("_enabled", "_types", "__log")

	def __init__(self, enabled: bool = False) -> None:
		self._enabled = enabled
		self._types: dict[Tag, dict[str, predicate]] = {}
		self.__log = get_logger("typetag.registry")

	@property
	def enabled(self) -> bool:
		return self._enabled

	def enable(self) -> None:
		self._enabled = True
		self.__log.debug("custom types enabled")

	def disable(self) -> None:
		self._enabled = False
		self.__log.debug("custom types disabled")

	def register(self, base: str, tag: str, check: predicate) -> None:
		"""

		Register `check` as the predicate for custom `tag`, refining built-in `base`.

		Re-registering an existing tag under the same base replaces its predicate in place.

		**Raises:**

		- `TypeError`: if `base` is not a built-in tag or `check` is not callable.
		- `ValueError`: if `tag` is empty or shadows a built-in tag.

		"""

		base_tag = Tag.get(base)
		if base_tag is None:
			raise TypeError(f"base must be a built-in tag, got {base!r}")
		if not isinstance(tag, str) or not tag:
			raise ValueError(f"custom tag must be a non-empty str, got {tag!r}")
		if is_builtin(tag):
			raise ValueError(f"custom tag {tag!r} shadows a built-in tag")
		if not callable(check):
			raise TypeError(f"want a callable predicate, got {type(check)}")

		self._types.setdefault(base_tag, {})[tag] = check
		self.__log.debug(f"registered custom type {tag} on {base_tag}")

	def custom_type(self, base: str, tag: str) -> Callable[[predicate], predicate]:
		def decorator(check: predicate) -> predicate:
			self.register(base, tag, check)
			return check

		return decorator

	def unregister(self, base: str, tag: str) -> bool:
		base_tag = Tag.get(base)
		if base_tag is None or tag not in self._types.get(base_tag, {}):
			return False

		del self._types[base_tag][tag]
		if not self._types[base_tag]:
			del self._types[base_tag]
		self.__log.debug(f"unregistered custom type {tag} from {base_tag}")
		return True

	def predicates(self, base: str) -> tuple[tuple[str, predicate], ...]:
		base_tag = Tag.get(base)
		if base_tag is None:
			return ()
		return tuple(self._types.get(base_tag, {}).items())

	def tags(self) -> list[str]:
		return [tag for checks in self._types.values() for tag in checks]

	def clear(self) -> None:
		self._types.clear()
		self.__log.debug("cleared custom types")

	def __contains__(self, tag: object) -> bool:
		return tag in self.tags()

	def __repr__(self) -> str:
		return f"TypeRegistry(enabled={self._enabled!r}, tags={self.tags()!r})"


@lru_cache
def default_registry() -> TypeRegistry:
	"""process-wide registry used whenever no explicit registry is passed"""
	return TypeRegistry(enabled=get_settings().TYPETAG_CUSTOM_TYPES)
