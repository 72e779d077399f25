"""built-in type tags and type specifications"""

from collections.abc import Sequence

from typetag.enum import ValidatorMixin

# largest integer a double represents exactly, anything wider is a bigint
MAX_SAFE_INTEGER = 2**53 - 1


class Tag(ValidatorMixin):
	string = "string"
	number = "number"
	bigint = "bigint"
	boolean = "boolean"
	symbol = "symbol"
	undefined = "undefined"
	function = "function"
	object = "object"
	null = "null"
	array = "array"
	promise = "promise"
	iterable = "iterable"
	async_function = "async-function"


type TypeSpec = str | Sequence[str]


def is_builtin(tag: object) -> bool:
	return isinstance(tag, str) and tag in Tag.values()


def spec_tags(spec: object) -> tuple[str, ...] | None:
	"""flatten a spec into its tags, None if `spec` is not a valid spec"""
	if isinstance(spec, str):
		return (spec,)
	if isinstance(spec, Sequence):
		return tuple(spec)
	return None


def spec_name(spec: object) -> str:
	if isinstance(spec, str):
		return str(spec)
	if isinstance(spec, Sequence):
		return " | ".join(str(t) for t in spec)
	return repr(spec)


__all__ = ["MAX_SAFE_INTEGER", "Tag", "TypeSpec", "is_builtin", "spec_name", "spec_tags"]
