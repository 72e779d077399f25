from typing import Any

from typetag.exceptions import ConstraintError, OutOfBoundsError, TypeMismatchError
from typetag.registry import TypeRegistry
from typetag.tag import TypeSpec, spec_tags
from typetag.type.unset import Unset, is_set

from .predicate import is_type


def _satisfies(value: Any, spec: Any, registry: TypeRegistry | None) -> bool:
	tags = spec_tags(spec)
	return tags is not None and is_type(value, *tags, registry=registry)


def constrain(
	specs: list[TypeSpec] | tuple[TypeSpec, ...],
	*values: Any,
	registry: TypeRegistry | None = None,
) -> ConstraintError | None:
	"""

	Check each value against the spec at the same position.

	Values missing at the tail are checked as Unset ("undefined"). A value past the last
	spec yields OutOfBoundsError, a value failing its spec yields TypeMismatchError; the
	first failure is returned, never raised.

	Args:
		specs: one spec per position, each a tag or a sequence of tags.
		values: the actual values.
		registry: custom type registry, the process-wide default when omitted.

	"""

	padded = (*values, *(Unset,) * (len(specs) - len(values)))

	for position, value in enumerate(padded):
		spec = specs[position] if position < len(specs) else Unset
		if not is_set(spec):
			return OutOfBoundsError(position)

		if not _satisfies(value, spec, registry):
			return TypeMismatchError(position, spec)

	return None


def constrain_loose(
	spec: TypeSpec,
	*values: Any,
	registry: TypeRegistry | None = None,
) -> TypeMismatchError | None:
	"""check every value against one shared spec, returning the first mismatch"""
	for position, value in enumerate(values):
		if not _satisfies(value, spec, registry):
			return TypeMismatchError(position, spec)

	return None
