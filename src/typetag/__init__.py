from . import config, enum, exceptions, log, registry, tag, type, typeof  # noqa: A004
from .exceptions import ConstraintError, OutOfBoundsError, TypeMismatchError, raise_for
from .registry import TypeRegistry, default_registry
from .tag import Tag, TypeSpec
from .type import Unset, is_set
from .typeof import constrain, constrain_loose, constrained, is_type, loosely_constrained, resolve, type_of

__all__ = [
	# subpackages
	"config",
	"enum",
	"exceptions",
	"log",
	"registry",
	"tag",
	"type",
	"typeof",
	# api
	"resolve",
	"type_of",
	"is_type",
	"constrain",
	"constrain_loose",
	"constrained",
	"loosely_constrained",
	"raise_for",
	"Tag",
	"TypeSpec",
	"TypeRegistry",
	"default_registry",
	"Unset",
	"is_set",
	"ConstraintError",
	"OutOfBoundsError",
	"TypeMismatchError",
]


def __dir__():
	return __all__


def __getattr__(name):
	if name in __all__:
		return globals()[name]
	raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
