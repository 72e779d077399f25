"""runtime type resolution and argument validation"""

from .constrain import constrain, constrain_loose
from .decorators import constrained, loosely_constrained
from .predicate import is_type
from .resolver import resolve, type_of

__all__ = (
	"resolve",
	"type_of",
	"is_type",
	"constrain",
	"constrain_loose",
	"constrained",
	"loosely_constrained",
)
