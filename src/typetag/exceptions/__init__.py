from .constraint import ConstraintError, OutOfBoundsError, TypeMismatchError, raise_for
from .schema import ErrorSchema

__all__ = ["ConstraintError", "ErrorSchema", "OutOfBoundsError", "TypeMismatchError", "raise_for"]
