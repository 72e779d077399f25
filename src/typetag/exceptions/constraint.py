from typetag.tag import TypeSpec, spec_name

from .schema import ErrorSchema


class ConstraintError(Exception):
	"""

	Failure produced by an argument constrainer.

	Constrainers return these instead of raising them, so the caller decides whether
	a failure is fatal. `raise_for` escalates one.

	"""

	code: str = "constraint"
	position: int
	message: str

	def __init__(self, position: int, message: str, *args) -> None:
		super().__init__(message, *args)
		self.position = position
		self.message = message
		self.schema = ErrorSchema(code=self.code, desc=message, ctx=self._ctx())

	def _ctx(self) -> dict:
		return {"position": self.position}

	def __str__(self) -> str:
		return self.message

	def __repr__(self) -> str:
		return f"{self.__class__.__name__}(position={self.position!r})"

	def __eq__(self, other: object) -> bool:
		if not isinstance(other, ConstraintError):
			return NotImplemented
		return type(self) is type(other) and self.schema == other.schema

	def __hash__(self) -> int:
		return hash((type(self), self.position, self.message))


class OutOfBoundsError(ConstraintError):
	code = "out_of_bounds"

	def __init__(self, position: int) -> None:
		super().__init__(position, f"Argument at position {position} is out of bounds and cannot be type-checked.")


class TypeMismatchError(ConstraintError, TypeError):
	code = "type_mismatch"
	expected: TypeSpec

	def __init__(self, position: int, expected: TypeSpec) -> None:
		self.expected = expected
		super().__init__(position, f"Argument at position {position} is not of type {spec_name(expected)}.")

	def _ctx(self) -> dict:
		return {"position": self.position, "expected": spec_name(self.expected)}

	def __repr__(self) -> str:
		return f"{self.__class__.__name__}(position={self.position!r}, expected={self.expected!r})"


def raise_for(failure: ConstraintError | None) -> None:
	if failure is not None:
		raise failure
