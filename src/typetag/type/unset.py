class UnsetType:
	"""the "undefined" value: an argument or slot that was never provided, distinct from None"""

	__slots__ = ()
	_instance: "UnsetType | None" = None

	def __new__(cls) -> "UnsetType":
		if cls._instance is None:
			cls._instance = super().__new__(cls)
		return cls._instance

	def __repr__(self) -> str:
		return "<unset value>"

	__str__ = __repr__

	def __bool__(self) -> bool:
		return False

	def __reduce__(self) -> str:
		return "Unset"


Unset = UnsetType()


def is_set(val: object) -> bool:
	return not isinstance(val, UnsetType)
