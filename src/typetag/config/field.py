from collections.abc import Callable
from dataclasses import dataclass

type AllowedTypes = int | float | str | bool | None


@dataclass(init=True, slots=True, frozen=True)
class SettingsField[T: AllowedTypes]:
	"""

	Typed field declaration for AppSettings.

	**Attributes:**

	- `default`: fallback value when the environment variable is missing.
	- `factory`: callable producing the fallback value lazily.
	- `nullable`: whether None is accepted when nothing else provides a value.

	"""

	default: T | None = None
	factory: Callable[[], T] | None = None
	nullable: bool = False
