from __future__ import annotations

import re
from os import PathLike, getenv
from types import NoneType, UnionType
from typing import TYPE_CHECKING, Any, get_args, get_type_hints

from dotenv import load_dotenv

from typetag.log import get_logger

from .field import AllowedTypes, SettingsField

if TYPE_CHECKING:
	from loguru import Logger

_TRUTHY = ("yes", "true", "1", "y", "on")


def _unwrap_type(tp: Any) -> Any:
	if isinstance(tp, UnionType):
		args = [a for a in get_args(tp) if a is not NoneType]
		return args[0] if args else NoneType
	return tp


def _evaluate_var(tp: Any, raw: str) -> Any:
	tp = _unwrap_type(tp)
	if tp is NoneType:
		return None
	if tp is bool:
		return raw.strip().lower() in _TRUTHY
	return tp(raw)


class AppSettings:
	"""

	Base class for typed settings read from environment variables.

	Declare annotated class attributes and assign SettingsField(...) to each. Values come
	from the environment (after loading .env), then from default/factory, then None if
	the field is nullable.

	**Example:**

		>>> class Settings(AppSettings):
		...	 TYPETAG_CUSTOM_TYPES: bool = SettingsField(default=False)
		>>> Settings().TYPETAG_CUSTOM_TYPES
		False

	"""

	def __init__(
		self,
		dotenv_path: str | PathLike[str] | None = None,
		logger: Logger | None = None,
		explicit_format: bool = True,
	) -> None:
		"""

		**Raises:**

		- `AttributeError`: if explicit_format is set and a field name is not UPPER_SNAKE_CASE.
		- `TypeError`: if a resolved value is not one of the allowed immutable types.
		- `ValueError`: if a required field is missing from the environment.

		"""

		load_dotenv(dotenv_path=dotenv_path)

		self.__log = get_logger("typetag.config") if logger is None else logger

		annotations = get_type_hints(type(self))

		fields: dict[str, SettingsField] = {}
		for klass in reversed(type(self).__mro__):
			fields |= {attr: val for attr, val in vars(klass).items() if isinstance(val, SettingsField)}

		for attr, settings_field in fields.items():
			if explicit_format and not re.fullmatch(r"[A-Z][A-Z0-9_]*", attr):
				raise AttributeError("AppSettings attributes should contain only capital letters and underscores")

			raw = getenv(attr, None)
			if raw is None:
				setattr(self, attr, self.__fallback(attr, settings_field))
				continue

			setattr(self, attr, self.__validate(_evaluate_var(annotations.get(attr, str), raw)))
			self.__log.debug(f"evaluated {attr} from environment")

	def __fallback(self, attr: str, settings_field: SettingsField) -> Any:
		if settings_field.default is not None:
			self.__log.debug(f"evaluated {attr} from default")
			return self.__validate(settings_field.default)

		if settings_field.factory is not None:
			self.__log.debug(f"evaluated {attr} from factory")
			return self.__validate(settings_field.factory())

		if settings_field.nullable:
			self.__log.debug(f"evaluated {attr} as None (nullable)")
			return None

		raise ValueError(f"reqd field {attr} was not found in environment")

	@staticmethod
	def __validate[T](val: T) -> T:
		if type(val) not in get_args(AllowedTypes.__value__):
			raise TypeError(f"{type(val)} is not an allowed immutable type")
		return val
