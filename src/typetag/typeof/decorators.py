import inspect
from collections.abc import Callable
from functools import wraps
from typing import Any

from typetag.exceptions import ConstraintError, raise_for
from typetag.log import get_logger
from typetag.registry import TypeRegistry
from typetag.tag import TypeSpec
from typetag.type.generics import func

from .constrain import constrain, constrain_loose

type _checker = Callable[[tuple[Any, ...]], ConstraintError | None]


def _positional(sig: inspect.Signature | None, args: tuple[Any, ...], kwargs: dict[str, Any]) -> tuple[Any, ...]:
	"""arguments in parameter order, keywords included, up to the first parameter left out"""
	if sig is None or not kwargs:
		return args
	return sig.bind_partial(*args, **kwargs).args


def _checked[**P, R](fn: func[P, R], check: _checker) -> func[P, R]:
	log = get_logger("typetag.typeof")
	try:
		sig = inspect.signature(fn)
	except (ValueError, TypeError):
		sig = None

	def _enforce(args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
		failure = check(_positional(sig, args, kwargs))
		if failure is not None:
			log.debug(f"{getattr(fn, '__qualname__', fn)}: {failure}")
		raise_for(failure)

	if inspect.iscoroutinefunction(fn):
		@wraps(fn)
		async def awrapper(*args: P.args, **kwargs: P.kwargs) -> Any:
			_enforce(args, kwargs)
			return await fn(*args, **kwargs)

		return awrapper  # pyrefly: ignore

	@wraps(fn)
	def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
		_enforce(args, kwargs)
		return fn(*args, **kwargs)

	return wrapper


def constrained[**P, R](
	*specs: TypeSpec,
	registry: TypeRegistry | None = None,
) -> Callable[[func[P, R]], func[P, R]]:
	"""

	Validate positional arguments against one spec per position on every call.

	Arguments are bound to the signature first, so a positional-or-keyword parameter is
	checked at its position whether it was passed positionally or by keyword. Parameters
	left out are checked as Unset; keyword-only parameters are not checked. Raises the
	OutOfBoundsError or TypeMismatchError `constrain` reports. Coroutine functions stay
	coroutine functions.

	"""

	def decorator(fn: func[P, R]) -> func[P, R]:
		return _checked(fn, lambda args: constrain(specs, *args, registry=registry))

	return decorator


def loosely_constrained[**P, R](
	spec: TypeSpec,
	*,
	registry: TypeRegistry | None = None,
) -> Callable[[func[P, R]], func[P, R]]:
	"""validate every positional argument against one shared spec on every call"""

	def decorator(fn: func[P, R]) -> func[P, R]:
		return _checked(fn, lambda args: constrain_loose(spec, *args, registry=registry))

	return decorator
