import asyncio
import enum
import functools
from collections import OrderedDict, deque
from decimal import Decimal
from fractions import Fraction

import pytest

from typetag.registry import TypeRegistry
from typetag.tag import MAX_SAFE_INTEGER, Tag
from typetag.type import Unset
from typetag.typeof import resolve, type_of


class Color(enum.Enum):
	red = 1


class Countdown:
	def __init__(self, start: int) -> None:
		self.start = start

	def __iter__(self):
		return iter(range(self.start, 0, -1))


class Thenable:
	def __await__(self):
		yield
		return 1


class Plain:
	pass


def plain_function():
	return None


async def async_function():
	return None


def generator():
	yield 1


class TestPrimitives:
	@pytest.mark.parametrize(
		("value", "tag"),
		[
			("hi", Tag.string),
			("", Tag.string),
			(5, Tag.number),
			(-1.5, Tag.number),
			(float("nan"), Tag.number),
			(Decimal("1.1"), Tag.number),
			(Fraction(1, 3), Tag.number),
			(MAX_SAFE_INTEGER, Tag.number),
			(MAX_SAFE_INTEGER + 1, Tag.bigint),
			(-(2**64), Tag.bigint),
			(True, Tag.boolean),
			(False, Tag.boolean),
			(Color.red, Tag.symbol),
			(Unset, Tag.undefined),
		],
	)
	def test_primitive(self, value, tag):
		assert resolve(value) is tag

	def test_strenum_member_is_symbol(self):
		assert resolve(Tag.string) is Tag.symbol


class TestObjects:
	def test_null(self):
		assert resolve(None) is Tag.null

	@pytest.mark.parametrize("value", [[], [1, 2], (), (1,), range(3), deque()])
	def test_array(self, value):
		assert resolve(value) is Tag.array

	@pytest.mark.parametrize("value", [{}, {"a": 1}, OrderedDict()])
	def test_mapping_is_object(self, value):
		assert resolve(value) is Tag.object

	@pytest.mark.parametrize("value", [set(), frozenset({1}), b"bytes", bytearray(b"x"), iter([]), Countdown(3)])
	def test_iterable(self, value):
		assert resolve(value) is Tag.iterable

	def test_generator_is_iterable(self):
		assert resolve(generator()) is Tag.iterable

	def test_plain_object(self):
		assert resolve(Plain()) is Tag.object
		assert resolve(object()) is Tag.object

	def test_awaitable_is_promise(self):
		assert resolve(Thenable()) is Tag.promise

	def test_coroutine_is_promise(self):
		coro = async_function()
		try:
			assert resolve(coro) is Tag.promise
		finally:
			coro.close()

	def test_future_is_promise(self):
		loop = asyncio.new_event_loop()
		try:
			assert resolve(loop.create_future()) is Tag.promise
		finally:
			loop.close()


class TestFunctions:
	def test_plain_function(self):
		assert resolve(plain_function) is Tag.function

	def test_lambda(self):
		assert resolve(lambda: None) is Tag.function

	def test_builtin(self):
		assert resolve(len) is Tag.function

	def test_class_is_function(self):
		assert resolve(Plain) is Tag.function

	def test_async_function(self):
		assert resolve(async_function) is Tag.async_function

	def test_async_partial(self):
		assert resolve(functools.partial(async_function)) is Tag.async_function

	def test_async_method(self):
		class Service:
			async def fetch(self):
				return None

		assert resolve(Service().fetch) is Tag.async_function


class TestCustomTypes:
	def test_point_when_enabled(self, registry):
		assert resolve({"x": 1, "y": 2}, registry=registry) == "Point"

	def test_object_when_disabled(self, registry):
		registry.disable()
		assert resolve({"x": 1, "y": 2}, registry=registry) is Tag.object

	def test_non_matching_value_keeps_base(self, registry):
		assert resolve({"x": 1}, registry=registry) is Tag.object

	def test_only_predicates_of_resolved_base_are_tried(self, registry):
		calls = []
		registry.register("array", "Pair", lambda v: calls.append(v) or ("Pair" if len(v) == 2 else None))
		assert resolve({"x": 1, "y": 2}, registry=registry) == "Point"
		assert calls == []
		assert resolve([1, 2], registry=registry) == "Pair"
		assert resolve([1], registry=registry) is Tag.array

	def test_registration_order_wins(self):
		reg = TypeRegistry(enabled=True)
		reg.register("number", "Positive", lambda v: "Positive" if v > 0 else None)
		reg.register("number", "Even", lambda v: "Even" if v % 2 == 0 else None)
		assert resolve(4, registry=reg) == "Positive"
		assert resolve(-4, registry=reg) == "Even"
		assert resolve(-3, registry=reg) is Tag.number

	def test_predicate_returning_other_tag_is_no_match(self):
		reg = TypeRegistry(enabled=True)
		reg.register("string", "Email", lambda v: "Url")
		reg.register("string", "Url", lambda v: True)
		assert resolve("a@b.c", registry=reg) is Tag.string

	def test_non_str_predicate_result_is_no_match(self):
		class Ambiguous:
			def __eq__(self, other):
				raise ValueError("truth value is ambiguous")

			__hash__ = None

		reg = TypeRegistry(enabled=True)
		reg.register("array", "Matrix", lambda v: Ambiguous())
		reg.register("array", "Pair", lambda v: "Pair")
		assert resolve([1, 2], registry=reg) == "Pair"

	def test_custom_on_refined_base(self):
		reg = TypeRegistry(enabled=True)
		reg.register("null", "Nothing", lambda v: "Nothing")
		reg.register("async-function", "Handler", lambda v: "Handler")
		assert resolve(None, registry=reg) == "Nothing"
		assert resolve(async_function, registry=reg) == "Handler"
		assert resolve(plain_function, registry=reg) is Tag.function

	def test_default_registry_used_when_omitted(self, monkeypatch):
		monkeypatch.setenv("TYPETAG_CUSTOM_TYPES", "true")
		from typetag.registry import default_registry

		default_registry().register("object", "Point", lambda v: "Point")
		assert resolve({}) == "Point"

	def test_stable_across_calls(self, registry):
		value = {"x": 1.5, "y": 2}
		assert {resolve(value, registry=registry) for _ in range(5)} == {"Point"}


def test_type_of_alias():
	assert type_of is resolve
