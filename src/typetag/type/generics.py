"""useful repetative generics"""

from collections.abc import Callable
from typing import Any

type strlike = str | bytes | bytearray | memoryview

type func[**pspec, rtype] = Callable[pspec, rtype]

# custom type predicate: returns its own tag on match, anything else otherwise
type predicate = Callable[[Any], str | None]
