from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
	from loguru import Logger


@lru_cache
def get_logger(logger_name: str | None = None) -> Logger:
	"""

	Return a cached loguru Logger, optionally bound to a humanized name.

	The name is stored in extra["logger_name"] as " typetag -> registry " so sinks can filter
	on it. Without a name the global logger is returned.

	"""

	return logger if logger_name is None else logger.bind(logger_name=f" {logger_name.replace('.', ' -> ')} ")
