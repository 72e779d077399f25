from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel


class ErrorSchema(BaseModel):
	code: str | None = None
	desc: str | None = None
	ctx: Mapping[str, Any] | str | list[Any] | None = None
