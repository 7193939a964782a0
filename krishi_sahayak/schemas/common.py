"""Shared schema base and the bilingual value types stored in JSONB columns."""

from __future__ import annotations

import uuid

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
	"""Accepts and emits camelCase keys; snake_case is accepted on input too."""

	model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BilingualText(CamelModel):
	model_config = ConfigDict(extra="forbid")

	hindi: str
	english: str


class BilingualList(CamelModel):
	model_config = ConfigDict(extra="forbid")

	hindi: list[str]
	english: list[str]


def reject_null(value: str | None, field: str) -> str:
	"""Partial updates may omit a required column but never null it."""
	if value is None:
		raise ValueError(f"{field} may not be null")
	return value


def parse_id(raw: str) -> uuid.UUID | None:
	"""Path identifiers are opaque to clients; one that is not a UUID names no row."""
	try:
		return uuid.UUID(raw)
	except ValueError:
		return None
