"""Pydantic request/response schemas for diseases."""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import ConfigDict, ValidationInfo, field_validator

from krishi_sahayak.schemas.common import BilingualList, CamelModel, reject_null


class DiseaseCreate(CamelModel):
	crop_id: uuid.UUID | None = None
	name_hindi: str
	name_english: str
	scientific_name: str | None = None
	severity: str | None = None
	type: str | None = None
	symptoms: BilingualList | None = None
	causes: BilingualList | None = None
	treatment: BilingualList | None = None
	prevention: BilingualList | None = None
	images: list[str] | None = None


class DiseaseUpdate(CamelModel):
	crop_id: uuid.UUID | None = None
	name_hindi: str | None = None
	name_english: str | None = None
	scientific_name: str | None = None
	severity: str | None = None
	type: str | None = None
	symptoms: BilingualList | None = None
	causes: BilingualList | None = None
	treatment: BilingualList | None = None
	prevention: BilingualList | None = None
	images: list[str] | None = None

	@field_validator("name_hindi", "name_english")
	@classmethod
	def _names_not_null(cls, value: str | None, info: ValidationInfo) -> str | None:
		return reject_null(value, info.field_name or "field")


class DiseaseRead(CamelModel):
	model_config = ConfigDict(from_attributes=True)

	id: uuid.UUID
	crop_id: uuid.UUID | None = None
	name_hindi: str
	name_english: str
	scientific_name: str | None = None
	severity: str | None = None
	type: str | None = None
	symptoms: BilingualList | None = None
	causes: BilingualList | None = None
	treatment: BilingualList | None = None
	prevention: BilingualList | None = None
	images: list[str] | None = None
	created_at: datetime
