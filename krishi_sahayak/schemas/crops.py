"""Pydantic request/response schemas for crops."""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import ConfigDict, ValidationInfo, field_validator

from krishi_sahayak.schemas.common import BilingualText, CamelModel, reject_null


class CropCreate(CamelModel):
	name_hindi: str
	name_english: str
	scientific_name: str | None = None
	category: str | None = None
	sowing_time: str | None = None
	temperature: str | None = None
	water_requirement: str | None = None
	care_instructions: BilingualText | None = None
	image_url: str | None = None


class CropUpdate(CamelModel):
	name_hindi: str | None = None
	name_english: str | None = None
	scientific_name: str | None = None
	category: str | None = None
	sowing_time: str | None = None
	temperature: str | None = None
	water_requirement: str | None = None
	care_instructions: BilingualText | None = None
	image_url: str | None = None

	@field_validator("name_hindi", "name_english")
	@classmethod
	def _names_not_null(cls, value: str | None, info: ValidationInfo) -> str | None:
		return reject_null(value, info.field_name or "field")


class CropRead(CamelModel):
	model_config = ConfigDict(from_attributes=True)

	id: uuid.UUID
	name_hindi: str
	name_english: str
	scientific_name: str | None = None
	category: str | None = None
	sowing_time: str | None = None
	temperature: str | None = None
	water_requirement: str | None = None
	care_instructions: BilingualText | None = None
	image_url: str | None = None
	created_at: datetime
