"""Pydantic request/response schemas for users."""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import ConfigDict, Field

from krishi_sahayak.schemas.common import CamelModel


class UserCreate(CamelModel):
	phone_number: str = Field(min_length=1, max_length=15)
	name: str | None = None
	is_admin: bool = False


class UserRead(CamelModel):
	model_config = ConfigDict(from_attributes=True)

	id: uuid.UUID
	phone_number: str
	name: str | None = None
	is_admin: bool
	created_at: datetime
