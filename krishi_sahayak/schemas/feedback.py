"""Pydantic schemas for feedback.

Feedback input is a tagged variant keyed on ``type``:

* ``crop``: ``cropId`` required, ``diseaseId`` absent
* ``disease``: ``diseaseId`` required, ``cropId`` absent
* ``general``: neither reference

``rating`` is an integer with no range check.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Annotated, Literal, Union

from pydantic import ConfigDict, Field, RootModel

from krishi_sahayak.schemas.common import CamelModel


class _FeedbackBase(CamelModel):
	user_id: uuid.UUID | None = None
	name: str | None = None
	phone_number: str | None = Field(default=None, max_length=15)
	rating: int | None = None
	comment: str | None = None


class CropFeedbackCreate(_FeedbackBase):
	type: Literal["crop"]
	crop_id: uuid.UUID
	disease_id: None = None


class DiseaseFeedbackCreate(_FeedbackBase):
	type: Literal["disease"]
	disease_id: uuid.UUID
	crop_id: None = None


class GeneralFeedbackCreate(_FeedbackBase):
	type: Literal["general"]
	crop_id: None = None
	disease_id: None = None


FeedbackVariant = Annotated[
	Union[CropFeedbackCreate, DiseaseFeedbackCreate, GeneralFeedbackCreate],
	Field(discriminator="type"),
]


class FeedbackCreate(RootModel[FeedbackVariant]):
	pass


class FeedbackRead(CamelModel):
	model_config = ConfigDict(from_attributes=True)

	id: uuid.UUID
	user_id: uuid.UUID | None = None
	crop_id: uuid.UUID | None = None
	disease_id: uuid.UUID | None = None
	name: str | None = None
	phone_number: str | None = None
	rating: int | None = None
	comment: str | None = None
	type: str | None = None
	created_at: datetime
