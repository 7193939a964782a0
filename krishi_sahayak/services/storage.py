"""Storage access layer — the only code that talks to the relational store.

Reads return ``None`` (single rows) or a possibly-empty list; they never
raise for a missing row.  Writes flush inside the request session and
re-raise database constraint failures as :class:`ValidationError`.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Sequence
from typing import Any, Protocol, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from krishi_sahayak.errors import ValidationError
from krishi_sahayak.models import Base, Crop, Disease, Feedback, User
from krishi_sahayak.schemas.crops import CropCreate, CropUpdate
from krishi_sahayak.schemas.diseases import DiseaseCreate, DiseaseUpdate
from krishi_sahayak.schemas.feedback import FeedbackCreate
from krishi_sahayak.schemas.users import UserCreate

ModelT = TypeVar("ModelT", bound=Base)

_logger = logging.getLogger("krishi_sahayak.storage")

# Constraint name -> (request field, client-facing message).
_CONSTRAINT_MESSAGES: dict[str, tuple[str, str]] = {
	"ix_users_phone_number": ("phoneNumber", "phoneNumber already registered"),
	"diseases_crop_id_fkey": ("cropId", "cropId does not match any crop"),
	"feedback_crop_id_fkey": ("cropId", "cropId does not match any crop"),
	"feedback_disease_id_fkey": ("diseaseId", "diseaseId does not match any disease"),
	"feedback_user_id_fkey": ("userId", "userId does not match any user"),
}


class Storage(Protocol):
	async def get_user(self, user_id: uuid.UUID) -> User | None: ...
	async def get_user_by_phone(self, phone_number: str) -> User | None: ...
	async def create_user(self, payload: UserCreate) -> User: ...

	async def list_crops(self) -> list[Crop]: ...
	async def get_crop(self, crop_id: uuid.UUID) -> Crop | None: ...
	async def create_crop(self, payload: CropCreate) -> Crop: ...
	async def update_crop(self, crop_id: uuid.UUID, payload: CropUpdate) -> Crop | None: ...
	async def delete_crop(self, crop_id: uuid.UUID) -> None: ...
	async def bulk_create_crops(self, payloads: Sequence[CropCreate]) -> list[Crop]: ...

	async def list_diseases(self) -> list[Disease]: ...
	async def list_diseases_by_crop(self, crop_id: uuid.UUID) -> list[Disease]: ...
	async def get_disease(self, disease_id: uuid.UUID) -> Disease | None: ...
	async def create_disease(self, payload: DiseaseCreate) -> Disease: ...
	async def update_disease(
		self, disease_id: uuid.UUID, payload: DiseaseUpdate
	) -> Disease | None: ...
	async def delete_disease(self, disease_id: uuid.UUID) -> None: ...
	async def bulk_create_diseases(self, payloads: Sequence[DiseaseCreate]) -> list[Disease]: ...

	async def create_feedback(self, payload: FeedbackCreate) -> Feedback: ...
	async def list_feedback(self) -> list[Feedback]: ...
	async def list_feedback_by_crop(self, crop_id: uuid.UUID) -> list[Feedback]: ...
	async def list_feedback_by_disease(self, disease_id: uuid.UUID) -> list[Feedback]: ...


class DatabaseStorage:
	"""SQLAlchemy implementation of :class:`Storage` bound to one session."""

	def __init__(self, db: AsyncSession):
		self.db = db

	# ── Users ───────────────────────────────────────────────────────────────

	async def get_user(self, user_id: uuid.UUID) -> User | None:
		row = await self.db.execute(select(User).where(User.id == user_id))
		return row.scalar_one_or_none()

	async def get_user_by_phone(self, phone_number: str) -> User | None:
		row = await self.db.execute(select(User).where(User.phone_number == phone_number))
		return row.scalar_one_or_none()

	async def create_user(self, payload: UserCreate) -> User:
		return await self._insert(User(**payload.model_dump()))

	# ── Crops ───────────────────────────────────────────────────────────────

	async def list_crops(self) -> list[Crop]:
		rows = await self.db.execute(select(Crop).order_by(Crop.name_hindi.asc()))
		return list(rows.scalars().all())

	async def get_crop(self, crop_id: uuid.UUID) -> Crop | None:
		row = await self.db.execute(select(Crop).where(Crop.id == crop_id))
		return row.scalar_one_or_none()

	async def create_crop(self, payload: CropCreate) -> Crop:
		return await self._insert(Crop(**payload.model_dump()))

	async def update_crop(self, crop_id: uuid.UUID, payload: CropUpdate) -> Crop | None:
		crop = await self.get_crop(crop_id)
		if crop is None:
			return None
		return await self._apply(crop, payload.model_dump(exclude_unset=True))

	async def delete_crop(self, crop_id: uuid.UUID) -> None:
		await self.db.execute(delete(Crop).where(Crop.id == crop_id))

	async def bulk_create_crops(self, payloads: Sequence[CropCreate]) -> list[Crop]:
		return await self._bulk_insert(Crop, [payload.model_dump() for payload in payloads])

	# ── Diseases ────────────────────────────────────────────────────────────

	async def list_diseases(self) -> list[Disease]:
		rows = await self.db.execute(select(Disease).order_by(Disease.name_hindi.asc()))
		return list(rows.scalars().all())

	async def list_diseases_by_crop(self, crop_id: uuid.UUID) -> list[Disease]:
		stmt = (
			select(Disease)
			.where(Disease.crop_id == crop_id)
			.order_by(Disease.name_hindi.asc())
		)
		rows = await self.db.execute(stmt)
		return list(rows.scalars().all())

	async def get_disease(self, disease_id: uuid.UUID) -> Disease | None:
		row = await self.db.execute(select(Disease).where(Disease.id == disease_id))
		return row.scalar_one_or_none()

	async def create_disease(self, payload: DiseaseCreate) -> Disease:
		return await self._insert(Disease(**payload.model_dump()))

	async def update_disease(
		self,
		disease_id: uuid.UUID,
		payload: DiseaseUpdate,
	) -> Disease | None:
		disease = await self.get_disease(disease_id)
		if disease is None:
			return None
		return await self._apply(disease, payload.model_dump(exclude_unset=True))

	async def delete_disease(self, disease_id: uuid.UUID) -> None:
		await self.db.execute(delete(Disease).where(Disease.id == disease_id))

	async def bulk_create_diseases(self, payloads: Sequence[DiseaseCreate]) -> list[Disease]:
		return await self._bulk_insert(Disease, [payload.model_dump() for payload in payloads])

	# ── Feedback ────────────────────────────────────────────────────────────

	async def create_feedback(self, payload: FeedbackCreate) -> Feedback:
		return await self._insert(Feedback(**payload.root.model_dump()))

	async def list_feedback(self) -> list[Feedback]:
		rows = await self.db.execute(select(Feedback).order_by(Feedback.created_at.desc()))
		return list(rows.scalars().all())

	async def list_feedback_by_crop(self, crop_id: uuid.UUID) -> list[Feedback]:
		stmt = (
			select(Feedback)
			.where(Feedback.crop_id == crop_id)
			.order_by(Feedback.created_at.desc())
		)
		rows = await self.db.execute(stmt)
		return list(rows.scalars().all())

	async def list_feedback_by_disease(self, disease_id: uuid.UUID) -> list[Feedback]:
		stmt = (
			select(Feedback)
			.where(Feedback.disease_id == disease_id)
			.order_by(Feedback.created_at.desc())
		)
		rows = await self.db.execute(stmt)
		return list(rows.scalars().all())

	# ── Internals ───────────────────────────────────────────────────────────

	async def _insert(self, instance: ModelT) -> ModelT:
		self.db.add(instance)
		await self._flush()
		await self.db.refresh(instance)
		return instance

	async def _apply(self, instance: ModelT, values: dict[str, Any]) -> ModelT:
		if not values:
			return instance
		for key, value in values.items():
			setattr(instance, key, value)
		await self._flush()
		await self.db.refresh(instance)
		return instance

	async def _bulk_insert(self, model: type[ModelT], values: list[dict[str, Any]]) -> list[ModelT]:
		rows = [model(**value) for value in values]
		if not rows:
			return rows
		self.db.add_all(rows)
		await self._flush()
		return rows

	async def _flush(self) -> None:
		try:
			await self.db.flush()
		except IntegrityError as exc:
			raise _constraint_error(exc) from exc


def _constraint_error(exc: IntegrityError) -> ValidationError:
	"""Name the offending request field; the database text stays in the log."""
	detail = str(exc.orig)
	_logger.warning("constraint_violation", extra={"error": detail})
	for constraint, (field, message) in _CONSTRAINT_MESSAGES.items():
		if constraint in detail:
			return ValidationError(message, field=field)
	return ValidationError("Conflicts with existing data")
