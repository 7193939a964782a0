"""Feedback submission and listing routes. Feedback is append-only."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from krishi_sahayak.database import get_db
from krishi_sahayak.errors import map_error
from krishi_sahayak.schemas.feedback import FeedbackCreate, FeedbackRead
from krishi_sahayak.services.storage import DatabaseStorage

router = APIRouter(prefix="/feedback", tags=["feedback"])


@router.post("", response_model=FeedbackRead, status_code=status.HTTP_201_CREATED)
async def create_feedback(
	payload: FeedbackCreate,
	db: AsyncSession = Depends(get_db),
) -> FeedbackRead:
	storage = DatabaseStorage(db)
	try:
		entry = await storage.create_feedback(payload)
	except Exception as exc:
		raise map_error(exc, "Failed to create feedback") from exc
	return FeedbackRead.model_validate(entry)


@router.get("", response_model=list[FeedbackRead])
async def list_feedback(db: AsyncSession = Depends(get_db)) -> list[FeedbackRead]:
	storage = DatabaseStorage(db)
	try:
		entries = await storage.list_feedback()
	except Exception as exc:
		raise map_error(exc, "Failed to fetch feedback") from exc
	return [FeedbackRead.model_validate(entry) for entry in entries]
