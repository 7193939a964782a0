"""Disease CRUD routes and per-disease feedback listing."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from krishi_sahayak.auth.dependencies import require_admin
from krishi_sahayak.database import get_db
from krishi_sahayak.errors import NotFoundError, map_error
from krishi_sahayak.schemas.common import parse_id
from krishi_sahayak.schemas.diseases import DiseaseCreate, DiseaseRead, DiseaseUpdate
from krishi_sahayak.schemas.feedback import FeedbackRead
from krishi_sahayak.services.storage import DatabaseStorage

router = APIRouter(prefix="/diseases", tags=["diseases"])


@router.get("", response_model=list[DiseaseRead])
async def list_diseases(db: AsyncSession = Depends(get_db)) -> list[DiseaseRead]:
	storage = DatabaseStorage(db)
	try:
		diseases = await storage.list_diseases()
	except Exception as exc:
		raise map_error(exc, "Failed to fetch diseases") from exc
	return [DiseaseRead.model_validate(disease) for disease in diseases]


@router.get("/{disease_id}", response_model=DiseaseRead)
async def get_disease(disease_id: str, db: AsyncSession = Depends(get_db)) -> DiseaseRead:
	storage = DatabaseStorage(db)
	key = parse_id(disease_id)
	try:
		disease = await storage.get_disease(key) if key is not None else None
		if disease is None:
			raise NotFoundError("Disease")
	except Exception as exc:
		raise map_error(exc, "Failed to fetch disease") from exc
	return DiseaseRead.model_validate(disease)


@router.post("", response_model=DiseaseRead, status_code=status.HTTP_201_CREATED)
async def create_disease(
	payload: DiseaseCreate,
	db: AsyncSession = Depends(get_db),
	_admin: object = Depends(require_admin),
) -> DiseaseRead:
	storage = DatabaseStorage(db)
	try:
		disease = await storage.create_disease(payload)
	except Exception as exc:
		raise map_error(exc, "Failed to create disease") from exc
	return DiseaseRead.model_validate(disease)


@router.put("/{disease_id}", response_model=DiseaseRead)
async def update_disease(
	disease_id: str,
	payload: DiseaseUpdate,
	db: AsyncSession = Depends(get_db),
	_admin: object = Depends(require_admin),
) -> DiseaseRead:
	storage = DatabaseStorage(db)
	key = parse_id(disease_id)
	try:
		disease = await storage.update_disease(key, payload) if key is not None else None
		if disease is None:
			raise NotFoundError("Disease")
	except Exception as exc:
		raise map_error(exc, "Failed to update disease") from exc
	return DiseaseRead.model_validate(disease)


@router.delete("/{disease_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_disease(
	disease_id: str,
	db: AsyncSession = Depends(get_db),
	_admin: object = Depends(require_admin),
) -> Response:
	storage = DatabaseStorage(db)
	key = parse_id(disease_id)
	try:
		if key is not None:
			await storage.delete_disease(key)
	except Exception as exc:
		raise map_error(exc, "Failed to delete disease") from exc
	return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{disease_id}/feedback", response_model=list[FeedbackRead])
async def list_disease_feedback(
	disease_id: str,
	db: AsyncSession = Depends(get_db),
) -> list[FeedbackRead]:
	storage = DatabaseStorage(db)
	key = parse_id(disease_id)
	if key is None:
		return []
	try:
		entries = await storage.list_feedback_by_disease(key)
	except Exception as exc:
		raise map_error(exc, "Failed to fetch feedback") from exc
	return [FeedbackRead.model_validate(entry) for entry in entries]
