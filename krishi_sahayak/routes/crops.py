"""Crop CRUD routes, plus per-crop disease and feedback listings."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from krishi_sahayak.auth.dependencies import require_admin
from krishi_sahayak.database import get_db
from krishi_sahayak.errors import NotFoundError, map_error
from krishi_sahayak.schemas.common import parse_id
from krishi_sahayak.schemas.crops import CropCreate, CropRead, CropUpdate
from krishi_sahayak.schemas.diseases import DiseaseRead
from krishi_sahayak.schemas.feedback import FeedbackRead
from krishi_sahayak.services.storage import DatabaseStorage

router = APIRouter(prefix="/crops", tags=["crops"])


@router.get("", response_model=list[CropRead])
async def list_crops(db: AsyncSession = Depends(get_db)) -> list[CropRead]:
	storage = DatabaseStorage(db)
	try:
		crops = await storage.list_crops()
	except Exception as exc:
		raise map_error(exc, "Failed to fetch crops") from exc
	return [CropRead.model_validate(crop) for crop in crops]


@router.get("/{crop_id}", response_model=CropRead)
async def get_crop(crop_id: str, db: AsyncSession = Depends(get_db)) -> CropRead:
	storage = DatabaseStorage(db)
	key = parse_id(crop_id)
	try:
		crop = await storage.get_crop(key) if key is not None else None
		if crop is None:
			raise NotFoundError("Crop")
	except Exception as exc:
		raise map_error(exc, "Failed to fetch crop") from exc
	return CropRead.model_validate(crop)


@router.post("", response_model=CropRead, status_code=status.HTTP_201_CREATED)
async def create_crop(
	payload: CropCreate,
	db: AsyncSession = Depends(get_db),
	_admin: object = Depends(require_admin),
) -> CropRead:
	storage = DatabaseStorage(db)
	try:
		crop = await storage.create_crop(payload)
	except Exception as exc:
		raise map_error(exc, "Failed to create crop") from exc
	return CropRead.model_validate(crop)


@router.put("/{crop_id}", response_model=CropRead)
async def update_crop(
	crop_id: str,
	payload: CropUpdate,
	db: AsyncSession = Depends(get_db),
	_admin: object = Depends(require_admin),
) -> CropRead:
	storage = DatabaseStorage(db)
	key = parse_id(crop_id)
	try:
		crop = await storage.update_crop(key, payload) if key is not None else None
		if crop is None:
			raise NotFoundError("Crop")
	except Exception as exc:
		raise map_error(exc, "Failed to update crop") from exc
	return CropRead.model_validate(crop)


@router.delete("/{crop_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_crop(
	crop_id: str,
	db: AsyncSession = Depends(get_db),
	_admin: object = Depends(require_admin),
) -> Response:
	storage = DatabaseStorage(db)
	key = parse_id(crop_id)
	try:
		if key is not None:
			await storage.delete_crop(key)
	except Exception as exc:
		raise map_error(exc, "Failed to delete crop") from exc
	return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{crop_id}/diseases", response_model=list[DiseaseRead])
async def list_crop_diseases(
	crop_id: str,
	db: AsyncSession = Depends(get_db),
) -> list[DiseaseRead]:
	storage = DatabaseStorage(db)
	key = parse_id(crop_id)
	if key is None:
		return []
	try:
		diseases = await storage.list_diseases_by_crop(key)
	except Exception as exc:
		raise map_error(exc, "Failed to fetch diseases") from exc
	return [DiseaseRead.model_validate(disease) for disease in diseases]


@router.get("/{crop_id}/feedback", response_model=list[FeedbackRead])
async def list_crop_feedback(
	crop_id: str,
	db: AsyncSession = Depends(get_db),
) -> list[FeedbackRead]:
	storage = DatabaseStorage(db)
	key = parse_id(crop_id)
	if key is None:
		return []
	try:
		entries = await storage.list_feedback_by_crop(key)
	except Exception as exc:
		raise map_error(exc, "Failed to fetch feedback") from exc
	return [FeedbackRead.model_validate(entry) for entry in entries]
