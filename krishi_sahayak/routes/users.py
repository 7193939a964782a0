"""User lookup and registration routes. Users are append-only."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from krishi_sahayak.database import get_db
from krishi_sahayak.errors import NotFoundError, map_error
from krishi_sahayak.schemas.common import parse_id
from krishi_sahayak.schemas.users import UserCreate, UserRead
from krishi_sahayak.services.storage import DatabaseStorage

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def create_user(payload: UserCreate, db: AsyncSession = Depends(get_db)) -> UserRead:
	storage = DatabaseStorage(db)
	try:
		user = await storage.create_user(payload)
	except Exception as exc:
		raise map_error(exc, "Failed to create user") from exc
	return UserRead.model_validate(user)


# Registered before /{user_id} so "phone" is not taken for an id.
@router.get("/phone/{phone_number}", response_model=UserRead)
async def get_user_by_phone(phone_number: str, db: AsyncSession = Depends(get_db)) -> UserRead:
	storage = DatabaseStorage(db)
	try:
		user = await storage.get_user_by_phone(phone_number)
		if user is None:
			raise NotFoundError("User")
	except Exception as exc:
		raise map_error(exc, "Failed to fetch user") from exc
	return UserRead.model_validate(user)


@router.get("/{user_id}", response_model=UserRead)
async def get_user(user_id: str, db: AsyncSession = Depends(get_db)) -> UserRead:
	storage = DatabaseStorage(db)
	key = parse_id(user_id)
	try:
		user = await storage.get_user(key) if key is not None else None
		if user is None:
			raise NotFoundError("User")
	except Exception as exc:
		raise map_error(exc, "Failed to fetch user") from exc
	return UserRead.model_validate(user)
