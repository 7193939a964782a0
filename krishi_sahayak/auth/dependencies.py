"""Authentication dependencies — get_current_user, require_admin."""

from __future__ import annotations

import uuid

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from krishi_sahayak.auth.jwt import AuthError, decode_token
from krishi_sahayak.config import get_settings
from krishi_sahayak.database import get_db
from krishi_sahayak.models import User
from krishi_sahayak.services.storage import DatabaseStorage

bearer_scheme = HTTPBearer(auto_error=False)


def _raise_auth(exc: AuthError) -> HTTPException:
	return HTTPException(
		status_code=exc.status_code,
		detail={"error": exc.code, "message": exc.detail},
	)


async def _resolve_user_from_token(
	db: AsyncSession,
	credentials: HTTPAuthorizationCredentials | None,
) -> User:
	if credentials is None or credentials.scheme.lower() != "bearer":
		raise _raise_auth(AuthError(code="auth_required", detail="Bearer token is required"))

	try:
		payload = decode_token(credentials.credentials)
	except AuthError as exc:
		raise _raise_auth(exc) from exc

	try:
		user_id = uuid.UUID(str(payload["sub"]))
	except (ValueError, KeyError) as exc:
		raise _raise_auth(AuthError(code="token_invalid", detail="Token subject is invalid")) from exc

	user = await DatabaseStorage(db).get_user(user_id)
	if user is None:
		raise _raise_auth(AuthError(code="user_invalid", detail="User does not exist"))
	return user


async def get_current_user(
	request: Request,
	db: AsyncSession = Depends(get_db),
) -> User:
	credentials = await bearer_scheme(request)
	return await _resolve_user_from_token(db, credentials)


async def require_admin(
	request: Request,
	db: AsyncSession = Depends(get_db),
) -> User | None:
	"""Gate crop/disease writes on ``User.is_admin``.

	Returns ``None`` without inspecting credentials when ``enforce_admin`` is
	off, in which case the admin surface is unauthenticated.
	"""
	if not get_settings().enforce_admin:
		return None

	user = await get_current_user(request, db)
	if not user.is_admin:
		raise HTTPException(
			status_code=status.HTTP_403_FORBIDDEN,
			detail={"error": "forbidden", "message": "Admin access required"},
		)
	return user
