"""Shared pytest fixtures — async test client, fake DB session, in-memory storage."""

from __future__ import annotations

import uuid
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from types import SimpleNamespace
from typing import Any
from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

from krishi_sahayak.auth.dependencies import require_admin
from krishi_sahayak.auth.jwt import create_access_token
from krishi_sahayak.database import get_db
from krishi_sahayak.main import app
from krishi_sahayak.services.storage import DatabaseStorage


class FakeAsyncSession:
	def __init__(self) -> None:
		self.commit = AsyncMock()
		self.rollback = AsyncMock()
		self.close = AsyncMock()
		self.execute = AsyncMock()


class InMemoryStorage:
	"""Dict-backed stand-in for ``DatabaseStorage``.

	Deleting a crop or disease nulls the references held by other rows, the
	way the ``ON DELETE SET NULL`` foreign keys do.
	"""

	def __init__(self) -> None:
		self.crops: dict[uuid.UUID, SimpleNamespace] = {}
		self.diseases: dict[uuid.UUID, SimpleNamespace] = {}
		self.feedback: dict[uuid.UUID, SimpleNamespace] = {}

	@staticmethod
	def _row(values: dict[str, Any]) -> SimpleNamespace:
		return SimpleNamespace(id=uuid.uuid4(), created_at=datetime.now(UTC), **values)

	async def list_crops(self) -> list[SimpleNamespace]:
		return sorted(self.crops.values(), key=lambda crop: crop.name_hindi)

	async def get_crop(self, crop_id: uuid.UUID) -> SimpleNamespace | None:
		return self.crops.get(crop_id)

	async def create_crop(self, payload: Any) -> SimpleNamespace:
		row = self._row(payload.model_dump())
		self.crops[row.id] = row
		return row

	async def update_crop(self, crop_id: uuid.UUID, payload: Any) -> SimpleNamespace | None:
		row = self.crops.get(crop_id)
		if row is None:
			return None
		for key, value in payload.model_dump(exclude_unset=True).items():
			setattr(row, key, value)
		return row

	async def delete_crop(self, crop_id: uuid.UUID) -> None:
		self.crops.pop(crop_id, None)
		for row in [*self.diseases.values(), *self.feedback.values()]:
			if row.crop_id == crop_id:
				row.crop_id = None

	async def list_diseases_by_crop(self, crop_id: uuid.UUID) -> list[SimpleNamespace]:
		rows = [row for row in self.diseases.values() if row.crop_id == crop_id]
		return sorted(rows, key=lambda row: row.name_hindi)

	async def get_disease(self, disease_id: uuid.UUID) -> SimpleNamespace | None:
		return self.diseases.get(disease_id)

	async def create_disease(self, payload: Any) -> SimpleNamespace:
		row = self._row(payload.model_dump())
		self.diseases[row.id] = row
		return row

	async def delete_disease(self, disease_id: uuid.UUID) -> None:
		self.diseases.pop(disease_id, None)
		for row in self.feedback.values():
			if row.disease_id == disease_id:
				row.disease_id = None

	async def create_feedback(self, payload: Any) -> SimpleNamespace:
		row = self._row(payload.root.model_dump())
		self.feedback[row.id] = row
		return row

	async def list_feedback(self) -> list[SimpleNamespace]:
		return list(reversed(self.feedback.values()))


_IN_MEMORY_METHODS = (
	"list_crops",
	"get_crop",
	"create_crop",
	"update_crop",
	"delete_crop",
	"list_diseases_by_crop",
	"get_disease",
	"create_disease",
	"delete_disease",
	"create_feedback",
	"list_feedback",
)


@pytest.fixture
def fake_db_session() -> FakeAsyncSession:
	"""A lightweight async-session stub for dependency overrides in API tests."""
	return FakeAsyncSession()


@pytest.fixture
def memory_storage(monkeypatch: pytest.MonkeyPatch) -> InMemoryStorage:
	"""Route every ``DatabaseStorage`` call used by the CRUD routes to one in-memory store."""
	store = InMemoryStorage()
	for name in _IN_MEMORY_METHODS:
		impl = getattr(store, name)

		async def delegate(self: DatabaseStorage, *args: Any, _impl: Any = impl, **kwargs: Any) -> Any:
			return await _impl(*args, **kwargs)

		monkeypatch.setattr(DatabaseStorage, name, delegate)
	return store


@asynccontextmanager
async def _client_for_app() -> AsyncGenerator[AsyncClient, None]:
	original_lifespan = app.router.lifespan_context

	@asynccontextmanager
	async def noop_lifespan(_: Any) -> AsyncGenerator[None, None]:
		yield

	app.router.lifespan_context = noop_lifespan

	transport = ASGITransport(app=app)
	try:
		async with AsyncClient(transport=transport, base_url="http://test") as test_client:
			yield test_client
	finally:
		app.router.lifespan_context = original_lifespan
		app.dependency_overrides.clear()


@pytest.fixture
async def client(fake_db_session: FakeAsyncSession) -> AsyncGenerator[AsyncClient, None]:
	"""HTTPX async client with lifespan disabled, DB mocked and admin check satisfied."""

	async def override_get_db() -> AsyncGenerator[Any, None]:
		yield fake_db_session

	async def override_require_admin() -> Any:
		return SimpleNamespace(id=uuid.uuid4(), phone_number="9999999999", is_admin=True)

	app.dependency_overrides[get_db] = override_get_db
	app.dependency_overrides[require_admin] = override_require_admin

	async with _client_for_app() as test_client:
		yield test_client


@pytest.fixture
async def auth_client(fake_db_session: FakeAsyncSession) -> AsyncGenerator[AsyncClient, None]:
	"""HTTPX async client with DB override only (real admin dependency active)."""

	async def override_get_db() -> AsyncGenerator[Any, None]:
		yield fake_db_session

	app.dependency_overrides[get_db] = override_get_db

	async with _client_for_app() as test_client:
		yield test_client


@pytest.fixture
def auth_user_id() -> uuid.UUID:
	return uuid.UUID("11111111-1111-1111-1111-111111111111")


@pytest.fixture
def access_token(auth_user_id: uuid.UUID) -> str:
	return create_access_token(str(auth_user_id), expires_minutes=30)
