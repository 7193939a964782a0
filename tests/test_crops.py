from __future__ import annotations

from datetime import UTC, datetime
from types import SimpleNamespace
from uuid import uuid4

import pytest
from httpx import AsyncClient

from krishi_sahayak.services.storage import DatabaseStorage


def _crop_payload(**overrides: object) -> dict[str, object]:
	payload: dict[str, object] = {
		"nameHindi": "गेहूं",
		"nameEnglish": "Wheat",
		"scientificName": "Triticum aestivum",
		"category": "rabi",
		"sowingTime": "नवंबर-दिसंबर",
		"temperature": "15-25°C",
		"waterRequirement": "400-500 मिमी",
		"careInstructions": {"hindi": "हल्की सिंचाई करें", "english": "Irrigate lightly"},
		"imageUrl": "https://images.unsplash.com/photo-1574323347407-f5e1ad6d020b",
	}
	payload.update(overrides)
	return payload


def _crop_obj(**overrides: object) -> SimpleNamespace:
	values: dict[str, object] = {
		"id": uuid4(),
		"name_hindi": "चावल",
		"name_english": "Rice",
		"scientific_name": "Oryza sativa",
		"category": "kharif",
		"sowing_time": "जून-जुलाई",
		"temperature": "20-30°C",
		"water_requirement": "1200-1500 मिमी",
		"care_instructions": None,
		"image_url": None,
		"created_at": datetime.now(UTC),
	}
	values.update(overrides)
	return SimpleNamespace(**values)


@pytest.mark.asyncio
async def test_create_then_get_returns_payload_with_id_and_timestamp(
	client: AsyncClient,
	memory_storage: object,
) -> None:
	payload = _crop_payload()

	created = await client.post("/api/crops", json=payload)
	assert created.status_code == 201
	crop_id = created.json()["id"]

	fetched = await client.get(f"/api/crops/{crop_id}")
	assert fetched.status_code == 200
	body = fetched.json()
	assert body["id"] == crop_id
	assert body["createdAt"]
	for key, value in payload.items():
		assert body[key] == value


@pytest.mark.asyncio
async def test_delete_then_get_is_not_found(
	client: AsyncClient,
	memory_storage: object,
) -> None:
	created = await client.post("/api/crops", json=_crop_payload())
	crop_id = created.json()["id"]

	deleted = await client.delete(f"/api/crops/{crop_id}")
	assert deleted.status_code == 204
	assert deleted.content == b""

	response = await client.get(f"/api/crops/{crop_id}")
	assert response.status_code == 404
	assert response.json() == {"message": "Crop not found"}


@pytest.mark.asyncio
async def test_delete_missing_crop_is_silent(
	client: AsyncClient,
	memory_storage: object,
) -> None:
	response = await client.delete(f"/api/crops/{uuid4()}")
	assert response.status_code == 204


@pytest.mark.asyncio
async def test_list_crops_sorted_by_hindi_name(
	client: AsyncClient,
	memory_storage: object,
) -> None:
	for hindi, english in [("सोयाबीन", "Soybean"), ("गेहूं", "Wheat"), ("कपास", "Cotton")]:
		await client.post("/api/crops", json=_crop_payload(nameHindi=hindi, nameEnglish=english))

	response = await client.get("/api/crops")

	assert response.status_code == 200
	names = [crop["nameHindi"] for crop in response.json()]
	assert names == sorted(names)
	assert len(names) == 3


@pytest.mark.asyncio
async def test_get_unknown_crop_returns_404_message(
	client: AsyncClient,
	monkeypatch: pytest.MonkeyPatch,
) -> None:
	async def fake_get(self: DatabaseStorage, _crop_id: object) -> None:
		return None

	monkeypatch.setattr(DatabaseStorage, "get_crop", fake_get)

	response = await client.get(f"/api/crops/{uuid4()}")

	assert response.status_code == 404
	assert response.json() == {"message": "Crop not found"}


@pytest.mark.asyncio
async def test_create_crop_missing_name_hindi_is_400(client: AsyncClient) -> None:
	payload = _crop_payload()
	del payload["nameHindi"]

	response = await client.post("/api/crops", json=payload)

	assert response.status_code == 400
	body = response.json()
	assert body["message"] == "Invalid data"
	assert any(error["loc"][-1] == "nameHindi" for error in body["errors"])


@pytest.mark.asyncio
async def test_create_crop_rejects_malformed_care_instructions(client: AsyncClient) -> None:
	response = await client.post(
		"/api/crops",
		json=_crop_payload(careInstructions={"hindi": ["not", "text"], "english": "ok"}),
	)

	assert response.status_code == 400
	assert any("careInstructions" in error["loc"] for error in response.json()["errors"])


@pytest.mark.asyncio
async def test_create_crop_accepts_snake_case_keys(
	client: AsyncClient,
	memory_storage: object,
) -> None:
	response = await client.post(
		"/api/crops",
		json={"name_hindi": "मक्का", "name_english": "Maize", "category": "kharif"},
	)

	assert response.status_code == 201
	body = response.json()
	assert body["nameHindi"] == "मक्का"
	assert body["scientificName"] is None


@pytest.mark.asyncio
async def test_update_crop_applies_only_sent_fields(
	client: AsyncClient,
	memory_storage: object,
) -> None:
	created = await client.post("/api/crops", json=_crop_payload())
	crop_id = created.json()["id"]

	response = await client.put(f"/api/crops/{crop_id}", json={"temperature": "18-24°C"})

	assert response.status_code == 200
	body = response.json()
	assert body["temperature"] == "18-24°C"
	assert body["nameEnglish"] == "Wheat"
	assert body["careInstructions"] == {"hindi": "हल्की सिंचाई करें", "english": "Irrigate lightly"}


@pytest.mark.asyncio
async def test_update_unknown_crop_is_404(
	client: AsyncClient,
	memory_storage: object,
) -> None:
	response = await client.put(f"/api/crops/{uuid4()}", json={"category": "rabi"})

	assert response.status_code == 404
	assert response.json() == {"message": "Crop not found"}


@pytest.mark.asyncio
async def test_update_crop_cannot_null_required_name(client: AsyncClient) -> None:
	response = await client.put(f"/api/crops/{uuid4()}", json={"nameHindi": None})

	assert response.status_code == 400
	assert any(error["loc"][-1] == "nameHindi" for error in response.json()["errors"])


@pytest.mark.asyncio
async def test_crop_with_no_diseases_lists_empty(
	client: AsyncClient,
	memory_storage: object,
) -> None:
	created = await client.post("/api/crops", json=_crop_payload())

	response = await client.get(f"/api/crops/{created.json()['id']}/diseases")

	assert response.status_code == 200
	assert response.json() == []


@pytest.mark.asyncio
async def test_list_crops_storage_failure_is_generic_500(
	client: AsyncClient,
	monkeypatch: pytest.MonkeyPatch,
) -> None:
	async def failing_list(self: DatabaseStorage) -> list[object]:
		raise ConnectionError("connection refused: db.internal:5432")

	monkeypatch.setattr(DatabaseStorage, "list_crops", failing_list)

	response = await client.get("/api/crops")

	assert response.status_code == 500
	assert response.json() == {"message": "Failed to fetch crops"}


@pytest.mark.asyncio
async def test_get_crop_serializes_camel_case(
	client: AsyncClient,
	monkeypatch: pytest.MonkeyPatch,
) -> None:
	crop = _crop_obj(care_instructions={"hindi": "पानी दें", "english": "Water well"})

	async def fake_get(self: DatabaseStorage, _crop_id: object) -> SimpleNamespace:
		return crop

	monkeypatch.setattr(DatabaseStorage, "get_crop", fake_get)

	response = await client.get(f"/api/crops/{crop.id}")

	assert response.status_code == 200
	body = response.json()
	assert body["nameEnglish"] == "Rice"
	assert body["waterRequirement"] == "1200-1500 मिमी"
	assert body["careInstructions"]["english"] == "Water well"
	assert "name_english" not in body


@pytest.mark.asyncio
async def test_non_uuid_crop_id_reads_as_absent(
	client: AsyncClient,
	memory_storage: object,
) -> None:
	fetched = await client.get("/api/crops/abc")
	assert fetched.status_code == 404
	assert fetched.json() == {"message": "Crop not found"}

	updated = await client.put("/api/crops/abc", json={"category": "rabi"})
	assert updated.status_code == 404

	diseases = await client.get("/api/crops/abc/diseases")
	assert diseases.status_code == 200
	assert diseases.json() == []

	feedback = await client.get("/api/crops/abc/feedback")
	assert feedback.status_code == 200
	assert feedback.json() == []


@pytest.mark.asyncio
async def test_delete_non_uuid_crop_id_is_silent(
	client: AsyncClient,
	monkeypatch: pytest.MonkeyPatch,
) -> None:
	calls: list[object] = []

	async def fake_delete(self: DatabaseStorage, crop_id: object) -> None:
		calls.append(crop_id)

	monkeypatch.setattr(DatabaseStorage, "delete_crop", fake_delete)

	response = await client.delete("/api/crops/abc")

	assert response.status_code == 204
	assert calls == []
