"""Populate the crops and diseases tables with the bilingual demo dataset.

Usage::

    python -m scripts.seed_db

Inserts six crops in one batch, then one disease per crop in a second batch
(a specific profile where one exists, a generic fallback otherwise).  Runs in
a single session; any failure rolls back and exits with status 1.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Protocol

from krishi_sahayak.database import async_session_factory, engine
from krishi_sahayak.schemas.crops import CropCreate
from krishi_sahayak.schemas.diseases import DiseaseCreate
from krishi_sahayak.services.storage import DatabaseStorage, Storage

logger = logging.getLogger("krishi_sahayak.seed")

_CROPS: list[dict[str, Any]] = [
	{
		"name_hindi": "गेहूं",
		"name_english": "Wheat",
		"scientific_name": "Triticum aestivum",
		"category": "rabi",
		"sowing_time": "नवंबर-दिसंबर",
		"temperature": "15-25°C",
		"water_requirement": "400-500 मिमी",
		"image_url": "https://images.unsplash.com/photo-1574323347407-f5e1ad6d020b",
	},
	{
		"name_hindi": "चावल",
		"name_english": "Rice",
		"scientific_name": "Oryza sativa",
		"category": "kharif",
		"sowing_time": "जून-जुलाई",
		"temperature": "20-30°C",
		"water_requirement": "1200-1500 मिमी",
		"image_url": "https://images.unsplash.com/photo-1536431311719-398b6704d4cc",
	},
	{
		"name_hindi": "गन्ना",
		"name_english": "Sugarcane",
		"scientific_name": "Saccharum officinarum",
		"category": "cash_crop",
		"sowing_time": "अक्टूबर-नवंबर",
		"temperature": "20-35°C",
		"water_requirement": "1500-2000 मिमी",
		"image_url": "https://images.unsplash.com/photo-1560493676-04071c5f467b",
	},
	{
		"name_hindi": "कपास",
		"name_english": "Cotton",
		"scientific_name": "Gossypium hirsutum",
		"category": "kharif",
		"sowing_time": "अप्रैल-मई",
		"temperature": "21-27°C",
		"water_requirement": "500-800 मिमी",
		"image_url": "https://images.unsplash.com/photo-1578662996442-48f60103fc96",
	},
	{
		"name_hindi": "मक्का",
		"name_english": "Maize",
		"scientific_name": "Zea mays",
		"category": "kharif",
		"sowing_time": "जून-जुलाई",
		"temperature": "20-30°C",
		"water_requirement": "500-800 मिमी",
		"image_url": "https://images.unsplash.com/photo-1605000797499-95a51c5269ae",
	},
	{
		"name_hindi": "सोयाबीन",
		"name_english": "Soybean",
		"scientific_name": "Glycine max",
		"category": "kharif",
		"sowing_time": "जून-जुलाई",
		"temperature": "20-30°C",
		"water_requirement": "450-700 मिमी",
		"image_url": "https://images.unsplash.com/photo-1500651230702-0e2d8a49d4ad",
	},
]

# Keyed by English crop name.
_DISEASE_PROFILES: dict[str, dict[str, Any]] = {
	"Wheat": {
		"name_hindi": "गेहूं का रतुआ",
		"name_english": "Wheat Rust",
		"scientific_name": "Puccinia triticina",
		"severity": "medium",
		"type": "fungal",
		"symptoms": {
			"hindi": [
				"पत्तियों पर नारंगी-भूरे रंग के छोटे धब्बे",
				"धब्बे धीरे-धीरे बड़े होते जाते हैं",
				"पत्तियां पीली पड़कर सूखने लगती हैं",
			],
			"english": [
				"Small orange-brown spots on leaves",
				"Spots gradually increase in size",
				"Leaves turn yellow and dry up",
			],
		},
		"treatment": {
			"hindi": [
				"प्रोपिकोनाज़ोल का छिड़काव करें",
				"संक्रमित पत्तियों को हटाएं",
				"10-15 दिन बाद दोबारा छिड़काव",
			],
			"english": [
				"Spray propiconazole",
				"Remove infected leaves",
				"Repeat spray after 10-15 days",
			],
		},
	},
	"Rice": {
		"name_hindi": "धान का झुलसा रोग",
		"name_english": "Rice Blast",
		"scientific_name": "Magnaporthe oryzae",
		"severity": "high",
		"type": "fungal",
		"symptoms": {
			"hindi": [
				"पत्तियों पर भूरे धब्बे",
				"धब्बों के चारों ओर पीला किनारा",
				"बाली में दाने काले पड़ जाते हैं",
			],
			"english": [
				"Brown spots on leaves",
				"Yellow margins around spots",
				"Grains turn black in panicles",
			],
		},
		"treatment": {
			"hindi": [
				"ट्राइसाइक्लाजोल का छिड़काव",
				"पानी की मात्रा नियंत्रित करें",
				"प्रतिरोधी किस्म का चुनाव",
			],
			"english": [
				"Spray tricyclazole",
				"Control water levels",
				"Choose resistant varieties",
			],
		},
	},
	"Cotton": {
		"name_hindi": "कपास का बॉलवर्म",
		"name_english": "Bollworm",
		"scientific_name": "Helicoverpa armigera",
		"severity": "high",
		"type": "pest",
		"symptoms": {
			"hindi": ["फूलों और फलियों में छेद", "कीट दिखाई देना", "पत्तियों का कटना"],
			"english": ["Holes in flowers and bolls", "Visible larvae", "Leaf cutting damage"],
		},
		"treatment": {
			"hindi": ["बीटी कपास का उपयोग करें", "नीम का तेल छिड़कें", "हाथ से कीट पकड़कर नष्ट करें"],
			"english": ["Use Bt cotton", "Spray neem oil", "Hand pick and destroy larvae"],
		},
	},
	"Maize": {
		"name_hindi": "मक्का का पत्ती झुलसा",
		"name_english": "Leaf Blight",
		"scientific_name": "Bipolaris maydis",
		"severity": "medium",
		"type": "fungal",
		"symptoms": {
			"hindi": ["पत्तियों पर लंबे धब्बे", "धब्बे भूरे से काले रंग के", "पौधे की वृद्धि रुकना"],
			"english": ["Long spots on leaves", "Brown to black colored spots", "Stunted plant growth"],
		},
		"treatment": {
			"hindi": ["मैंकोजेब का छिड़काव", "संक्रमित पत्तियों को हटाएं", "फसल चक्र अपनाएं"],
			"english": ["Spray mancozeb", "Remove infected leaves", "Follow crop rotation"],
		},
	},
}

_SHARED_CAUSES = {
	"hindi": ["अधिक नमी", "गर्म मौसम", "खराब जल निकासी"],
	"english": ["High humidity", "Warm weather", "Poor drainage"],
}
_SHARED_PREVENTION = {
	"hindi": ["प्रतिरोधी किस्मों का चुनाव", "उचित फसल चक्र", "खेत की सफाई"],
	"english": ["Choose resistant varieties", "Proper crop rotation", "Field sanitation"],
}
_SHARED_IMAGES = [
	"https://images.unsplash.com/photo-1628126235206-5260b9ea6441",
	"https://images.unsplash.com/photo-1530836369250-ef72a3f5cda8",
	"https://images.unsplash.com/photo-1595576508898-0ad5c879a061",
]


class _SeededCrop(Protocol):
	id: Any
	name_hindi: str
	name_english: str


@dataclass(slots=True)
class SeedSummary:
	crops: int
	diseases: int


def _crop_payloads() -> list[CropCreate]:
	return [CropCreate(**crop) for crop in _CROPS]


def _fallback_profile(crop: _SeededCrop) -> dict[str, Any]:
	return {
		"name_hindi": f"{crop.name_hindi} का सामान्य रोग",
		"name_english": f"{crop.name_english} Common Disease",
		"scientific_name": "Various pathogens",
		"severity": "low",
		"type": "fungal",
		"symptoms": {
			"hindi": ["पत्तियों पर धब्बे", "पीले या भूरे निशान", "पौधे की वृद्धि रुकना"],
			"english": ["Spots on leaves", "Yellow or brown marks", "Stunted plant growth"],
		},
		"treatment": {
			"hindi": ["फफूंदनाशी का छिड़काव", "संक्रमित भागों को हटाएं", "उचित देखभाल करें"],
			"english": ["Apply fungicide", "Remove infected parts", "Proper crop care"],
		},
	}


def _build_disease_payloads(crops: Sequence[_SeededCrop]) -> list[DiseaseCreate]:
	payloads: list[DiseaseCreate] = []
	for crop in crops:
		profile = _DISEASE_PROFILES.get(crop.name_english) or _fallback_profile(crop)
		payloads.append(
			DiseaseCreate(
				crop_id=crop.id,
				causes=_SHARED_CAUSES,
				prevention=_SHARED_PREVENTION,
				images=list(_SHARED_IMAGES),
				**profile,
			)
		)
	return payloads


async def seed(storage: Storage) -> SeedSummary:
	crops = await storage.bulk_create_crops(_crop_payloads())
	logger.info("Inserted %d crops", len(crops))

	diseases = await storage.bulk_create_diseases(_build_disease_payloads(crops))
	logger.info("Inserted %d diseases", len(diseases))

	return SeedSummary(crops=len(crops), diseases=len(diseases))


async def _run() -> SeedSummary:
	try:
		async with async_session_factory() as session:
			summary = await seed(DatabaseStorage(session))
			await session.commit()
		return summary
	finally:
		await engine.dispose()


def main() -> int:
	logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s %(message)s")
	logger.info("Starting database seeding")
	try:
		summary = asyncio.run(_run())
	except Exception:
		logger.exception("Seeding failed")
		return 1
	logger.info("Seeding completed: crops=%d diseases=%d", summary.crops, summary.diseases)
	return 0


if __name__ == "__main__":
	sys.exit(main())
