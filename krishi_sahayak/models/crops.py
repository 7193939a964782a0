"""Crop and Disease ORM models — the bilingual agronomic reference tables.

Bilingual JSONB columns have a fixed shape, validated at the API boundary
(see ``krishi_sahayak.schemas.common``)::

    care_instructions: {"hindi": "...", "english": "..."}
    symptoms / causes / treatment / prevention:
        {"hindi": ["...", ...], "english": ["...", ...]}

``category``, ``severity`` and ``type`` are free text, not database enums.
"""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING, Any

from sqlalchemy import ForeignKey, Text
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from krishi_sahayak.models.base import Base, CreatedAtMixin, UUIDPrimaryKeyMixin

if TYPE_CHECKING:
    from krishi_sahayak.models.feedback import Feedback


class Crop(Base, UUIDPrimaryKeyMixin, CreatedAtMixin):
    """A crop with sowing/climate facts and bilingual care instructions."""

    __tablename__ = "crops"

    name_hindi: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    name_english: Mapped[str] = mapped_column(Text, nullable=False)
    scientific_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    category: Mapped[str | None] = mapped_column(Text, nullable=True)
    sowing_time: Mapped[str | None] = mapped_column(Text, nullable=True)
    temperature: Mapped[str | None] = mapped_column(Text, nullable=True)
    water_requirement: Mapped[str | None] = mapped_column(Text, nullable=True)
    care_instructions: Mapped[dict[str, Any] | None] = mapped_column(
        JSONB, nullable=True
    )
    image_url: Mapped[str | None] = mapped_column(Text, nullable=True)

    # ── Relationships ────────────────────────────────────────────────────
    diseases: Mapped[list[Disease]] = relationship(
        back_populates="crop",
        passive_deletes=True,
    )
    feedback: Mapped[list[Feedback]] = relationship(
        back_populates="crop",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Crop id={self.id} name={self.name_english!r}>"


class Disease(Base, UUIDPrimaryKeyMixin, CreatedAtMixin):
    """A crop disease or pest with bilingual diagnosis and treatment lists.

    ``crop_id`` is ``ON DELETE SET NULL``: deleting a crop leaves its
    diseases in place with no crop reference.
    """

    __tablename__ = "diseases"

    crop_id: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("crops.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    name_hindi: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    name_english: Mapped[str] = mapped_column(Text, nullable=False)
    scientific_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    severity: Mapped[str | None] = mapped_column(Text, nullable=True)
    type: Mapped[str | None] = mapped_column(Text, nullable=True)
    symptoms: Mapped[dict[str, Any] | None] = mapped_column(JSONB, nullable=True)
    causes: Mapped[dict[str, Any] | None] = mapped_column(JSONB, nullable=True)
    treatment: Mapped[dict[str, Any] | None] = mapped_column(JSONB, nullable=True)
    prevention: Mapped[dict[str, Any] | None] = mapped_column(JSONB, nullable=True)
    images: Mapped[list[str] | None] = mapped_column(JSONB, nullable=True)

    # ── Relationships ────────────────────────────────────────────────────
    crop: Mapped[Crop | None] = relationship(back_populates="diseases")
    feedback: Mapped[list[Feedback]] = relationship(
        back_populates="disease",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return (
            f"<Disease id={self.id} name={self.name_english!r} "
            f"crop={self.crop_id}>"
        )
