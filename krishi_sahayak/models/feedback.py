"""Feedback ORM model — append-only ratings and comments from farmers."""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Index, Integer, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from krishi_sahayak.models.base import Base, CreatedAtMixin, UUIDPrimaryKeyMixin

if TYPE_CHECKING:
    from krishi_sahayak.models.crops import Crop, Disease
    from krishi_sahayak.models.users import User


class Feedback(Base, UUIDPrimaryKeyMixin, CreatedAtMixin):
    """A rating/comment about a crop, a disease, or the app in general.

    Which reference is set follows ``type``; the API schemas enforce that,
    the table does not. ``rating`` carries no range constraint.
    """

    __tablename__ = "feedback"
    __table_args__ = (
        Index("ix_feedback_created_at", "created_at"),
    )

    user_id: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )
    crop_id: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("crops.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    disease_id: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("diseases.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    name: Mapped[str | None] = mapped_column(Text, nullable=True)
    phone_number: Mapped[str | None] = mapped_column(String(15), nullable=True)
    rating: Mapped[int | None] = mapped_column(Integer, nullable=True)
    comment: Mapped[str | None] = mapped_column(Text, nullable=True)
    type: Mapped[str | None] = mapped_column(String(20), nullable=True)

    # ── Relationships ────────────────────────────────────────────────────
    user: Mapped[User | None] = relationship(back_populates="feedback")
    crop: Mapped[Crop | None] = relationship(back_populates="feedback")
    disease: Mapped[Disease | None] = relationship(back_populates="feedback")

    def __repr__(self) -> str:
        return f"<Feedback id={self.id} type={self.type!r} rating={self.rating}>"
