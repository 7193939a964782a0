"""User ORM model — identities verified by phone number + one-time code."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import String, Text, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from krishi_sahayak.models.base import Base, CreatedAtMixin, UUIDPrimaryKeyMixin

if TYPE_CHECKING:
    from krishi_sahayak.models.feedback import Feedback


class User(Base, UUIDPrimaryKeyMixin, CreatedAtMixin):
    """Application user. ``is_admin`` gates crop/disease writes."""

    __tablename__ = "users"

    phone_number: Mapped[str] = mapped_column(
        String(15), unique=True, nullable=False, index=True
    )
    name: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_admin: Mapped[bool] = mapped_column(
        default=False,
        server_default=text("false"),
        nullable=False,
    )

    # ── Relationships ────────────────────────────────────────────────────
    feedback: Mapped[list[Feedback]] = relationship(
        back_populates="user",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<User id={self.id} phone={self.phone_number!r} admin={self.is_admin}>"
