"""ORM model registry — importing this module registers every table on Base.metadata.

Alembic ``env.py`` imports ``Base`` from here (not from ``base.py``) so that
autogenerate sees all tables.  Application code can also do::

    from krishi_sahayak.models import Crop, Disease, Feedback, User
"""

# ── Base & Mixins ───────────────────────────────────────────────────────────
from krishi_sahayak.models.base import Base, CreatedAtMixin, UUIDPrimaryKeyMixin

# ── Reference tables ────────────────────────────────────────────────────────
from krishi_sahayak.models.crops import Crop, Disease

# ── User-submitted ──────────────────────────────────────────────────────────
from krishi_sahayak.models.feedback import Feedback
from krishi_sahayak.models.users import User

__all__ = [
    # Base & mixins
    "Base",
    "CreatedAtMixin",
    "UUIDPrimaryKeyMixin",
    # Reference
    "Crop",
    "Disease",
    # User-submitted
    "Feedback",
    "User",
]
