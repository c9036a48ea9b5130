"""
Bugboard Backend — Bug SQLAlchemy Model
=========================================

What:  ORM model representing the `bugs` table.
Who:   Used by SQLAlchemyDocumentStore for the "bugs" collection.

Notes:
    - status is constrained to the three tracker states at write time by
      the validator (create) and the update path (invalid values ignored)
    - reporter is the caller identity at creation time, or NULL when the
      bug was reported anonymously. It does not gate any operation.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, text
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Bug(Base):
    """A bug report."""

    __tablename__ = "bugs"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        server_default=text("gen_random_uuid()"),
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="open",
        server_default=text("'open'"),
        comment="open, in-progress, resolved",
    )
    reporter: Mapped[str | None] = mapped_column(String(64), nullable=True, default=None)
    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )
    updated_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    def __repr__(self) -> str:
        return f"<Bug(id={self.id}, status='{self.status}')>"
