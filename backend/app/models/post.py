"""
Bugboard Backend — Post SQLAlchemy Model
==========================================

What:  ORM model representing the `posts` table.
Who:   Used by SQLAlchemyDocumentStore for the "posts" collection and by
       Alembic for schema management.

Table Design Rationale:
    - UUID primary key: the store-native identifier, serialized as a string
      on the wire (see app.services.normalize)
    - author: opaque caller identifier recorded at creation; immutable, it
      gates update and delete
    - category: optional opaque identifier used as a list filter
    - slug: derived from the title when the client does not send one
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Index, String, Text, text
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Post(Base):
    """
    A blog post.

    Lifecycle:
        1. Created by an identified caller, who becomes the author
        2. Title/content changed only by the author (updated_at bumped)
        3. Deleted only by the author
    """

    __tablename__ = "posts"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        server_default=text("gen_random_uuid()"),
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    author: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        comment="Caller identity that created the post — immutable",
    )
    category: Mapped[str | None] = mapped_column(String(64), nullable=True, default=None)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )
    updated_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    # Listing filters on category and pages in insertion order
    __table_args__ = (
        Index("idx_posts_category", "category"),
        Index("idx_posts_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<Post(id={self.id}, author='{self.author}', slug='{self.slug}')>"
