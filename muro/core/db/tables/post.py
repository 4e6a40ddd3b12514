from sqlalchemy import String, Integer, DateTime, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column
from datetime import datetime, timezone

from muro.core.db.tables.base import Base


class Post(Base):
    """Text post with optional image and a like counter"""

    __tablename__ = "posts"
    __table_args__ = (
        CheckConstraint("likes_count >= 0", name="ck_posts_likes_count_floor"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    nombre: Mapped[str | None] = mapped_column(String(256), nullable=True)
    contenido: Mapped[str | None] = mapped_column(String(4096), nullable=True)
    autor_id: Mapped[int | None] = mapped_column(Integer, nullable=True, index=True)
    imagen_url: Mapped[str | None] = mapped_column(String(512), nullable=True)
    likes_count: Mapped[int] = mapped_column(Integer, default=0, server_default="0")

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc)
    )
