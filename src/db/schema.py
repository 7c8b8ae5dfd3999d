"""Database tables / schema"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import JSON
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class DBGame(Base):
    __tablename__ = "games"
    id: Mapped[str] = mapped_column(primary_key=True)
    variant: Mapped[str]
    initial_fen: Mapped[Optional[str]]
    moves_san: Mapped[list[str]] = mapped_column(JSON, default=list)
    move_times: Mapped[Optional[list[int]]] = mapped_column(JSON, nullable=True)
    # players: {"user_id", "rating", "provisional", "ai_level", "name"}
    white: Mapped[dict] = mapped_column(JSON)
    black: Mapped[dict] = mapped_column(JSON)
    created_at: Mapped[datetime] = mapped_column(default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(default=utc_now, onupdate=utc_now)


class DBUser(Base):
    __tablename__ = "users"
    id: Mapped[str] = mapped_column(primary_key=True)
    username: Mapped[str]
    title: Mapped[Optional[str]]
    created_at: Mapped[datetime] = mapped_column(default=utc_now)
