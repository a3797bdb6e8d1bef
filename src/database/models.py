"""Database models using SQLAlchemy ORM."""
from typing import Any

from sqlalchemy import JSON, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all database models."""

    pass


class VoteRecordRow(Base):
    """A persisted vote: id, creation timestamp and the ranking it carries."""

    __tablename__ = "vote_records"

    # Insertion order; storage order is defined by this column
    seq: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    record_id: Mapped[str] = mapped_column(String(64), unique=True, nullable=False, index=True)
    created_at: Mapped[str] = mapped_column(String(40), nullable=False)
    ranking: Mapped[list[Any]] = mapped_column(JSON, nullable=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.record_id,
            "createdAt": self.created_at,
            "ranking": self.ranking,
        }

    def __repr__(self) -> str:
        return f"<VoteRecordRow(record_id='{self.record_id}', ranking={self.ranking})>"
