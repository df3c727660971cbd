from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import Float, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ingestion.models.database import Base

if TYPE_CHECKING:
    from ingestion.models.nbest import NBest


class Word(Base):
    __tablename__ = "Words"

    id: Mapped[uuid.UUID] = mapped_column("ID", Uuid, primary_key=True)
    nbest_id: Mapped[uuid.UUID] = mapped_column(
        "NBestID",
        Uuid,
        ForeignKey("NBests.ID", ondelete="CASCADE"),
        index=True,
    )
    word: Mapped[str | None] = mapped_column("Word", String(500), nullable=True)
    offset: Mapped[str | None] = mapped_column("Offset", String(255), nullable=True)
    duration: Mapped[str | None] = mapped_column("Duration", String(255), nullable=True)
    confidence: Mapped[float] = mapped_column("Confidence", Float)

    nbest: Mapped[NBest] = relationship(back_populates="words")
