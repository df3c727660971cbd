from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import Float, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ingestion.models.database import Base

if TYPE_CHECKING:
    from ingestion.models.combined_recognized_phrase import CombinedRecognizedPhrase


class Transcription(Base):
    __tablename__ = "Transcriptions"

    id: Mapped[uuid.UUID] = mapped_column("ID", Uuid, primary_key=True)
    locale: Mapped[str] = mapped_column("Locale", String(255))
    name: Mapped[str] = mapped_column("Name", String(500))
    source: Mapped[str | None] = mapped_column("Source", String(500), nullable=True)
    timestamp: Mapped[str | None] = mapped_column("Timestamp", String(255), nullable=True)
    duration: Mapped[str] = mapped_column("Duration", String(255))
    duration_in_seconds: Mapped[float] = mapped_column("DurationInSeconds", Float)
    number_of_channels: Mapped[int] = mapped_column("NumberOfChannels", Integer)
    approximate_cost: Mapped[float] = mapped_column("ApproximateCost", Float)

    combined_recognized_phrases: Mapped[list[CombinedRecognizedPhrase]] = relationship(
        back_populates="transcription",
        passive_deletes=True,
    )
