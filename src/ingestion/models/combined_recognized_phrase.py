from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import Float, ForeignKey, Integer, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ingestion.models.database import Base

if TYPE_CHECKING:
    from ingestion.models.recognized_phrase import RecognizedPhrase
    from ingestion.models.transcription import Transcription


class CombinedRecognizedPhrase(Base):
    __tablename__ = "CombinedRecognizedPhrases"

    id: Mapped[uuid.UUID] = mapped_column("ID", Uuid, primary_key=True)
    transcription_id: Mapped[uuid.UUID] = mapped_column(
        "TranscriptionID",
        Uuid,
        ForeignKey("Transcriptions.ID", ondelete="CASCADE"),
        index=True,
    )
    channel: Mapped[int] = mapped_column("Channel", Integer)
    lexical: Mapped[str] = mapped_column("Lexical", Text)
    itn: Mapped[str] = mapped_column("Itn", Text)
    masked_itn: Mapped[str] = mapped_column("MaskedItn", Text)
    display: Mapped[str] = mapped_column("Display", Text)
    sentiment_positive: Mapped[float] = mapped_column("SentimentPositive", Float)
    sentiment_neutral: Mapped[float] = mapped_column("SentimentNeutral", Float)
    sentiment_negative: Mapped[float] = mapped_column("SentimentNegative", Float)

    transcription: Mapped[Transcription] = relationship(
        back_populates="combined_recognized_phrases"
    )
    recognized_phrases: Mapped[list[RecognizedPhrase]] = relationship(
        back_populates="combined_recognized_phrase",
        passive_deletes=True,
    )
