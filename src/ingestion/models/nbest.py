from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import Float, ForeignKey, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ingestion.models.database import Base

if TYPE_CHECKING:
    from ingestion.models.recognized_phrase import RecognizedPhrase
    from ingestion.models.word import Word


class NBest(Base):
    __tablename__ = "NBests"

    id: Mapped[uuid.UUID] = mapped_column("ID", Uuid, primary_key=True)
    recognized_phrase_id: Mapped[uuid.UUID] = mapped_column(
        "RecognizedPhraseID",
        Uuid,
        ForeignKey("RecognizedPhrases.ID", ondelete="CASCADE"),
        index=True,
    )
    confidence: Mapped[float] = mapped_column("Confidence", Float)
    lexical: Mapped[str | None] = mapped_column("Lexical", Text, nullable=True)
    itn: Mapped[str | None] = mapped_column("Itn", Text, nullable=True)
    masked_itn: Mapped[str | None] = mapped_column("MaskedItn", Text, nullable=True)
    display: Mapped[str | None] = mapped_column("Display", Text, nullable=True)
    sentiment_negative: Mapped[float] = mapped_column("SentimentNegative", Float)
    sentiment_neutral: Mapped[float] = mapped_column("SentimentNeutral", Float)
    sentiment_positive: Mapped[float] = mapped_column("SentimentPositive", Float)

    recognized_phrase: Mapped[RecognizedPhrase] = relationship(back_populates="nbests")
    words: Mapped[list[Word]] = relationship(
        back_populates="nbest",
        passive_deletes=True,
    )
