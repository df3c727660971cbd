from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import Float, ForeignKey, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ingestion.models.database import Base

if TYPE_CHECKING:
    from ingestion.models.combined_recognized_phrase import CombinedRecognizedPhrase
    from ingestion.models.nbest import NBest


class RecognizedPhrase(Base):
    __tablename__ = "RecognizedPhrases"

    id: Mapped[uuid.UUID] = mapped_column("ID", Uuid, primary_key=True)
    combined_recognized_phrase_id: Mapped[uuid.UUID] = mapped_column(
        "CombinedRecognizedPhraseID",
        Uuid,
        ForeignKey("CombinedRecognizedPhrases.ID", ondelete="CASCADE"),
        index=True,
    )
    recognition_status: Mapped[str | None] = mapped_column(
        "RecognitionStatus", String(255), nullable=True
    )
    speaker: Mapped[int] = mapped_column("Speaker", Integer)
    channel: Mapped[int] = mapped_column("Channel", Integer)
    offset: Mapped[str | None] = mapped_column("Offset", String(255), nullable=True)
    duration: Mapped[str | None] = mapped_column("Duration", String(255), nullable=True)
    silence_between_current_and_previous_segment_in_ms: Mapped[float] = mapped_column(
        "SilenceBetweenCurrentAndPreviousSegmentInMs", Float
    )

    combined_recognized_phrase: Mapped[CombinedRecognizedPhrase] = relationship(
        back_populates="recognized_phrases"
    )
    nbests: Mapped[list[NBest]] = relationship(
        back_populates="recognized_phrase",
        passive_deletes=True,
    )
