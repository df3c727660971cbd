from __future__ import annotations

import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession
from sqlalchemy.orm import selectinload

from ingestion.models.combined_recognized_phrase import CombinedRecognizedPhrase
from ingestion.models.nbest import NBest
from ingestion.models.recognized_phrase import RecognizedPhrase
from ingestion.models.transcription import Transcription


async def load_transcription(
    engine: AsyncEngine, transcription_id: uuid.UUID
) -> Transcription | None:
    """Load a stored transcription with every child row attached."""
    statement = (
        select(Transcription)
        .where(Transcription.id == transcription_id)
        .options(
            selectinload(Transcription.combined_recognized_phrases)
            .selectinload(CombinedRecognizedPhrase.recognized_phrases)
            .selectinload(RecognizedPhrase.nbests)
            .selectinload(NBest.words)
        )
    )
    async with AsyncSession(engine, expire_on_commit=False) as session:
        return (await session.execute(statement)).scalar_one_or_none()


def summarize_transcription(transcription: Transcription) -> dict[str, object]:
    phrases = [
        phrase
        for combined in transcription.combined_recognized_phrases
        for phrase in combined.recognized_phrases
    ]
    words = [word for phrase in phrases for nbest in phrase.nbests for word in nbest.words]
    return {
        "id": str(transcription.id),
        "locale": transcription.locale,
        "name": transcription.name,
        "duration_in_seconds": transcription.duration_in_seconds,
        "number_of_channels": transcription.number_of_channels,
        "channels": sorted(
            combined.channel for combined in transcription.combined_recognized_phrases
        ),
        "recognized_phrases": len(phrases),
        "words": len(words),
        "approximate_cost": transcription.approximate_cost,
    }
