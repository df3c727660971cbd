from __future__ import annotations

import asyncio
import logging
import uuid

from ingestion.core.celery_app import celery_app
from ingestion.models import database
from ingestion.schemas.speech_transcript import SpeechTranscript
from ingestion.services.transcript_writer import TranscriptWriter

logger = logging.getLogger(__name__)


async def _write(
    transcription_id: uuid.UUID,
    locale: str,
    file_name: str,
    approximate_cost: float,
    speech_transcript: SpeechTranscript,
) -> bool:
    writer = TranscriptWriter.from_env()
    try:
        return await writer.write(
            transcription_id, locale, file_name, approximate_cost, speech_transcript
        )
    finally:
        # Pooled connections belong to the loop asyncio.run is about to close.
        await database.engine.dispose()


@celery_app.task(name="ingestion.tasks.transcription_storage.store_transcription")
def store_transcription(
    transcription_id: str,
    locale: str,
    file_name: str,
    approximate_cost: float,
    transcript: dict[str, object],
) -> dict[str, object]:
    speech_transcript = SpeechTranscript.model_validate(transcript)
    stored = asyncio.run(
        _write(
            uuid.UUID(transcription_id),
            locale,
            file_name,
            approximate_cost,
            speech_transcript,
        )
    )
    if not stored:
        logger.warning("Transcription %s was not stored", transcription_id)
    return {
        "transcription_id": transcription_id,
        "stored": stored,
        "recognized_phrases": len(speech_transcript.recognized_phrases),
    }
