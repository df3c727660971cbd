from __future__ import annotations

import uuid

from fastapi import HTTPException
from pydantic import BaseModel, Field

from ingestion.models import database
from ingestion.schemas.speech_transcript import SpeechTranscript
from ingestion.services.transcript_reader import load_transcription, summarize_transcription
from ingestion.services.transcript_writer import TranscriptWriter


class StoreTranscriptionRequest(BaseModel):
    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    locale: str
    file_name: str
    approximate_cost: float = 0.0
    transcript: SpeechTranscript


async def store_transcription(request: StoreTranscriptionRequest) -> dict[str, object]:
    writer = TranscriptWriter.from_env()
    stored = await writer.write(
        request.id,
        request.locale,
        request.file_name,
        request.approximate_cost,
        request.transcript,
    )
    if not stored:
        raise HTTPException(status_code=502, detail="Failed to store transcription")
    return {"id": str(request.id), "stored": stored}


async def get_transcription_summary(transcription_id: uuid.UUID) -> dict[str, object]:
    transcription = await load_transcription(database.engine, transcription_id)
    if transcription is None:
        raise HTTPException(status_code=404, detail="Transcription not found")
    return summarize_transcription(transcription)
