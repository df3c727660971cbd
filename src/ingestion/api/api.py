from __future__ import annotations

import uuid
from typing import Any

from fastapi import APIRouter

from ingestion.services.services import (
    StoreTranscriptionRequest,
    get_transcription_summary,
    store_transcription,
)

router = APIRouter()


@router.post("/transcriptions", status_code=201)
async def create_transcription(request: StoreTranscriptionRequest) -> dict[str, Any]:
    return await store_transcription(request)


@router.get("/transcriptions/{transcription_id}")
async def read_transcription(transcription_id: uuid.UUID) -> dict[str, Any]:
    return await get_transcription_summary(transcription_id)

