import logging

from fastapi import FastAPI
from sqlalchemy.exc import OperationalError

from ingestion.api.api import router as api_router
from ingestion.models import database

app = FastAPI(title="Transcription Ingestion API")
app.include_router(api_router, prefix="/api/v1", tags=["transcriptions"])


@app.on_event("startup")
async def on_startup() -> None:
    try:
        await database.create_all(database.engine)
    except (OperationalError, OSError):
        logging.getLogger(__name__).warning(
            "Database connection failed during startup. "
            "Start Postgres or check .env settings."
        )
