from __future__ import annotations

from celery import Celery

from ingestion.config import get_celery_broker_url, get_celery_result_backend

celery_app = Celery(
    "transcription_ingestion",
    broker=get_celery_broker_url(),
    backend=get_celery_result_backend(),
    include=["ingestion.tasks.transcription_storage"],
)

celery_app.conf.task_track_started = True
