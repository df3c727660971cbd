import asyncio
import os
from contextlib import asynccontextmanager
from types import SimpleNamespace

import pytest

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from sqlalchemy.exc import OperationalError  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402
from sqlalchemy.pool import NullPool  # noqa: E402

from ingestion.models.database import create_all  # noqa: E402
from ingestion.schemas.speech_transcript import SpeechTranscript  # noqa: E402

TICKS_PER_MS = 10_000


class RecordingConnection:
    """Stands in for an AsyncConnection and records every executed insert."""

    def __init__(self, rowcounts=None, fail_on=None):
        self.rowcounts = {table: list(counts) for table, counts in (rowcounts or {}).items()}
        self.fail_on = fail_on
        self.tables = []
        self.params = []
        self.options = {}

    async def execution_options(self, **options):
        self.options.update(options)
        return self

    async def execute(self, statement):
        table = statement.table.name
        if table == self.fail_on:
            raise OperationalError("INSERT", {}, Exception("connection lost"))
        self.tables.append(table)
        self.params.append(statement.compile().params)
        pending = self.rowcounts.get(table)
        rowcount = pending.pop(0) if pending else 1
        return SimpleNamespace(rowcount=rowcount)


class RecordingEngine:
    def __init__(self, rowcounts=None, fail_on=None, connect_error=None):
        self.connection = RecordingConnection(rowcounts=rowcounts, fail_on=fail_on)
        self.connect_error = connect_error
        self.opened = 0
        self.closed = 0

    @asynccontextmanager
    async def connect(self):
        self.opened += 1
        if self.connect_error is not None:
            raise self.connect_error
        try:
            yield self.connection
        finally:
            self.closed += 1

    begin = connect


@pytest.fixture
def recording_engine():
    return RecordingEngine


@pytest.fixture
def sqlite_engine(tmp_path):
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'transcriptions.db'}", poolclass=NullPool
    )
    asyncio.run(create_all(engine))
    yield engine
    asyncio.run(engine.dispose())


def phrase(channel, offset_ms, duration_ms, words=("hello",), speaker=1, with_words=True):
    nbest = {
        "confidence": 0.9,
        "lexical": " ".join(words),
        "itn": " ".join(words),
        "maskedITN": " ".join(words),
        "display": " ".join(words).capitalize() + ".",
        "sentiment": {"negative": 0.1, "neutral": 0.7, "positive": 0.2},
    }
    if with_words:
        nbest["words"] = [
            {
                "word": word,
                "offset": f"PT{(offset_ms + index * 10) / 1000}S",
                "duration": "PT0.01S",
                "offsetInTicks": (offset_ms + index * 10) * TICKS_PER_MS,
                "durationInTicks": 10 * TICKS_PER_MS,
                "confidence": 0.8,
            }
            for index, word in enumerate(words)
        ]
    return {
        "recognitionStatus": "Success",
        "channel": channel,
        "speaker": speaker,
        "offset": f"PT{offset_ms / 1000}S",
        "duration": f"PT{duration_ms / 1000}S",
        "offsetInTicks": offset_ms * TICKS_PER_MS,
        "durationInTicks": duration_ms * TICKS_PER_MS,
        "nBest": [nbest],
    }


def transcript_payload(recognized_phrases, combined_channels=(0,)):
    return {
        "source": "https://storage.example.com/audio/call.wav",
        "timestamp": "2026-10-18T09:24:40Z",
        "durationInTicks": 41_200_000,
        "duration": "PT4.12S",
        "combinedRecognizedPhrases": [
            {
                "channel": channel,
                "lexical": f"channel {channel} lexical",
                "itn": f"channel {channel} itn",
                "maskedITN": f"channel {channel} masked",
                "display": f"Channel {channel} display.",
                "sentiment": {"negative": 0.05, "neutral": 0.6, "positive": 0.35},
            }
            for channel in combined_channels
        ],
        "recognizedPhrases": list(recognized_phrases),
    }


@pytest.fixture
def build_transcript():
    def build(recognized_phrases, combined_channels=(0,)):
        return SpeechTranscript.model_validate(
            transcript_payload(recognized_phrases, combined_channels)
        )

    return build


@pytest.fixture
def make_phrase():
    return phrase


@pytest.fixture
def make_payload():
    return transcript_payload
