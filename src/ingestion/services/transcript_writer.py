from __future__ import annotations

import logging
import uuid
from collections.abc import AsyncIterator, Iterable
from contextlib import asynccontextmanager

from asyncpg.exceptions import PostgresError
from sqlalchemy import insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine

from ingestion.config import get_atomic_writes
from ingestion.models import database
from ingestion.models.combined_recognized_phrase import CombinedRecognizedPhrase
from ingestion.models.nbest import NBest
from ingestion.models.recognized_phrase import RecognizedPhrase
from ingestion.models.transcription import Transcription
from ingestion.models.word import Word
from ingestion.schemas import speech_transcript as schema

logger = logging.getLogger(__name__)


def _group_by_channel(
    phrases: Iterable[schema.RecognizedPhrase],
) -> dict[int, list[schema.RecognizedPhrase]]:
    grouped: dict[int, list[schema.RecognizedPhrase]] = {}
    for phrase in phrases:
        grouped.setdefault(phrase.channel, []).append(phrase)
    return grouped


def _sentiment(sentiment: schema.Sentiment | None) -> schema.Sentiment:
    if sentiment is None:
        return schema.Sentiment()
    return schema.Sentiment(
        negative=sentiment.negative or 0.0,
        neutral=sentiment.neutral or 0.0,
        positive=sentiment.positive or 0.0,
    )


class TranscriptWriter:
    """Writes a speech transcript into the five transcription tables.

    Rows are inserted depth-first, parent before child. A negative affected
    row count abandons the branch below that row and is only logged, so
    ``write`` still returns True. Backend errors are logged and reported as
    False. With ``atomic`` the cascade runs in one transaction, otherwise
    every insert is committed on its own and a failure leaves the rows
    written so far in place.
    """

    def __init__(self, engine: AsyncEngine, *, atomic: bool = False) -> None:
        self.engine = engine
        self.atomic = atomic

    @classmethod
    def from_env(cls) -> "TranscriptWriter":
        return cls(database.engine, atomic=get_atomic_writes())

    async def write(
        self,
        transcription_id: uuid.UUID,
        locale: str,
        file_name: str,
        approximate_cost: float,
        speech_transcript: schema.SpeechTranscript,
    ) -> bool:
        if speech_transcript is None:
            raise ValueError("speech_transcript is required")

        try:
            async with self._connect() as connection:
                await self._store_transcription(
                    connection,
                    transcription_id=transcription_id,
                    locale=locale,
                    file_name=file_name,
                    approximate_cost=approximate_cost,
                    speech_transcript=speech_transcript,
                )
        except (SQLAlchemyError, OSError, PostgresError) as exc:
            logger.warning("Failed to store transcription %s: %s", transcription_id, exc)
            return False

        return True

    @asynccontextmanager
    async def _connect(self) -> AsyncIterator[AsyncConnection]:
        if self.atomic:
            async with self.engine.begin() as connection:
                yield connection
            return

        async with self.engine.connect() as connection:
            yield await connection.execution_options(isolation_level="AUTOCOMMIT")

    async def _store_transcription(
        self,
        connection: AsyncConnection,
        *,
        transcription_id: uuid.UUID,
        locale: str,
        file_name: str,
        approximate_cost: float,
        speech_transcript: schema.SpeechTranscript,
    ) -> None:
        statement = insert(Transcription).values(
            {
                Transcription.id: transcription_id,
                Transcription.locale: locale,
                Transcription.name: file_name,
                Transcription.source: speech_transcript.source,
                Transcription.timestamp: speech_transcript.timestamp,
                Transcription.duration: speech_transcript.duration or "",
                Transcription.duration_in_seconds: speech_transcript.duration_in_seconds,
                Transcription.number_of_channels: len(
                    speech_transcript.combined_recognized_phrases
                ),
                Transcription.approximate_cost: approximate_cost,
            }
        )
        result = await connection.execute(statement)
        if result.rowcount < 0:
            logger.info(
                "Did not store transcription %s, command did not update table",
                transcription_id,
            )
            return

        phrases_by_channel = _group_by_channel(speech_transcript.recognized_phrases)
        for channel, phrases in phrases_by_channel.items():
            await self._store_combined_recognized_phrase(
                connection, transcription_id, channel, speech_transcript, phrases
            )
        logger.info(
            "Stored transcription %s with %d channel(s)",
            transcription_id,
            len(phrases_by_channel),
        )

    async def _store_combined_recognized_phrase(
        self,
        connection: AsyncConnection,
        transcription_id: uuid.UUID,
        channel: int,
        speech_transcript: schema.SpeechTranscript,
        recognized_phrases: list[schema.RecognizedPhrase],
    ) -> None:
        combined_phrase_id = uuid.uuid4()
        combined = next(
            (
                phrase
                for phrase in speech_transcript.combined_recognized_phrases
                if phrase.channel == channel
            ),
            None,
        )
        # Channels without a combined record still get a row, with empty text.
        if combined is None:
            combined = schema.CombinedRecognizedPhrase(channel=channel)
        sentiment = _sentiment(combined.sentiment)

        statement = insert(CombinedRecognizedPhrase).values(
            {
                CombinedRecognizedPhrase.id: combined_phrase_id,
                CombinedRecognizedPhrase.transcription_id: transcription_id,
                CombinedRecognizedPhrase.channel: channel,
                CombinedRecognizedPhrase.lexical: combined.lexical or "",
                CombinedRecognizedPhrase.itn: combined.itn or "",
                CombinedRecognizedPhrase.masked_itn: combined.masked_itn or "",
                CombinedRecognizedPhrase.display: combined.display or "",
                CombinedRecognizedPhrase.sentiment_positive: sentiment.positive,
                CombinedRecognizedPhrase.sentiment_neutral: sentiment.neutral,
                CombinedRecognizedPhrase.sentiment_negative: sentiment.negative,
            }
        )
        result = await connection.execute(statement)
        if result.rowcount < 0:
            logger.info(
                "Did not store combined phrase for channel %s, command did not update table",
                channel,
            )
            return

        previous_end_in_ms = 0.0
        for phrase in sorted(recognized_phrases, key=lambda p: p.offset_in_ticks):
            silence_in_ms = max(0.0, phrase.offset_in_ms - previous_end_in_ms)
            await self._store_recognized_phrase(
                connection, combined_phrase_id, phrase, silence_in_ms
            )
            previous_end_in_ms = phrase.offset_in_ms + phrase.duration_in_ms

    async def _store_recognized_phrase(
        self,
        connection: AsyncConnection,
        combined_phrase_id: uuid.UUID,
        recognized_phrase: schema.RecognizedPhrase,
        silence_in_ms: float,
    ) -> None:
        phrase_id = uuid.uuid4()
        statement = insert(RecognizedPhrase).values(
            {
                RecognizedPhrase.id: phrase_id,
                RecognizedPhrase.combined_recognized_phrase_id: combined_phrase_id,
                RecognizedPhrase.recognition_status: recognized_phrase.recognition_status,
                RecognizedPhrase.speaker: recognized_phrase.speaker,
                RecognizedPhrase.channel: recognized_phrase.channel,
                RecognizedPhrase.offset: recognized_phrase.offset,
                RecognizedPhrase.duration: recognized_phrase.duration,
                RecognizedPhrase.silence_between_current_and_previous_segment_in_ms: silence_in_ms,
            }
        )
        result = await connection.execute(statement)
        if result.rowcount < 0:
            logger.info("Did not store phrase, command did not update table")
            return

        for nbest in recognized_phrase.n_best:
            await self._store_nbest(connection, phrase_id, nbest)

    async def _store_nbest(
        self,
        connection: AsyncConnection,
        recognized_phrase_id: uuid.UUID,
        nbest: schema.NBest,
    ) -> None:
        nbest_id = uuid.uuid4()
        sentiment = _sentiment(nbest.sentiment)
        statement = insert(NBest).values(
            {
                NBest.id: nbest_id,
                NBest.recognized_phrase_id: recognized_phrase_id,
                NBest.confidence: nbest.confidence,
                NBest.lexical: nbest.lexical,
                NBest.itn: nbest.itn,
                NBest.masked_itn: nbest.masked_itn,
                NBest.display: nbest.display,
                NBest.sentiment_negative: sentiment.negative,
                NBest.sentiment_neutral: sentiment.neutral,
                NBest.sentiment_positive: sentiment.positive,
            }
        )
        result = await connection.execute(statement)
        if result.rowcount < 0:
            logger.info("Did not store nbest, command did not update table")
            return

        if nbest.words is None:
            return
        for word in nbest.words:
            await self._store_word(connection, nbest_id, word)

    async def _store_word(
        self,
        connection: AsyncConnection,
        nbest_id: uuid.UUID,
        word: schema.Words,
    ) -> None:
        statement = insert(Word).values(
            {
                Word.id: uuid.uuid4(),
                Word.nbest_id: nbest_id,
                Word.word: word.word,
                Word.offset: word.offset,
                Word.duration: word.duration,
                Word.confidence: word.confidence,
            }
        )
        result = await connection.execute(statement)
        if result.rowcount < 0:
            logger.info("Did not store word, command did not update table")
