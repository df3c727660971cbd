"""Batch transcription result models, as returned by the speech-to-text service."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

TICKS_PER_MILLISECOND = 10_000
TICKS_PER_SECOND = 10_000_000


class _ServiceModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class Sentiment(_ServiceModel):
    negative: float | None = 0.0
    neutral: float | None = 0.0
    positive: float | None = 0.0


class Words(_ServiceModel):
    """A single recognized word with its timing inside the audio."""

    word: str = ""
    offset: str = ""
    duration: str = ""
    offset_in_ticks: float = Field(default=0.0, alias="offsetInTicks")
    duration_in_ticks: float = Field(default=0.0, alias="durationInTicks")
    confidence: float = 0.0


class NBest(_ServiceModel):
    """One ranked hypothesis for a recognized phrase."""

    confidence: float = 0.0
    lexical: str = ""
    itn: str = ""
    masked_itn: str = Field(default="", alias="maskedITN")
    display: str = ""
    sentiment: Sentiment | None = None
    words: list[Words] | None = None


class RecognizedPhrase(_ServiceModel):
    """A contiguous speech segment on one channel."""

    recognition_status: str = Field(default="", alias="recognitionStatus")
    channel: int = 0
    speaker: int = 0
    offset: str = ""
    duration: str = ""
    offset_in_ticks: float = Field(default=0.0, alias="offsetInTicks")
    duration_in_ticks: float = Field(default=0.0, alias="durationInTicks")
    n_best: list[NBest] = Field(default_factory=list, alias="nBest")

    @property
    def offset_in_ms(self) -> float:
        return self.offset_in_ticks / TICKS_PER_MILLISECOND

    @property
    def duration_in_ms(self) -> float:
        return self.duration_in_ticks / TICKS_PER_MILLISECOND


class CombinedRecognizedPhrase(_ServiceModel):
    """Text of all recognized phrases on one channel, joined."""

    channel: int = 0
    lexical: str = ""
    itn: str = ""
    masked_itn: str = Field(default="", alias="maskedITN")
    display: str = ""
    sentiment: Sentiment | None = None


class SpeechTranscript(_ServiceModel):
    """Root of a transcription result file."""

    source: str = ""
    timestamp: str = ""
    duration_in_ticks: float = Field(default=0.0, alias="durationInTicks")
    duration: str | None = None
    combined_recognized_phrases: list[CombinedRecognizedPhrase] = Field(
        default_factory=list, alias="combinedRecognizedPhrases"
    )
    recognized_phrases: list[RecognizedPhrase] = Field(
        default_factory=list, alias="recognizedPhrases"
    )

    @property
    def duration_in_seconds(self) -> float:
        return max(0.0, self.duration_in_ticks / TICKS_PER_SECOND)
