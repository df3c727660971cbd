from ingestion.schemas.speech_transcript import (
    CombinedRecognizedPhrase,
    NBest,
    RecognizedPhrase,
    Sentiment,
    SpeechTranscript,
    Words,
)

__all__ = [
    "CombinedRecognizedPhrase",
    "NBest",
    "RecognizedPhrase",
    "Sentiment",
    "SpeechTranscript",
    "Words",
]
