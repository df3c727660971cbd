from ingestion.models.combined_recognized_phrase import CombinedRecognizedPhrase
from ingestion.models.nbest import NBest
from ingestion.models.recognized_phrase import RecognizedPhrase
from ingestion.models.transcription import Transcription
from ingestion.models.word import Word

__all__ = [
    "CombinedRecognizedPhrase",
    "NBest",
    "RecognizedPhrase",
    "Transcription",
    "Word",
]
