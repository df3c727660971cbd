"""create transcription tables

Revision ID: 0001_create_transcription_tables
Revises: 
Create Date: 2026-10-18 00:00:00

"""
from __future__ import annotations

from alembic import op
import sqlalchemy as sa

revision = "0001_create_transcription_tables"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "Transcriptions",
        sa.Column("ID", sa.Uuid(), primary_key=True),
        sa.Column("Locale", sa.String(length=255), nullable=False),
        sa.Column("Name", sa.String(length=500), nullable=False),
        sa.Column("Source", sa.String(length=500), nullable=True),
        sa.Column("Timestamp", sa.String(length=255), nullable=True),
        sa.Column("Duration", sa.String(length=255), nullable=False),
        sa.Column("DurationInSeconds", sa.Float(), nullable=False),
        sa.Column("NumberOfChannels", sa.Integer(), nullable=False),
        sa.Column("ApproximateCost", sa.Float(), nullable=False),
    )

    op.create_table(
        "CombinedRecognizedPhrases",
        sa.Column("ID", sa.Uuid(), primary_key=True),
        sa.Column("TranscriptionID", sa.Uuid(), nullable=False),
        sa.Column("Channel", sa.Integer(), nullable=False),
        sa.Column("Lexical", sa.Text(), nullable=False),
        sa.Column("Itn", sa.Text(), nullable=False),
        sa.Column("MaskedItn", sa.Text(), nullable=False),
        sa.Column("Display", sa.Text(), nullable=False),
        sa.Column("SentimentPositive", sa.Float(), nullable=False),
        sa.Column("SentimentNeutral", sa.Float(), nullable=False),
        sa.Column("SentimentNegative", sa.Float(), nullable=False),
        sa.ForeignKeyConstraint(
            ["TranscriptionID"], ["Transcriptions.ID"], ondelete="CASCADE"
        ),
    )
    op.create_index(
        "ix_CombinedRecognizedPhrases_TranscriptionID",
        "CombinedRecognizedPhrases",
        ["TranscriptionID"],
    )

    op.create_table(
        "RecognizedPhrases",
        sa.Column("ID", sa.Uuid(), primary_key=True),
        sa.Column("CombinedRecognizedPhraseID", sa.Uuid(), nullable=False),
        sa.Column("RecognitionStatus", sa.String(length=255), nullable=True),
        sa.Column("Speaker", sa.Integer(), nullable=False),
        sa.Column("Channel", sa.Integer(), nullable=False),
        sa.Column("Offset", sa.String(length=255), nullable=True),
        sa.Column("Duration", sa.String(length=255), nullable=True),
        sa.Column(
            "SilenceBetweenCurrentAndPreviousSegmentInMs", sa.Float(), nullable=False
        ),
        sa.ForeignKeyConstraint(
            ["CombinedRecognizedPhraseID"],
            ["CombinedRecognizedPhrases.ID"],
            ondelete="CASCADE",
        ),
    )
    op.create_index(
        "ix_RecognizedPhrases_CombinedRecognizedPhraseID",
        "RecognizedPhrases",
        ["CombinedRecognizedPhraseID"],
    )

    op.create_table(
        "NBests",
        sa.Column("ID", sa.Uuid(), primary_key=True),
        sa.Column("RecognizedPhraseID", sa.Uuid(), nullable=False),
        sa.Column("Confidence", sa.Float(), nullable=False),
        sa.Column("Lexical", sa.Text(), nullable=True),
        sa.Column("Itn", sa.Text(), nullable=True),
        sa.Column("MaskedItn", sa.Text(), nullable=True),
        sa.Column("Display", sa.Text(), nullable=True),
        sa.Column("SentimentNegative", sa.Float(), nullable=False),
        sa.Column("SentimentNeutral", sa.Float(), nullable=False),
        sa.Column("SentimentPositive", sa.Float(), nullable=False),
        sa.ForeignKeyConstraint(
            ["RecognizedPhraseID"], ["RecognizedPhrases.ID"], ondelete="CASCADE"
        ),
    )
    op.create_index("ix_NBests_RecognizedPhraseID", "NBests", ["RecognizedPhraseID"])

    op.create_table(
        "Words",
        sa.Column("ID", sa.Uuid(), primary_key=True),
        sa.Column("NBestID", sa.Uuid(), nullable=False),
        sa.Column("Word", sa.String(length=500), nullable=True),
        sa.Column("Offset", sa.String(length=255), nullable=True),
        sa.Column("Duration", sa.String(length=255), nullable=True),
        sa.Column("Confidence", sa.Float(), nullable=False),
        sa.ForeignKeyConstraint(["NBestID"], ["NBests.ID"], ondelete="CASCADE"),
    )
    op.create_index("ix_Words_NBestID", "Words", ["NBestID"])


def downgrade() -> None:
    op.drop_index("ix_Words_NBestID", table_name="Words")
    op.drop_table("Words")
    op.drop_index("ix_NBests_RecognizedPhraseID", table_name="NBests")
    op.drop_table("NBests")
    op.drop_index(
        "ix_RecognizedPhrases_CombinedRecognizedPhraseID", table_name="RecognizedPhrases"
    )
    op.drop_table("RecognizedPhrases")
    op.drop_index(
        "ix_CombinedRecognizedPhrases_TranscriptionID",
        table_name="CombinedRecognizedPhrases",
    )
    op.drop_table("CombinedRecognizedPhrases")
    op.drop_table("Transcriptions")
