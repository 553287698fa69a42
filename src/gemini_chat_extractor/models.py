"""Data models for extracted conversations and run results."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .config import (
    DEFAULT_AI_PREFIX,
    DEFAULT_INPUT_FILE,
    DEFAULT_OUTPUT_FILE,
    DEFAULT_USER_PREFIX,
    FORMAT_SIMPLE,
)


class ConversationTurn(BaseModel):
    model_config = ConfigDict(frozen=True)

    sequence_number: int
    user_text: str
    assistant_text: str


class ExtractorConfig(BaseModel):
    """Read-only settings, resolved once from defaults plus caller overrides."""

    model_config = ConfigDict(frozen=True)

    input_file: str = DEFAULT_INPUT_FILE
    output_file: str = DEFAULT_OUTPUT_FILE
    output_format: str = FORMAT_SIMPLE
    user_prefix: str = DEFAULT_USER_PREFIX
    ai_prefix: str = DEFAULT_AI_PREFIX
    include_metadata: bool = True
    verbose: bool = False
    preserve_paragraphs: bool = False


class ExtractionResult(BaseModel):
    success: bool
    input_file: str | None = None
    output_file: str | None = None
    original_size: int | None = None
    final_size: int | None = None
    size_reduction: float | None = None
    message_count: int | None = None
    error: str | None = None
