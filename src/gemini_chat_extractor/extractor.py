"""Extraction pipeline: load → parse → segment → format → write."""

from __future__ import annotations

import logging
from typing import Any

from .errors import ExtractorError, NoConversationsFound
from .formatter import render_transcript
from .loader import load_document, write_output
from .models import ExtractionResult, ExtractorConfig
from .parser import parse_conversation

logger = logging.getLogger(__name__)


def size_reduction(original_size: int, final_size: int) -> float:
    """Percentage saved, rounded to one decimal. Negative when the output grew."""
    if original_size <= 0:
        return 0.0
    return round((1 - final_size / original_size) * 100, 1)


class GeminiChatExtractor:
    """Extracts a Gemini chat transcript from a saved HTML/MHTML page."""

    def __init__(self, config: ExtractorConfig | None = None, **overrides: Any):
        base = config or ExtractorConfig()
        if overrides:
            base = ExtractorConfig(**{**base.model_dump(), **overrides})
        self.config = base

    @staticmethod
    def _failure(source: str, target: str, message: str) -> ExtractionResult:
        return ExtractionResult(
            success=False, input_file=source, output_file=target, error=message
        )

    def extract(
        self, input_file: str | None = None, output_file: str | None = None
    ) -> ExtractionResult:
        """Run the whole pipeline once.

        Never raises for pipeline failures and leaves reporting them to the
        caller; check ``result.success`` and ``result.error``.
        """
        source = input_file or self.config.input_file
        target = output_file or self.config.output_file

        try:
            logger.info("Reading file: %s", source)
            markup, original_size = load_document(source)

            turns = parse_conversation(markup, self.config.preserve_paragraphs)
            if not turns:
                raise NoConversationsFound()

            transcript = render_transcript(turns, self.config, source)
            final_size = write_output(target, transcript)
        except ExtractorError as exc:
            logger.debug("Extraction failed: %s", exc.format_message())
            return self._failure(source, target, exc.format_message())
        except Exception as exc:
            logger.debug("Extraction failed for %s", source, exc_info=True)
            return self._failure(source, target, str(exc) or type(exc).__name__)

        reduction = size_reduction(original_size, final_size)
        message_count = len(turns) * 2

        return ExtractionResult(
            success=True,
            input_file=source,
            output_file=target,
            original_size=original_size,
            final_size=final_size,
            size_reduction=reduction,
            message_count=message_count,
        )


def extract_chat(
    input_file: str | None = None,
    output_file: str | None = None,
    config: ExtractorConfig | None = None,
) -> ExtractionResult:
    """Extract one chat page with the given (or default) configuration."""
    return GeminiChatExtractor(config).extract(input_file, output_file)
