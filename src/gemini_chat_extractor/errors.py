"""Errors raised by the extraction pipeline.

They subclass ``click.ClickException`` so the CLI reports them as
``Error: <message>`` with exit status 1. The programmatic API converts them
into a failed ``ExtractionResult`` instead of letting them escape.
"""

from __future__ import annotations

import click

from .config import OUTPUT_FORMATS


class ExtractorError(click.ClickException):
    """Base class for every pipeline failure."""


class InputNotFound(ExtractorError):
    def __init__(self, path: str):
        super().__init__(f"Input file not found: {path}")
        self.path = path


class NoConversationsFound(ExtractorError):
    def __init__(self, message: str = "No conversations found in the file"):
        super().__init__(message)


class InvalidFormat(ExtractorError):
    def __init__(self, output_format: str | None = None):
        choices = " or ".join(f'"{name}"' for name in OUTPUT_FORMATS)
        super().__init__(f"Invalid format. Use {choices}")
        self.output_format = output_format


class MalformedAnchorId(ExtractorError):
    def __init__(self, anchor_id: str):
        super().__init__(f"Malformed user message anchor id: {anchor_id!r}")
        self.anchor_id = anchor_id
