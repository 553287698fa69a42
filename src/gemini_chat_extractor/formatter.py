"""Render extracted turns as a plain-text or markdown transcript."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from .config import (
    AI_ICON,
    EXPORT_TITLE,
    FORMAT_MARKDOWN,
    FORMAT_SIMPLE,
    TURN_SEPARATOR,
    USER_ICON,
)
from .errors import InvalidFormat
from .models import ConversationTurn, ExtractorConfig


def _label(name: str, markdown: bool) -> str:
    return f"**{name}**" if markdown else name


def _format_header(
    source_name: str, message_count: int, generated_at: datetime, markdown: bool
) -> str:
    return (
        f"# {EXPORT_TITLE}\n\n"
        f"{_label('Extracted from:', markdown)} {source_name}\n"
        f"{_label('Total messages:', markdown)} {message_count}\n"
        f"{_label('Date:', markdown)} {generated_at.isoformat()}\n\n"
        f"{TURN_SEPARATOR}\n\n"
    )


def _format_turn(turn: ConversationTurn, config: ExtractorConfig, markdown: bool) -> str:
    user_label = config.user_prefix
    ai_label = config.ai_prefix
    if markdown:
        user_label = f"{USER_ICON} {_label(user_label, True)}"
        ai_label = f"{AI_ICON} {_label(ai_label, True)}"

    return (
        f"{user_label}\n\n{turn.user_text}\n\n"
        f"{ai_label}\n\n{turn.assistant_text}\n\n"
    )


def render_transcript(
    turns: list[ConversationTurn],
    config: ExtractorConfig,
    source_file: str,
    generated_at: datetime | None = None,
) -> str:
    """Render turns in ``config.output_format``.

    ``generated_at`` stamps the metadata header and defaults to now (UTC).
    Raises InvalidFormat for anything but "simple" or "markdown".
    """
    if config.output_format not in (FORMAT_SIMPLE, FORMAT_MARKDOWN):
        raise InvalidFormat(config.output_format)
    markdown = config.output_format == FORMAT_MARKDOWN

    header = ""
    if config.include_metadata:
        header = _format_header(
            Path(source_file).name,
            len(turns) * 2,
            generated_at or datetime.now(timezone.utc),
            markdown,
        )

    body = f"{TURN_SEPARATOR}\n\n".join(_format_turn(t, config, markdown) for t in turns)
    return header + body
