"""CLI interface for gemini-chat-extractor."""

from __future__ import annotations

import logging
import sys

import click

from . import __version__
from .config import (
    DEFAULT_AI_PREFIX,
    DEFAULT_INPUT_FILE,
    DEFAULT_OUTPUT_FILE,
    DEFAULT_USER_PREFIX,
    FORMAT_SIMPLE,
    OUTPUT_FORMATS,
)
from .errors import InvalidFormat
from .extractor import GeminiChatExtractor
from .models import ExtractorConfig


def _configure_logging(verbose: bool):
    # Progress goes to stderr only with --verbose; errors always do
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(message)s" if verbose else "%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="gemini-chat-extractor")
@click.argument("input_arg", metavar="[INPUT]", required=False)
@click.argument("output_arg", metavar="[OUTPUT]", required=False)
@click.option("-i", "--input", "input_file", metavar="FILE",
              help=f"Input HTML/MHTML file (default: {DEFAULT_INPUT_FILE})")
@click.option("-o", "--output", "output_file", metavar="FILE",
              help=f"Output file (default: {DEFAULT_OUTPUT_FILE})")
@click.option("-f", "--format", "output_format", default=FORMAT_SIMPLE, show_default=True,
              help="Output format: simple or markdown")
@click.option("--user-prefix", default=DEFAULT_USER_PREFIX, show_default=True,
              help="Label printed above your messages")
@click.option("--ai-prefix", default=DEFAULT_AI_PREFIX, show_default=True,
              help="Label printed above Gemini's responses")
@click.option("--metadata/--no-metadata", "include_metadata", default=True,
              show_default=True, help="Write the export header block")
@click.option("--preserve-paragraphs", is_flag=True,
              help="Keep blank-line paragraph breaks instead of collapsing all whitespace")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose logging")
def cli(
    input_arg: str | None,
    output_arg: str | None,
    input_file: str | None,
    output_file: str | None,
    output_format: str,
    user_prefix: str,
    ai_prefix: str,
    include_metadata: bool,
    preserve_paragraphs: bool,
    verbose: bool,
):
    """Extract and clean Gemini chat conversations.

    Reads a saved Gemini chat page (HTML or MHTML) and writes a compact
    transcript with only your messages and Gemini's responses.

    Examples:
        gemini-chat-extractor chat.mhtml output.txt
        gemini-chat-extractor -i chat.mhtml -o output.md -f markdown -v
    """
    if output_format not in OUTPUT_FORMATS:
        raise InvalidFormat(output_format)

    _configure_logging(verbose)

    config = ExtractorConfig(
        input_file=input_file or input_arg or DEFAULT_INPUT_FILE,
        output_file=output_file or output_arg or DEFAULT_OUTPUT_FILE,
        output_format=output_format,
        user_prefix=user_prefix,
        ai_prefix=ai_prefix,
        include_metadata=include_metadata,
        verbose=verbose,
        preserve_paragraphs=preserve_paragraphs,
    )
    result = GeminiChatExtractor(config).extract()

    if not result.success:
        raise click.ClickException(result.error or "Extraction failed")

    if config.verbose:
        click.echo()
        click.echo(click.style("Extraction complete!", fg="green", bold=True))
        click.echo(f"  Saved to:       {result.output_file}")
        click.echo(f"  Final size:     {result.final_size / 1024:.1f} KB")
        click.echo(f"  Size reduction: {result.size_reduction}%")
        click.echo(f"  Messages:       {result.message_count:,}")
        click.echo()
