"""Read saved chat pages from disk, unwrapping MHTML web archives."""

from __future__ import annotations

import codecs
import logging
import re
from email import policy
from email.parser import BytesParser
from pathlib import Path

from .errors import InputNotFound

logger = logging.getLogger(__name__)

_HEADER_END_RE = re.compile(rb"\r?\n\r?\n")
_MIME_VERSION_RE = re.compile(rb"^mime-version:", re.IGNORECASE | re.MULTILINE)


def _looks_like_mime(raw: bytes) -> bool:
    """MHTML starts with RFC 822 headers; plain HTML starts with markup."""
    head = raw.removeprefix(codecs.BOM_UTF8).lstrip()
    if head.startswith(b"<"):
        return False
    header_block = _HEADER_END_RE.split(head, maxsplit=1)[0]
    return _MIME_VERSION_RE.search(header_block) is not None


def _decode(payload: bytes, charset: str) -> str:
    try:
        return payload.decode(charset, errors="replace")
    except LookupError:
        logger.warning("Unknown charset %r, decoding as UTF-8", charset)
        return payload.decode("utf-8", errors="replace")


def unwrap_mhtml(raw: bytes) -> str:
    """Return the page markup from raw file bytes.

    For an MHTML archive this is the first text/html part, with its transfer
    encoding undone and decoded in its declared charset (UTF-8 when none is
    declared, as browsers save it). Anything else is decoded as UTF-8.
    """
    if not _looks_like_mime(raw):
        return _decode(raw, "utf-8")

    msg = BytesParser(policy=policy.default).parsebytes(raw)
    for part in msg.walk():
        if part.get_content_type() != "text/html":
            continue
        payload = part.get_payload(decode=True) or b""
        html = _decode(payload, part.get_content_charset() or "utf-8")
        logger.info("Unwrapped HTML part from MHTML archive (%d chars)", len(html))
        return html

    logger.warning("MHTML archive has no text/html part, parsing raw text")
    return _decode(raw, "utf-8")


def load_document(path: str | Path) -> tuple[str, int]:
    """Load a chat page and return (markup, size of the file in bytes)."""
    source = Path(path)
    if not source.is_file():
        raise InputNotFound(str(path))

    raw = source.read_bytes()
    logger.info("Original size: %.2f MB", len(raw) / 1024 / 1024)
    return unwrap_mhtml(raw), len(raw)


def write_output(path: str | Path, text: str) -> int:
    """Write the transcript as UTF-8 and return the number of bytes written."""
    data = text.encode("utf-8")
    Path(path).write_bytes(data)
    return len(data)
