"""Split a saved Gemini chat page into ordered user/assistant turns.

The page has no structured marker for assistant responses, so segmentation
works on text: a hidden sentinel is injected ahead of every user-query
element, the page is flattened to plain text, and the text is cut at the
sentinels. Inside each slice, Gemini's "Show thinking" toggle separates the
prompt from the response.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from bs4 import BeautifulSoup, Tag

from .config import (
    ANCHOR_ID_PREFIX,
    ANCHOR_ID_RE,
    MARKER_RE,
    MARKER_TEMPLATE,
    NO_RESPONSE,
    REMOVED_TAGS,
    SHOW_THINKING_RE,
)
from .errors import MalformedAnchorId, NoConversationsFound
from .models import ConversationTurn

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")
_BLANK_LINE_RE = re.compile(r"\s*\n\s*\n\s*")


def normalize_document(markup: str) -> BeautifulSoup:
    """Parse markup leniently and drop script, style, noscript and iframe subtrees."""
    soup = BeautifulSoup(markup, "html.parser")
    for element in soup.find_all(list(REMOVED_TAGS)):
        # nested matches are already gone with their ancestor
        if not element.decomposed:
            element.decompose()
    return soup


def find_anchors(soup: BeautifulSoup) -> list[tuple[int, Tag]]:
    """Return (sequence number, element) for every user-query element, in document order."""
    anchors: list[tuple[int, Tag]] = []
    for element in soup.find_all(id=re.compile(f"^{re.escape(ANCHOR_ID_PREFIX)}")):
        anchor_id = element["id"]
        match = ANCHOR_ID_RE.fullmatch(anchor_id)
        if match is None:
            raise MalformedAnchorId(anchor_id)
        anchors.append((int(match.group(1)), element))
    return anchors


def insert_markers(soup: BeautifulSoup, anchors: list[tuple[int, Tag]]) -> BeautifulSoup:
    """Put a hidden sentinel div at the start of each anchor. Mutates and returns ``soup``."""
    for number, element in anchors:
        marker = soup.new_tag("div", style="display:none")
        marker.string = MARKER_TEMPLATE.format(number=number)
        element.insert(0, marker)
    return soup


def _inside(element: Tag, container: Tag) -> bool:
    return any(parent is container for parent in element.parents)


def flatten_text(soup: BeautifulSoup, anchors: Sequence[tuple[int, Tag]] = ()) -> str:
    """Text of every text node under <body>, in document order (like DOM textContent).

    html.parser leaves stray elements where the markup put them, so when an
    anchor sits outside <body> (or there is no body) the whole tree is used.
    """
    body = soup.body
    if body is None or not all(_inside(element, body) for _, element in anchors):
        return soup.get_text()
    return body.get_text()


def collapse_whitespace(text: str, preserve_paragraphs: bool = False) -> str:
    """Collapse whitespace runs to single spaces.

    With ``preserve_paragraphs`` a run containing a blank line becomes a
    single blank line instead.
    """
    if not preserve_paragraphs:
        return _WHITESPACE_RE.sub(" ", text).strip()

    paragraphs = (_WHITESPACE_RE.sub(" ", p).strip() for p in _BLANK_LINE_RE.split(text))
    return "\n\n".join(p for p in paragraphs if p)


def _split_body(number: int, body: str) -> ConversationTurn:
    match = SHOW_THINKING_RE.search(body)
    if match is None:
        return ConversationTurn(
            sequence_number=number,
            user_text=body.strip(),
            assistant_text=NO_RESPONSE,
        )
    return ConversationTurn(
        sequence_number=number,
        user_text=body[: match.start()].strip(),
        assistant_text=body[match.end() :].strip(),
    )


def segment_turns(text: str) -> list[ConversationTurn]:
    """Cut flattened text at the sentinels.

    Text before the first sentinel is page chrome and is dropped. Each
    sentinel's body runs up to the next sentinel, the last one to the end.
    """
    markers = list(MARKER_RE.finditer(text))
    turns: list[ConversationTurn] = []

    for i, marker in enumerate(markers):
        end = markers[i + 1].start() if i + 1 < len(markers) else len(text)
        body = text[marker.end() : end]
        turns.append(_split_body(int(marker.group(1)), body))

    return turns


def parse_conversation(markup: str, preserve_paragraphs: bool = False) -> list[ConversationTurn]:
    """Run the full normalize → mark → flatten → segment pass over one page."""
    soup = normalize_document(markup)

    anchors = find_anchors(soup)
    if not anchors:
        raise NoConversationsFound("Could not find user query content elements")
    logger.info("Found %d user messages", len(anchors))

    numbers = [number for number, _ in anchors]
    if numbers != sorted(set(numbers)):
        logger.warning("User message numbers are not strictly increasing: %s", numbers)

    insert_markers(soup, anchors)
    text = collapse_whitespace(flatten_text(soup, anchors), preserve_paragraphs)
    return segment_turns(text)
