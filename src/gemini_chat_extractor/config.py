"""Central configuration for defaults and constants."""

import os
import re

# Default paths — override with GEMINI_CHAT_EXTRACTOR_INPUT / _OUTPUT env vars
DEFAULT_INPUT_FILE = os.environ.get("GEMINI_CHAT_EXTRACTOR_INPUT", "Caius.mhtml")
DEFAULT_OUTPUT_FILE = os.environ.get(
    "GEMINI_CHAT_EXTRACTOR_OUTPUT", "gemini_chat_export.txt"
)

# Output formats
FORMAT_SIMPLE = "simple"
FORMAT_MARKDOWN = "markdown"
OUTPUT_FORMATS = (FORMAT_SIMPLE, FORMAT_MARKDOWN)

# Speaker labels
DEFAULT_USER_PREFIX = "YOU:"
DEFAULT_AI_PREFIX = "GEMINI:"
USER_ICON = "👤"
AI_ICON = "🤖"

EXPORT_TITLE = "Gemini Chat Export"
TURN_SEPARATOR = "---"

# Elements dropped before flattening
REMOVED_TAGS = ("script", "style", "noscript", "iframe")

# User-turn anchors look like id="user-query-content-12"
ANCHOR_ID_PREFIX = "user-query-content-"
ANCHOR_ID_RE = re.compile(rf"{ANCHOR_ID_PREFIX}([0-9]+)")

# Sentinel injected ahead of each user turn
MARKER_TEMPLATE = "=== USER_MESSAGE_{number} ==="
MARKER_RE = re.compile(r"=== USER_MESSAGE_(\d+) ===")

# Gemini renders this toggle between the prompt and the response
SHOW_THINKING_RE = re.compile(re.escape("show thinking"), re.IGNORECASE)
NO_RESPONSE = "[No response found]"
