"""gemini-chat-extractor: turn saved Gemini chat pages into clean transcripts."""

__version__ = "0.1.0"

from .extractor import GeminiChatExtractor, extract_chat  # noqa: E402
from .models import ConversationTurn, ExtractionResult, ExtractorConfig  # noqa: E402

__all__ = [
    "ConversationTurn",
    "ExtractionResult",
    "ExtractorConfig",
    "GeminiChatExtractor",
    "extract_chat",
]
