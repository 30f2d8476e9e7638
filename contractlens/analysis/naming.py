from __future__ import annotations
import logging
import re
from pathlib import Path
from typing import Any, Iterable, Optional
from contractlens.llm.gemini import build_client
from contractlens.utils.config import AppConfig

logger = logging.getLogger(__name__)

TITLE_PROMPT_PATH = Path(__file__).resolve().parent.parent / "prompts" / "chat_title.txt"
TITLE_TEMPLATE = TITLE_PROMPT_PATH.read_text(encoding="utf-8")
TITLE_SYSTEM = "You are a naming assistant for legal document chats. Return only a short title."

DEFAULT_TITLE = "New Chat"
MAX_TITLE_WORDS = 5
LATIN_RE = re.compile(r"[A-Za-z]")


def truncate_title(tokens: Iterable[str]) -> str:
    """Join at most five non-empty tokens; never returns an empty title."""
    words = [t for t in tokens if t][:MAX_TITLE_WORDS]
    return " ".join(words) if words else DEFAULT_TITLE


def fallback_title(text: str) -> str:
    return truncate_title(w for w in (text or "").split() if LATIN_RE.search(w))


class ChatNamer:
    def __init__(self, config: AppConfig, llm: Optional[Any] = None):
        self.config = config
        self.llm = llm if llm is not None else build_client(config)

    def name_from(self, text: str) -> str:
        if not self.config.has_credential or self.llm is None:
            return fallback_title(text)
        try:
            raw = self.llm.generate(
                TITLE_TEMPLATE.format(text=text or ""),
                system_instruction=TITLE_SYSTEM,
                temperature=self.config.temperature,
                top_p=self.config.top_p,
                max_tokens=self.config.title_max_tokens,
            )
        except Exception as e:
            logger.warning("Chat title generation failed, using text fallback: %s", e)
            return fallback_title(text)
        name = (raw or "").replace("\n", " ").strip()
        return truncate_title(name.split())
