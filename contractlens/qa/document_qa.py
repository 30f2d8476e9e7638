"""Answer free-form questions about one contract, grounded in its text only."""
from __future__ import annotations
import logging
from pathlib import Path
from typing import Any, Optional
from contractlens.llm.gemini import build_client
from contractlens.utils.config import AppConfig

logger = logging.getLogger(__name__)

QA_PROMPT_PATH = Path(__file__).resolve().parent.parent / "prompts" / "document_qa.txt"
QA_TEMPLATE = QA_PROMPT_PATH.read_text(encoding="utf-8")
QA_SYSTEM = "You are a legal assistant."

FALLBACK_ANSWER = "Sorry, I could not generate a response at the moment."


class DocumentQA:
    def __init__(self, config: AppConfig, llm: Optional[Any] = None):
        """The optional `llm` lets callers share one generation client or inject a stub."""
        self.config = config
        self.llm = llm if llm is not None else build_client(config)

    def answer_question(self, text: str, question: str) -> str:
        """Never raises; every failure path returns FALLBACK_ANSWER."""
        question = (question or "").strip()
        if not question:
            return FALLBACK_ANSWER
        if not self.config.has_credential or self.llm is None:
            logger.info("No generation credential; cannot answer question")
            return FALLBACK_ANSWER
        try:
            raw = self.llm.generate(
                QA_TEMPLATE.format(question=question, text=text or ""),
                system_instruction=QA_SYSTEM,
                temperature=self.config.temperature,
                top_p=self.config.top_p,
                max_tokens=self.config.max_tokens,
            )
        except Exception as e:
            logger.warning("Question answering failed: %s", e)
            return FALLBACK_ANSWER
        answer = (raw or "").strip()
        return answer or FALLBACK_ANSWER
