from __future__ import annotations
import logging
import re
from pathlib import Path
from typing import Any, List, Optional
from contractlens.llm.gemini import build_client
from contractlens.utils.config import AppConfig

logger = logging.getLogger(__name__)

SUM_PROMPT_PATH = Path(__file__).resolve().parent.parent / "prompts" / "summarization.txt"
SUM_TEMPLATE = SUM_PROMPT_PATH.read_text(encoding="utf-8")
SUM_SYSTEM = "You are a precise legal assistant. Analyze documents and summarize key clauses."

SENTENCE_SPLIT_RE = re.compile(r"(?<=[.!?])\s+|\n{2,}")

# category -> keywords, in bullet output order
CATEGORIES = {
    "Parties": ["party", "parties", "between", "hereinafter"],
    "Term": ["term", "duration", "commence", "effective date", "expir", "renew"],
    "Payment": ["payment", "fee", "invoice", "price", "payable", "compensation"],
    "Termination": ["terminate", "termination", "notice", "breach"],
    "Confidentiality": ["confidential", "non-disclosure", "secret"],
    "Liability": ["liability", "liable", "indemn", "damages"],
    "Governing Law": ["governing law", "governed by", "jurisdiction", "laws of"],
    "Disputes": ["dispute", "arbitrat", "mediat", "court"],
    "Signatures": ["signature", "signed", "witness whereof"],
}


def heuristic_document_summary(text: str, max_bullets: int = 6) -> str:
    """Keyword-scored bullet summary (fast, no LLM)."""
    if not text or not text.strip():
        return "- (No text extracted)"
    sentences = [s.strip() for s in SENTENCE_SPLIT_RE.split(text) if s and s.strip()]
    all_keywords = {kw for kws in CATEGORIES.values() for kw in kws}
    scored = []
    for s in sentences:
        low = s.lower()
        score = sum(1 for k in all_keywords if k in low)
        if 15 < len(s) < 300 and score:
            scored.append((score, " ".join(s.split())))
    scored.sort(key=lambda x: (-x[0], len(x[1])))

    category_best = {}
    for _, sent in scored:
        low = sent.lower()
        for cat, kws in CATEGORIES.items():
            if any(k in low for k in kws):
                category_best.setdefault(cat, sent)
                break
    bullets: List[str] = []
    for cat in CATEGORIES:
        if cat in category_best:
            txt = category_best[cat]
            if len(txt) > 170:
                txt = txt[:167] + "..."
            bullets.append(f"- {cat}: {txt.rstrip('. ')}.")
    if not bullets:
        for _, s in scored[:max_bullets]:
            bullets.append("- " + s)
    if not bullets:
        return "- (No recognizable contract terms found)"
    return "\n".join(bullets[:max_bullets])


class Summarizer:
    def __init__(self, config: AppConfig, llm: Optional[Any] = None):
        self.config = config
        self.llm = llm if llm is not None else build_client(config)

    def summarize(self, text: str) -> str:
        bullets = self.config.summary_bullets
        if not self.config.has_credential or self.llm is None:
            return heuristic_document_summary(text, bullets)
        try:
            resp = self.llm.generate(
                SUM_TEMPLATE.format(text=text or "", bullets=bullets),
                system_instruction=SUM_SYSTEM,
                temperature=self.config.clause_temperature,
                top_p=self.config.top_p,
                max_tokens=self.config.max_tokens,
            )
        except Exception as e:
            logger.warning("Summary generation failed, using heuristic summary: %s", e)
            return heuristic_document_summary(text, bullets)
        resp = (resp or "").strip()
        return resp if resp else heuristic_document_summary(text, bullets)
