from __future__ import annotations
import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, Optional
from contractlens.analysis.validator import validate_clauses
from contractlens.llm.gemini import build_client
from contractlens.utils.config import AppConfig
from contractlens.utils.errors import ConfigurationError
from contractlens.utils.types import ClauseExtraction, ClauseSet

logger = logging.getLogger(__name__)

CLAUSE_PROMPT_PATH = Path(__file__).resolve().parent.parent / "prompts" / "clauses.txt"
CLAUSE_SYSTEM = CLAUSE_PROMPT_PATH.read_text(encoding="utf-8")

FIRST_PROMPT = "Extract clauses from the following contract text:\n\n{text}"
RETRY_PROMPT = (
    "Extract clauses from the following contract text and return JSON only. "
    "Respond with a single JSON object and nothing else:\n\n{text}"
)

FENCE_RE = re.compile(r"^```(?:json)?\s*|\s*```$", re.I)


class ClauseParseError(ValueError):
    pass


def parse_clause_json(raw: str) -> ClauseSet:
    """Parse a model response into a ClauseSet; raises ClauseParseError."""
    cleaned = FENCE_RE.sub("", (raw or "").strip()).strip()
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise ClauseParseError(f"response is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ClauseParseError(f"expected a JSON object, got {type(data).__name__}")
    return ClauseSet.from_mapping(data)


class ClauseExtractor:
    """Best-effort structured clause extraction over plain contract text.

    ``llm`` is any object exposing ``generate(prompt, *, system_instruction,
    temperature, top_p, max_tokens, json_mode) -> str``; when omitted a
    Gemini client is built from the config credential.
    """

    def __init__(self, config: AppConfig, llm: Optional[Any] = None):
        self.config = config
        self.llm = llm if llm is not None else build_client(config)

    def _attempts(self, text: str):
        yield FIRST_PROMPT.format(text=text), True
        yield RETRY_PROMPT.format(text=text), False

    def _request(self, prompt: str, json_mode: bool) -> str:
        kwargs: Dict[str, Any] = dict(
            system_instruction=CLAUSE_SYSTEM,
            temperature=self.config.clause_temperature,
            top_p=self.config.top_p,
            max_tokens=self.config.clause_max_tokens,
        )
        if json_mode:
            kwargs["json_mode"] = True
        return self.llm.generate(prompt, **kwargs)

    def extract_clauses(self, text: str, strict: bool = False) -> ClauseExtraction:
        if not self.config.has_credential or self.llm is None:
            if strict:
                raise ConfigurationError("GOOGLE_API_KEY not set")
            logger.warning("No generation credential configured; clause extraction degraded to empty result")
            clauses = ClauseSet()
            return ClauseExtraction(clauses=clauses, issues=validate_clauses(clauses))

        clauses = None
        for attempt, (prompt, json_mode) in enumerate(self._attempts(text or ""), start=1):
            try:
                raw = self._request(prompt, json_mode)
                clauses = parse_clause_json(raw)
                break
            except ClauseParseError as e:
                logger.warning("Clause response unparseable on attempt %d: %s", attempt, e)
            except Exception as e:
                logger.warning("Clause extraction request failed on attempt %d: %s", attempt, e)
        if clauses is None:
            logger.warning("Giving up on clause extraction; returning empty clause set")
            clauses = ClauseSet()
        return ClauseExtraction(clauses=clauses, issues=validate_clauses(clauses))
