from __future__ import annotations
import google.generativeai as genai
import logging
import time
from typing import Optional
from contractlens.utils.config import AppConfig
from contractlens.utils.errors import ConfigurationError

logger = logging.getLogger(__name__)


class GeminiClient:
    """Text-in/text-out generation service.

    Every call is stateless; the system instruction is bound per request so
    one client can serve the clause, title and summary prompts.
    """

    def __init__(self, config: AppConfig):
        if not config.has_credential:
            raise ConfigurationError("GOOGLE_API_KEY not set")
        genai.configure(api_key=config.google_api_key)
        self.config = config

    def generate(
        self,
        prompt: str,
        *,
        system_instruction: Optional[str] = None,
        temperature: Optional[float] = None,
        top_p: Optional[float] = None,
        max_tokens: Optional[int] = None,
        json_mode: bool = False,
    ) -> str:
        generation_config = {
            "temperature": self.config.temperature if temperature is None else temperature,
            "top_p": self.config.top_p if top_p is None else top_p,
            "max_output_tokens": max_tokens or self.config.max_tokens,
        }
        if json_mode:
            generation_config["response_mime_type"] = "application/json"
        model = genai.GenerativeModel(self.config.gemini_model, system_instruction=system_instruction)

        last_err = None
        attempts = max(1, self.config.llm_max_retries)
        for attempt in range(attempts):
            try:
                rsp = model.generate_content(prompt, generation_config=generation_config)
            except Exception as e:  # pragma: no cover - external API
                last_err = e
                logger.warning("Gemini call failed (attempt %d/%d): %s", attempt + 1, attempts, e)
                if attempt + 1 < attempts:
                    time.sleep(1 + attempt)
                continue
            try:
                return rsp.text or ""
            except ValueError:  # pragma: no cover - blocked / empty candidate
                logger.warning("Gemini returned no text candidate")
                return ""
        raise RuntimeError(f"Gemini generation failed: {last_err}")


def build_client(config: AppConfig) -> Optional[GeminiClient]:
    """Return a client when a credential is configured, else None (degraded mode)."""
    if not config.has_credential:
        return None
    return GeminiClient(config)
