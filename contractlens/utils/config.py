from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv

@dataclass(frozen=True)
class AppConfig:
    google_api_key: Optional[str] = None
    gemini_model: str = "gemini-1.5-flash"
    temperature: float = 0.3
    clause_temperature: float = 0.2
    top_p: float = 0.9
    max_tokens: int = 800
    clause_max_tokens: int = 1200
    title_max_tokens: int = 32
    summary_bullets: int = 6
    ocr_lang: str = "eng"
    max_workers: int = 2
    llm_max_retries: int = 2
    log_level: str = "INFO"

    @property
    def has_credential(self) -> bool:
        return bool(self.google_api_key and self.google_api_key.strip())

    @classmethod
    def from_env(cls) -> "AppConfig":
        load_dotenv()
        return cls(
            google_api_key=os.getenv("GOOGLE_API_KEY") or None,
            gemini_model=os.getenv("GEMINI_MODEL", "gemini-1.5-flash"),
            temperature=float(os.getenv("TEMPERATURE", "0.3")),
            clause_temperature=float(os.getenv("CLAUSE_TEMPERATURE", "0.2")),
            top_p=float(os.getenv("TOP_P", "0.9")),
            max_tokens=int(os.getenv("MAX_TOKENS", "800")),
            clause_max_tokens=int(os.getenv("CLAUSE_MAX_TOKENS", "1200")),
            title_max_tokens=int(os.getenv("TITLE_MAX_TOKENS", "32")),
            summary_bullets=int(os.getenv("SUMMARY_BULLETS", "6")),
            ocr_lang=os.getenv("OCR_LANG", "eng"),
            max_workers=int(os.getenv("MAX_WORKERS", "2")),
            llm_max_retries=int(os.getenv("LLM_MAX_RETRIES", "2")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )
