"""Per-file processing pipeline.

extract text -> summary -> clauses + validation -> missing-clause severity
-> chat title. Each run is computed from scratch; nothing is shared between
files, so process_many can fan files out over a thread pool.
"""
from __future__ import annotations
import logging
import os
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Iterable, List, Optional, Tuple, Union

from contractlens.analysis.clauses import ClauseExtractor
from contractlens.analysis.naming import ChatNamer
from contractlens.analysis.severity import classify_missing_clauses
from contractlens.ingest.text_extractor import extract_text, normalize_extension
from contractlens.llm.gemini import build_client
from contractlens.qa.document_qa import DocumentQA
from contractlens.summarize.summarizer import Summarizer
from contractlens.utils.config import AppConfig
from contractlens.utils.errors import ContractLensError
from contractlens.utils.types import DocumentAnalysis, ProcessingStatus

logger = logging.getLogger(__name__)

FileItem = Union[str, Tuple[str, Optional[str]]]


class DocumentProcessor:
    def __init__(self, config: AppConfig, llm: Optional[Any] = None):
        self.config = config
        llm = llm if llm is not None else build_client(config)
        self.clause_extractor = ClauseExtractor(config, llm)
        self.namer = ChatNamer(config, llm)
        self.summarizer = Summarizer(config, llm)
        self.qa = DocumentQA(config, llm)

    def process(self, path: str, declared_extension: Optional[str] = None, name_chat: bool = True) -> DocumentAnalysis:
        result = DocumentAnalysis(
            source_path=path,
            extension=normalize_extension(path, declared_extension),
            status=ProcessingStatus.PROCESSING,
        )
        try:
            extracted = extract_text(path, declared_extension, ocr_lang=self.config.ocr_lang)
        except ContractLensError as e:
            logger.error("Text extraction failed for %s: %s", path, e)
            result.status = ProcessingStatus.FAILED
            result.error = str(e)
            return result
        except Exception as e:
            logger.exception("Unexpected extraction error for %s", path)
            result.status = ProcessingStatus.FAILED
            result.error = str(e) or type(e).__name__
            return result

        text = extracted.text
        result.extracted_text = text
        if not text.strip():
            logger.warning("Extracted text for %s is empty", path)
        try:
            result.summary = self.summarizer.summarize(text)
            extraction = self.clause_extractor.extract_clauses(text)
            result.clauses = extraction.clauses
            result.issues = extraction.issues
            result.missing_clauses, result.severity = classify_missing_clauses(extraction.clauses)
            if name_chat:
                result.chat_title = self.namer.name_from(text or os.path.basename(path))
        except Exception as e:
            logger.exception("Processing failed for %s", path)
            result.status = ProcessingStatus.FAILED
            result.error = str(e)
            return result

        result.status = ProcessingStatus.COMPLETED
        logger.info(
            "Processed %s: severity=%s missing=%d issues=%d",
            path, result.severity.value, len(result.missing_clauses), len(result.issues),
        )
        return result

    def process_many(self, items: Iterable[FileItem], name_chat: bool = True) -> List[DocumentAnalysis]:
        """Process several files concurrently; results keep the input order."""
        jobs = [(item, None) if isinstance(item, str) else (item[0], item[1]) for item in items]
        if not jobs:
            return []
        workers = max(1, min(self.config.max_workers, len(jobs)))
        with ThreadPoolExecutor(max_workers=workers) as pool:
            futures = [pool.submit(self.process, path, ext, name_chat) for path, ext in jobs]
            return [f.result() for f in futures]
