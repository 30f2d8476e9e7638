from __future__ import annotations
import json
from typing import Any, Dict, List
from contractlens.utils.types import DocumentAnalysis, MissingClauseEntry, Severity

def build_analysis_json(
    analyses: List[DocumentAnalysis],
    meta: Dict[str, Any],
    include_text: bool = False,
) -> str:
    """Return a structured JSON snapshot of the processing results.

    meta can include build/version timestamps, model info, etc. Extracted text
    is left out unless include_text is set since it can be large.
    """
    documents = []
    for a in analyses:
        doc: Dict[str, Any] = {
            "source_path": a.source_path,
            "extension": a.extension,
            "processing_status": a.status.value,
            "error": a.error,
            "summary": a.summary,
            "clauses": a.clauses.to_dict(),
            "validation_issues": list(a.issues),
            "missing_clauses": [m.as_dict() for m in a.missing_clauses],
            "severity_overall": a.severity.value,
            "chat_title": a.chat_title,
        }
        if include_text:
            doc["extracted_text"] = a.extracted_text
        documents.append(doc)
    payload = {"meta": meta, "documents": documents}
    return json.dumps(payload, ensure_ascii=False, indent=2)


def format_summary_message(
    original_name: str,
    summary: str,
    missing: List[MissingClauseEntry],
    overall: Severity,
) -> str:
    """Plain-text chat message announcing a processed document."""
    if missing:
        lines = [f"- {m.name} ({m.severity.value}) - {m.reason}" for m in missing]
        missing_text = f"\n\nMissing Clauses ({overall.value.upper()}):\n" + "\n".join(lines)
    else:
        missing_text = "\n\nMissing Clauses: None (GREEN)"
    return f"Summary of {original_name}:\n{summary or ''}{missing_text}"
