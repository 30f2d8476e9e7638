from __future__ import annotations
import json
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import List, Dict, Any, Optional, Mapping

@dataclass(frozen=True)
class ExtractedText:
    source_path: str
    text: str


# attribute name -> wire (JSON) key, in prompt order
CLAUSE_KEYS: Dict[str, str] = {
    "parties": "parties",
    "term": "term",
    "termination": "termination",
    "payment": "payment",
    "confidentiality": "confidentiality",
    "liability": "liability",
    "governing_law": "governingLaw",
    "dispute_resolution": "disputeResolution",
    "special_conditions": "specialConditions",
    "riders": "riders",
    "signatories": "signatories",
    "language": "language",
}
WIRE_TO_ATTR = {wire: attr for attr, wire in CLAUSE_KEYS.items()}


def _as_clause_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return "; ".join(_as_clause_text(v) for v in value if v is not None)
    if isinstance(value, dict):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


@dataclass(frozen=True)
class ClauseSet:
    parties: str = ""
    term: str = ""
    termination: str = ""
    payment: str = ""
    confidentiality: str = ""
    liability: str = ""
    governing_law: str = ""
    dispute_resolution: str = ""
    special_conditions: str = ""
    riders: str = ""
    signatories: str = ""
    language: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ClauseSet":
        """Build from a model response object keyed by wire names.

        Unknown keys are ignored and missing keys stay empty, so every
        instance always carries all twelve clauses.
        """
        values = {}
        for key, value in data.items():
            attr = WIRE_TO_ATTR.get(key)
            if attr is None and key in CLAUSE_KEYS:
                attr = key
            if attr is not None:
                values[attr] = _as_clause_text(value)
        return cls(**values)

    def get(self, wire_key: str) -> str:
        return getattr(self, WIRE_TO_ATTR[wire_key])

    def is_empty(self, wire_key: str) -> bool:
        return not self.get(wire_key).strip()

    def to_dict(self) -> Dict[str, str]:
        return {CLAUSE_KEYS[f.name]: getattr(self, f.name) for f in fields(self)}


ValidationIssues = List[str]


class Severity(str, Enum):
    RED = "red"
    AMBER = "amber"
    GREEN = "green"


@dataclass(frozen=True)
class MissingClauseEntry:
    key: str
    name: str
    severity: Severity
    reason: str

    def as_dict(self) -> Dict[str, str]:
        return {"key": self.key, "name": self.name, "severity": self.severity.value, "reason": self.reason}


@dataclass(frozen=True)
class ClauseExtraction:
    clauses: ClauseSet
    issues: List[str] = field(default_factory=list)


class ProcessingStatus(str, Enum):
    UPLOADED = "uploaded"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass
class DocumentAnalysis:
    source_path: str
    extension: str
    status: ProcessingStatus = ProcessingStatus.UPLOADED
    error: Optional[str] = None
    extracted_text: str = ""
    summary: str = ""
    clauses: ClauseSet = field(default_factory=ClauseSet)
    issues: List[str] = field(default_factory=list)
    missing_clauses: List[MissingClauseEntry] = field(default_factory=list)
    severity: Severity = Severity.GREEN
    chat_title: Optional[str] = None
