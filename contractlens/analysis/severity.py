from __future__ import annotations
from typing import List, Tuple
from contractlens.utils.types import ClauseSet, MissingClauseEntry, Severity

# (clause key, display name, reason, severity); row order is output order
MISSING_CLAUSE_RULES: List[Tuple[str, str, str, Severity]] = [
    ("parties", "Parties", "No parties identified", Severity.RED),
    ("signatories", "Signatories", "No signature/signatory section", Severity.RED),
    ("governingLaw", "Governing Law", "No governing law specified", Severity.RED),
    ("termination", "Termination", "Termination terms missing", Severity.AMBER),
    ("liability", "Liability", "Liability allocation missing", Severity.AMBER),
    ("confidentiality", "Confidentiality", "Confidentiality terms missing", Severity.AMBER),
    ("payment", "Payment", "Payment terms missing", Severity.AMBER),
    ("disputeResolution", "Dispute Resolution", "Dispute resolution mechanism missing", Severity.AMBER),
    ("term", "Term", "Contract duration missing", Severity.AMBER),
]


def overall_severity(entries: List[MissingClauseEntry]) -> Severity:
    if any(e.severity is Severity.RED for e in entries):
        return Severity.RED
    if any(e.severity is Severity.AMBER for e in entries):
        return Severity.AMBER
    return Severity.GREEN


def classify_missing_clauses(clauses: ClauseSet) -> Tuple[List[MissingClauseEntry], Severity]:
    """Risk overlay for absent clauses.

    Each rule looks only at its own clause. Present clauses produce no entry,
    so an empty list means every tracked clause is satisfied (green).
    """
    entries = [
        MissingClauseEntry(key=key, name=name, severity=severity, reason=reason)
        for key, name, reason, severity in MISSING_CLAUSE_RULES
        if clauses.is_empty(key)
    ]
    return entries, overall_severity(entries)
