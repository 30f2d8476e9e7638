from __future__ import annotations
from typing import List, Tuple
from contractlens.utils.types import ClauseSet

# Structurally required clauses, in reporting order (importance, not alphabetical).
REQUIRED_CLAUSES: List[Tuple[str, str]] = [
    ("parties", "Missing parties clause"),
    ("signatories", "Missing signatures/signatory information"),
    ("term", "Missing term clause"),
    ("governingLaw", "Missing governing law clause"),
]


def validate_clauses(clauses: ClauseSet) -> List[str]:
    """Return one fixed warning per required clause that is blank."""
    return [message for key, message in REQUIRED_CLAUSES if clauses.is_empty(key)]
