"""Measure clause-extraction accuracy against hand-labelled sample contracts.

Each sample is `<name>.txt` plus `<name>.expected.json` holding one boolean
per clause (present / absent). Needs GOOGLE_API_KEY.

Run with:  python evaluate_contracts.py [samples_dir] [name ...]
"""
from __future__ import annotations
import json
import math
import os
import sys
import time
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple

from contractlens.analysis.clauses import ClauseExtractor
from contractlens.utils.config import AppConfig
from contractlens.utils.logs import configure_logging
from contractlens.utils.types import ClauseSet

EXPECTED_KEYS = [
    "parties", "term", "termination", "payment", "confidentiality",
    "liability", "governingLaw", "disputeResolution", "signatories",
]
DEFAULT_SAMPLES = ["valid_contract", "invalid_missing_signatures", "edge_contradictory_terms"]
DEFAULT_SAMPLES_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "samples")
TIME_LIMIT_MS = 30_000


@dataclass
class EvaluationResult:
    name: str
    accuracy_pct: int
    duration_ms: int
    errors: List[str] = field(default_factory=list)

    @property
    def edge_case_handled(self) -> bool:
        return not self.errors


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def presence_from_clauses(clauses: ClauseSet) -> Dict[str, bool]:
    return {k: not clauses.is_empty(k) for k in EXPECTED_KEYS}


def accuracy_pct(expected: Dict[str, bool], actual: Dict[str, bool]) -> int:
    correct = sum(1 for k in EXPECTED_KEYS if bool(expected[k]) == actual[k])
    return _round_half_up(correct / len(EXPECTED_KEYS) * 100)


def evaluate_sample(samples_dir: str, name: str, extractor: ClauseExtractor) -> EvaluationResult:
    with open(os.path.join(samples_dir, f"{name}.txt"), "r", encoding="utf-8") as f:
        text = f.read()
    with open(os.path.join(samples_dir, f"{name}.expected.json"), "r", encoding="utf-8") as f:
        expected = json.load(f)
    missing = [k for k in EXPECTED_KEYS if k not in expected]
    if missing:
        raise ValueError(f"{name}.expected.json lacks keys: {', '.join(missing)}")

    start = time.perf_counter()
    extraction = extractor.extract_clauses(text, strict=True)
    duration_ms = int((time.perf_counter() - start) * 1000)
    actual = presence_from_clauses(extraction.clauses)
    return EvaluationResult(
        name=name,
        accuracy_pct=accuracy_pct(expected, actual),
        duration_ms=duration_ms,
        errors=list(extraction.issues),
    )


def summarize_results(results: Sequence[EvaluationResult]) -> Tuple[int, int]:
    """(average accuracy %, samples finished within the time limit)."""
    avg = _round_half_up(sum(r.accuracy_pct for r in results) / max(1, len(results)))
    under_limit = sum(1 for r in results if r.duration_ms <= TIME_LIMIT_MS)
    return avg, under_limit


def main(argv=None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    samples_dir = args.pop(0) if args else DEFAULT_SAMPLES_DIR
    names = args or DEFAULT_SAMPLES

    config = AppConfig.from_env()
    configure_logging(config.log_level)
    if not config.has_credential:
        print("GOOGLE_API_KEY is not set; nothing to evaluate.")
        return 2
    extractor = ClauseExtractor(config)

    results: List[EvaluationResult] = []
    for name in names:
        try:
            r = evaluate_sample(samples_dir, name, extractor)
        except Exception as e:
            print(f"Failed on sample {name}: {e}")
            continue
        results.append(r)
        print(f"[{name}] accuracy={r.accuracy_pct}% duration={r.duration_ms}ms errors={len(r.errors)}")

    avg, under_limit = summarize_results(results)
    print(f"Average accuracy: {avg}%")
    print(f"Processing under 30s: {under_limit}/{len(results)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
