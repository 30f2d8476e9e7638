"""Quick smoke test for the core pipeline (no network, no credential).

Run with:  python smoke_test.py
"""
from __future__ import annotations
import os
import tempfile
from contractlens.pipeline import DocumentProcessor
from contractlens.utils.config import AppConfig
from contractlens.utils.types import ProcessingStatus, Severity


SAMPLE = (
    "SERVICE AGREEMENT\n"
    "This Agreement is made between Acme Corp and Beta LLC.\n"
    "Payment is due within 30 days of invoice.\n"
)


def main():
    config = AppConfig(google_api_key=None)
    with tempfile.TemporaryDirectory() as tmp:
        path = os.path.join(tmp, "sample.txt")
        with open(path, "w", encoding="utf-8") as f:
            f.write(SAMPLE)
        result = DocumentProcessor(config).process(path)
    print("Status:", result.status.value)
    print("Title:", result.chat_title)
    print("Severity:", result.severity.value)
    print("Issues:", result.issues)
    assert result.status is ProcessingStatus.COMPLETED
    assert result.severity is Severity.RED, "Degraded clause extraction should report red"
    assert result.chat_title == "SERVICE AGREEMENT This Agreement is"
    print("Smoke test passed.")


if __name__ == "__main__":
    main()
