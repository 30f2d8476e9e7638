"""Run the contract processing pipeline on local files.

    python main.py contract.pdf scan.png --json
"""
from __future__ import annotations
import argparse
import os
import sys
from datetime import datetime, timezone

from contractlens.pipeline import DocumentProcessor
from contractlens.report.json_export import build_analysis_json, format_summary_message
from contractlens.utils.config import AppConfig
from contractlens.utils.logs import configure_logging
from contractlens.utils.types import ProcessingStatus


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Extract text, clauses and missing-clause severity from contracts.")
    p.add_argument("files", nargs="+", help="paths of documents to process")
    p.add_argument("--ext", default=None, help="declared extension, overrides the file suffix")
    p.add_argument("--no-title", action="store_true", help="skip chat title generation")
    p.add_argument("--json", action="store_true", help="print a JSON snapshot instead of summary messages")
    p.add_argument("--include-text", action="store_true", help="include extracted text in the JSON snapshot")
    p.add_argument("--ask", default=None, metavar="QUESTION", help="answer a question about each processed document")
    return p.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    config = AppConfig.from_env()
    configure_logging(config.log_level)

    processor = DocumentProcessor(config)
    items = [(os.path.abspath(f), args.ext) for f in args.files]
    analyses = processor.process_many(items, name_chat=not args.no_title)

    if args.json:
        meta = {
            "app": "contractlens",
            "model": config.gemini_model if config.has_credential else None,
            "generated_at": datetime.now(timezone.utc).isoformat(),
        }
        print(build_analysis_json(analyses, meta, include_text=args.include_text))
    else:
        for a in analyses:
            name = os.path.basename(a.source_path)
            if a.status is ProcessingStatus.FAILED:
                print(f"{name}: processing failed: {a.error}\n")
                continue
            if a.chat_title:
                print(f"[{a.chat_title}]")
            print(format_summary_message(name, a.summary, a.missing_clauses, a.severity))
            if a.issues:
                print("Warnings: " + "; ".join(a.issues))
            if args.ask:
                print("Q: " + args.ask)
                print("A: " + processor.qa.answer_question(a.extracted_text, args.ask))
            print()
    return 1 if any(a.status is ProcessingStatus.FAILED for a in analyses) else 0


if __name__ == "__main__":
    sys.exit(main())
