#!/usr/bin/env python3
"""
Analyze OCR text from a lab report and print the classified report as JSON.

Usage:
    python scripts/analyze_report.py ocr_output.txt
    python scripts/analyze_report.py ocr_output.txt --filename scan_0412.png
    cat ocr_output.txt | python scripts/analyze_report.py -
    python scripts/analyze_report.py empty.txt --seed 500   # reproducible demo fallback
"""

import json
import sys
from pathlib import Path
import argparse

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from lab_analyzer import analyze_report
from lab_analyzer.config import logging_settings
from lab_analyzer.utils.logging import setup_logging


def main():
    parser = argparse.ArgumentParser(description="Extract health parameters from lab report OCR text")
    parser.add_argument("input", help="Text file with OCR output, or '-' for stdin")
    parser.add_argument("--filename", help="Source file name to record (defaults to the input name)")
    parser.add_argument("--seed", type=int, help="Seed for the synthetic fallback (0-999)")
    parser.add_argument("--log-level", default=logging_settings.LOG_LEVEL, help="Logging level")
    parser.add_argument("--json-logs", action="store_true", help="Emit logs as JSON")
    args = parser.parse_args()

    # stdout carries the JSON report
    setup_logging(
        level=args.log_level,
        log_file=logging_settings.LOG_FILE,
        format_json=args.json_logs,
        stream=sys.stderr,
    )

    if args.input == "-":
        text = sys.stdin.read()
        filename = args.filename or "stdin.txt"
    else:
        path = Path(args.input)
        if not path.exists():
            print(f"File not found: {path}", file=sys.stderr)
            return 1
        text = path.read_text(encoding="utf-8", errors="replace")
        filename = args.filename or path.name

    report = analyze_report(text, filename, seed=args.seed)
    print(json.dumps(report.to_dict(), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
