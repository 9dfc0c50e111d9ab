"""Validate an answer JSON file from the command line.

Usage:
    attendance-qa validate answer.json
    attendance-qa validate            # runs the built-in sample (three alerts, one placeholder)
"""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Optional, Sequence

from .main import configure_logging, load_settings
from .responses.schema import extract_answer_from_text
from .validation.model import ValidationResult
from .validation.service import AnswerValidator

SAMPLE_ANSWER = {
    "naturalLanguageAnswer": (
        "Currently, there are three active attendance alerts for different students.\n\n"
        "1. John Smith (S1001) has triggered an Absence Threshold Alert. His absences were on "
        "2025-10-01, 2025-10-05, 2025-10-08, and 2025-10-12. This alert was created on 2025-10-15.\n\n"
        "2. Emma Johnson (S1052) has a Pattern Alert due to recurring absences on Mondays. "
        "This alert was initiated on 2025-10-16.\n\n"
        "3. The third alert is incomplete in the provided data."
    ),
    "structuredData": {
        "students": [
            {
                "firstName": "John",
                "lastName": "Smith",
                "studentId": "S1001",
                "alertType": "Absence Threshold Alert",
                "alertTriggeredOn": "2025-10-15",
                "alertStatus": "active",
                "absences": ["2025-10-01", "2025-10-05", "2025-10-08", "2025-10-12"],
                "attendanceRate": 78,
            },
            {
                "firstName": "Emma",
                "lastName": "Johnson",
                "studentId": "S1052",
                "alertType": "Pattern Alert",
                "alertTriggeredOn": "2025-10-16",
                "alertStatus": "active",
                "absences": ["2025-09-22", "2025-09-29", "2025-10-06"],
                "attendanceRate": 85,
            },
            {
                "firstName": "Unknown Student",
                "studentId": None,
                "alertType": "Absence Threshold...",
                "alertStatus": "active",
                "absences": ["2025-10-01", "2025-10-05", "2025-10-08"],
            },
        ]
    },
}


def load_answer(path: Path) -> dict:
    text = path.read_text(encoding="utf-8")
    try:
        return json.loads(text)
    except ValueError:
        return extract_answer_from_text(text)


def print_issues(result: ValidationResult) -> None:
    if not result.issues:
        print("\nNo issues detected. Output looks consistent.")
        return
    print("\nIssues found:")
    for issue in result.issues:
        line = f"- [{issue.level.value.upper()}] {issue.message}"
        if issue.path:
            line += f" (path: {issue.path})"
        print(line)
        if issue.suggestion:
            print(f"    suggestion: {issue.suggestion}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="attendance-qa", description="Attendance answer validation tools")
    sub = parser.add_subparsers(dest="command", required=True)

    validate = sub.add_parser("validate", help="Check an answer JSON file for consistency")
    validate.add_argument("file", nargs="?", help="Answer JSON file (omit to run the built-in sample)")
    validate.add_argument("--no-fix", action="store_true", help="Skip auto-fix")
    validate.add_argument("--json", action="store_true", help="Print only the JSON result")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(load_settings())

    if args.file:
        path = Path(args.file).resolve()
        if not path.exists():
            print(f"File not found: {path}", file=sys.stderr)
            return 2
        answer = load_answer(path)
    else:
        answer = SAMPLE_ANSWER
        if not args.json:
            print("No input file supplied, running built-in sample.")

    result = AnswerValidator().validate(answer, auto_fix=not args.no_fix)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print("\nValidation result:")
        print(json.dumps(result.to_dict(), indent=2))
        print_issues(result)
    return 0 if result.valid else 1


if __name__ == "__main__":
    sys.exit(main())
