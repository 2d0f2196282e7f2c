"""``regform check`` — validate one JSON form record.

Prints ``valid`` or one ``field: message`` line per failing field.
Exits with code 1 if the record is invalid and 2 if it cannot be read.
"""

import argparse
import json
import sys
from pathlib import Path

from regform.config import POLICIES
from regform.form import FormValidator
from regform.tables import COUNTRIES


def _load_record(source: str) -> dict:
    if source == "-":
        text = sys.stdin.read()
    else:
        text = Path(source).read_text(encoding="utf-8")
    record = json.loads(text)
    if not isinstance(record, dict):
        raise ValueError("expected a JSON object")
    return record


def run_check(args: argparse.Namespace) -> None:
    """Validate the record named by ``args.file`` and report the result."""
    try:
        record = _load_record(args.file)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc

    validator = FormValidator(args.countries or COUNTRIES, POLICIES[args.policy])
    result = validator.validate(record)

    if args.json:
        payload = {"isValid": result.is_valid, "errors": result.errors}
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    elif result:
        print("valid")
    else:
        for field_name, message in result.errors.items():
            print(f"{field_name}: {message}")

    if not result:
        raise SystemExit(1)
