"""regform CLI — validate a registration record from the shell.

Entry point registered as ``regform`` in ``pyproject.toml``::

    [project.scripts]
    regform = "regform.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``regform`` command."""
    parser = argparse.ArgumentParser(
        prog="regform",
        description="regform — registration form validation.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log validation details to stderr",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- regform check ------------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Validate a JSON form record")
    check_parser.add_argument(
        "file",
        nargs="?",
        default="-",
        help="Path to a JSON object, or - for stdin (default)",
    )
    check_parser.add_argument(
        "--policy",
        choices=("strict", "standard"),
        default="strict",
        help="Validation policy preset (default: strict)",
    )
    check_parser.add_argument(
        "--country",
        action="append",
        dest="countries",
        default=None,
        help="Accepted country name; repeat for several (default: built-in list)",
    )
    check_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )

    # -- regform normalize --------------------------------------------------
    normalize_parser = subparsers.add_parser("normalize", help="Normalize a full name")
    normalize_parser.add_argument("name", help="Full name to normalize")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "check":
        from regform.cli._check import run_check

        run_check(args)
    elif args.command == "normalize":
        from regform.validation import normalize_full_name

        print(normalize_full_name(args.name))
