"""Console interface for the expense API."""

from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional

from api.app import create_app
from common.dispatch import is_empty_body
from common.exceptions import EmptyBody
from common.services import ExpenseStore
from common.validators import validate_expense


def _parse_port(value: str) -> int:
    try:
        port = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Invalid port '{value}'") from exc
    if not 0 < port < 65536:
        raise argparse.ArgumentTypeError("Port must be between 1 and 65535")
    return port


def handle_serve(args: argparse.Namespace) -> int:
    store = ExpenseStore() if args.no_seed else ExpenseStore.with_seed_data()
    app = create_app(store)
    app.run(host=args.host, port=args.port, debug=args.debug)
    return 0


def handle_validate(args: argparse.Namespace) -> int:
    try:
        candidate = json.loads(args.payload)
    except json.JSONDecodeError:
        print(f"Validation error: {EmptyBody().message}", file=sys.stderr)
        return 1
    if is_empty_body(candidate):
        print(f"Validation error: {EmptyBody().message}", file=sys.stderr)
        return 1
    result = validate_expense(candidate)
    if not result.ok:
        print(f"Validation error: {result.message}", file=sys.stderr)
        return 1
    print("valid")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="In-memory expense API")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the development server")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=_parse_port, default=5000)
    serve.add_argument("--debug", action="store_true")
    serve.add_argument("--no-seed", action="store_true", help="Start with an empty store")

    validate = subparsers.add_parser("validate", help="Check a JSON expense payload")
    validate.add_argument("payload", help="JSON object with amount, description, category and date")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "serve":
        return handle_serve(args)
    if args.command == "validate":
        return handle_validate(args)
    parser.error(f"Unknown command: {args.command}")  # pragma: no cover - argparse should prevent this
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
