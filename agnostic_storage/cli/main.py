"""
Top-level CLI: agnostic-storage [--backend B] [--path P] <command> KEY [VALUE].
Reads print the stored value (nothing for an absent string); writes flush before exit.
"""

from __future__ import annotations

import argparse
import logging
import sqlite3
import sys
from typing import List, Optional

from agnostic_storage.core.errors import AgnosticStorageError

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _parse_bool(text: str) -> bool:
    lowered = text.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise argparse.ArgumentTypeError(f"not a boolean: {text!r}")


def _build_parser() -> argparse.ArgumentParser:
    from agnostic_storage.store.backend import BACKENDS

    parser = argparse.ArgumentParser(
        prog="agnostic-storage",
        description="Read and write entries in a platform-agnostic key-value store",
    )
    parser.add_argument("--backend", choices=BACKENDS, help="Backend (default: from config)")
    parser.add_argument("--path", help="Host store file (default: from config)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", help="command")

    p = subparsers.add_parser("get-string", help="Print a string entry")
    p.add_argument("key")
    p.add_argument("--default", default=None)

    p = subparsers.add_parser("put-string", help="Store a string entry")
    p.add_argument("key")
    p.add_argument("value")

    p = subparsers.add_parser("get-int", help="Print an integer entry")
    p.add_argument("key")
    p.add_argument("--default", type=int, default=0)

    p = subparsers.add_parser("put-int", help="Store an integer entry")
    p.add_argument("key")
    p.add_argument("value", type=int)

    p = subparsers.add_parser("get-boolean", help="Print a boolean entry")
    p.add_argument("key")
    p.add_argument("--default", type=_parse_bool, default=False)

    p = subparsers.add_parser("put-boolean", help="Store a boolean entry")
    p.add_argument("key")
    p.add_argument("value", type=_parse_bool)

    p = subparsers.add_parser("remove", help="Delete an entry")
    p.add_argument("key")
    return parser


def _configure_logging(verbose: bool) -> None:
    from agnostic_storage.config import log_level

    level = logging.DEBUG if verbose else getattr(logging, log_level(), logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    parser = _build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 0

    _configure_logging(args.verbose)

    from agnostic_storage.store.backend import close_storage, open_storage

    storage = open_storage(args.backend, args.path)
    status = 0
    try:
        cmd = args.command
        if cmd == "get-string":
            value = storage.get_string(args.key, args.default)
            if value is not None:
                print(value)
        elif cmd == "put-string":
            storage.put_string(args.key, args.value)
        elif cmd == "get-int":
            print(storage.get_int(args.key, args.default))
        elif cmd == "put-int":
            storage.put_int(args.key, args.value)
        elif cmd == "get-boolean":
            print("true" if storage.get_boolean(args.key, args.default) else "false")
        elif cmd == "put-boolean":
            storage.put_boolean(args.key, args.value)
        elif cmd == "remove":
            storage.remove(args.key)
    except (AgnosticStorageError, TypeError) as e:
        print(f"{args.command} failed: {e}", file=sys.stderr)
        status = 2
    finally:
        # deferred background-write errors surface here
        try:
            close_storage(storage)
        except (OSError, sqlite3.Error) as e:
            print(f"{args.command} failed to persist: {e}", file=sys.stderr)
            status = 2
    return status


if __name__ == "__main__":
    raise SystemExit(main())
