from __future__ import annotations

import argparse
import json
from typing import Any, Sequence

from domain.models import SettingKey
from infra.config import StoreSettings, load_store_settings
from infra.persistence import SQLiteKeyValueStore
from infra.runtime import StructuredLogger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="keyed-defaults")
    parser.add_argument("--db-path", default=None, help="SQLite file (default: $KEYED_DEFAULTS_DB_PATH)")
    parser.add_argument("--suite", default=None, help="Suite name (default: $KEYED_DEFAULTS_SUITE)")
    sub = parser.add_subparsers(dest="command", required=True)

    get_p = sub.add_parser("get", help="Print the stored value as JSON")
    get_p.add_argument("key")

    set_p = sub.add_parser("set", help="Store a value; VALUE is parsed as JSON when possible")
    set_p.add_argument("key")
    set_p.add_argument("value")

    remove_p = sub.add_parser("remove", help="Delete the stored entry")
    remove_p.add_argument("key")

    sub.add_parser("list", help="Print every stored entry")
    sub.add_parser("keys", help="Print the known setting keys")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "keys":
        for key in SettingKey:
            print(key.value)
        return 0

    settings = _resolve_settings(args)
    errors = settings.validate()
    if errors:
        raise SystemExit("Store settings are invalid:\n" + "\n".join(f"  - {err}" for err in errors))

    logger = StructuredLogger(component="cli")
    with SQLiteKeyValueStore(db_path=settings.db_path, suite=settings.suite) as store:
        if args.command == "get":
            print(json.dumps(store.get(args.key)))
            return 0

        if args.command == "set":
            value = _parse_value(args.value)
            if value is None:
                raise SystemExit("set requires a non-null value; use remove to delete an entry")
            store.set(args.key, value)
            logger.info("entry updated", key=args.key, suite=settings.suite)
            print(f"updated {args.key}")
            return 0

        if args.command == "remove":
            store.remove(args.key)
            logger.info("entry removed", key=args.key, suite=settings.suite)
            print(f"removed {args.key}")
            return 0

        if args.command == "list":
            for key in store.keys():
                print(f"{key} = {json.dumps(store.get(key))}")
            return 0

    raise SystemExit(f"Unsupported command: {args.command}")


def _resolve_settings(args: argparse.Namespace) -> StoreSettings:
    base = load_store_settings()
    return StoreSettings(
        db_path=args.db_path or base.db_path,
        suite=args.suite if args.suite is not None else base.suite,
    )


def _parse_value(raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


if __name__ == "__main__":
    raise SystemExit(main())
