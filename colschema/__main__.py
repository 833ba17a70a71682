"""
Command-line schema preview.

    python -m colschema blocks --include-columns chain_id --hex
    python -m colschema blocks transactions --columns all --json
    python -m colschema --list

The default encoding comes from COLSCHEMA_ENCODING ("binary" or "hex");
--hex overrides it.
"""

import argparse
import json
import logging
import os
import sys

from colschema.builder import resolve_schemas
from colschema.datasets import REGISTRY
from colschema.registry import RegistryError
from colschema.types import ColumnEncoding, SchemaError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="colschema",
        description="Show the resolved output schema of one or more datatypes",
    )
    parser.add_argument("datatypes", nargs="*", help="datatypes to resolve")
    parser.add_argument("--include-columns", nargs="+", metavar="COLUMN",
                        help="columns to add to the defaults ('all' for every column)")
    parser.add_argument("--exclude-columns", nargs="+", metavar="COLUMN",
                        help="columns to remove")
    parser.add_argument("--columns", nargs="+", metavar="COLUMN",
                        help="exact columns to output ('all' for every column)")
    parser.add_argument("--hex", action="store_true",
                        help="emit binary columns as hex strings")
    parser.add_argument("--sort", nargs="+", metavar="COLUMN",
                        help="sort columns (default: each datatype's default sort)")
    parser.add_argument("--json", action="store_true", help="print schemas as JSON")
    parser.add_argument("--list", action="store_true", help="list available datatypes")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def _print_table(table):
    print(f"schema for {table.datatype}")
    print("-" * (11 + len(table.datatype)))
    for name, ctype in table:
        print(f"- {name}: {ctype.canonical_name()}")
    if table.sort_columns:
        print(f"sorting {table.datatype} by {', '.join(table.sort_columns)}")
    print()


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.list:
        for name in REGISTRY.datatypes():
            print(f"{name}: {REGISTRY.get(name).description}")
        return 0
    if not args.datatypes:
        print("error: no datatypes given (see --list)", file=sys.stderr)
        return 2

    try:
        if args.hex:
            encoding = ColumnEncoding.HEX
        else:
            encoding = ColumnEncoding.parse(os.getenv("COLSCHEMA_ENCODING", "binary"))
        tables = resolve_schemas(
            args.datatypes,
            encoding,
            include=args.include_columns,
            exclude=args.exclude_columns,
            columns=args.columns,
            sort=args.sort,
            registry=REGISTRY,
        )
    except (SchemaError, RegistryError, ValueError) as e:
        logger.debug("Schema resolution failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps([t.to_dict() for t in tables.values()], indent=2))
    else:
        for table in tables.values():
            _print_table(table)
    return 0


if __name__ == "__main__":
    sys.exit(main())
