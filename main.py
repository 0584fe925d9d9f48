"""
CLI entrypoint for taxonomy load/store.

Commands:
- load [toml|json]: read the taxonomy collection and print it as an editable
  path-keyed document on stdout
- store [toml|json]: read a document from stdin (or --input) and replace the
  taxonomy collection with it
- check [toml|json]: validate a document without touching the database

Logs go to stderr (and optionally a rotating file) so `load` output can be
redirected straight into a file.
"""

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from application import check_taxonomy, load_taxonomy, store_taxonomy
from domain.taxonomy import TaxonomyError
from infrastructure.config import StoreBackend, TextFormat, load_store_config
from infrastructure.constants import STORE_CONFIG_FILE
from infrastructure.io import ensure_exists, read_text
from infrastructure.observability import clear_log_context, configure_logging, set_log_context
from infrastructure.stores import StoreError, make_store

logger = logging.getLogger(__name__)

LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _common_args() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(add_help=False)
    p.add_argument(
        "--config",
        type=str,
        default=str(STORE_CONFIG_FILE),
        help="Path to store.yaml (default: configs/store.yaml; skipped if missing)",
    )
    p.add_argument(
        "--env",
        type=str,
        default=None,
        help="Path to .env file (default: search for .env)",
    )
    p.add_argument(
        "--backend",
        choices=[b.value for b in StoreBackend],
        default=None,
        help="Record store backend (memory: dry run, nothing persisted)",
    )
    p.add_argument("-H", "--host", type=str, default=None, help="mongodb host to connect to")
    p.add_argument("--port", type=int, default=None, help="server port")
    p.add_argument("-d", "--db", type=str, default=None, help="database to use")
    p.add_argument("-c", "--collection", type=str, default=None, help="collection to use")
    p.add_argument("--console-level", type=str, default="INFO", choices=LEVELS, help="Console log level")
    p.add_argument("--log-file", type=str, default=None, help="Also log to this file (rotating)")
    return p


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    common = _common_args()
    formats = [f.value for f in TextFormat]

    p = argparse.ArgumentParser(
        description="Convert a taxonomy between its database collection and an editable document"
    )
    sub = p.add_subparsers(dest="command", required=True)

    load = sub.add_parser("load", parents=[common], help="Print the taxonomy collection as a document")
    load.add_argument("format", nargs="?", choices=formats, default=None, help="Document format (default: from config)")

    store = sub.add_parser("store", parents=[common], help="Replace the taxonomy collection with a document")
    store.add_argument("format", nargs="?", choices=formats, default=None, help="Document format (default: from config)")
    store.add_argument("-i", "--input", type=str, default=None, help="Read the document from this file instead of stdin")
    store.add_argument(
        "--no-verify",
        action="store_true",
        help="Skip checking that every path resolves before writing.",
    )

    check = sub.add_parser("check", parents=[common], help="Validate a document without touching the database")
    check.add_argument("format", nargs="?", choices=formats, default=None, help="Document format (default: from config)")
    check.add_argument("-i", "--input", type=str, default=None, help="Read the document from this file instead of stdin")

    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    if args.env is not None:
        env_file = Path(args.env)
        ensure_exists(env_file, "environment variables file")
        load_dotenv(env_file, override=True)
    else:
        load_dotenv()

    configure_logging(
        log_file=Path(args.log_file) if args.log_file else None,
        console_level=getattr(logging, args.console_level),
    )

    set_log_context(command=args.command)
    try:
        cfg = load_store_config(
            Path(args.config),
            overrides={
                "backend": args.backend,
                "host": args.host,
                "port": args.port,
                "database": args.db,
                "collection": args.collection,
            },
        )
        fmt = TextFormat(args.format) if args.format else cfg.format

        set_log_context(collection=cfg.collection)
        logger.debug("Resolved store config: %s", cfg.model_dump(mode="json", exclude={"uri"}))

        if args.command == "check":
            check_taxonomy(read_text(Path(args.input) if args.input else None), fmt)
            return 0

        if args.command == "store":
            # Finish reading stdin before opening a connection
            text = read_text(Path(args.input) if args.input else None)
            with make_store(cfg) as store:
                store_taxonomy(store, text, fmt, verify=not args.no_verify)
            return 0

        with make_store(cfg) as store:
            text = load_taxonomy(store, fmt)
        sys.stdout.write(text)
        return 0
    except (TaxonomyError, StoreError, FileNotFoundError, ValueError) as e:
        logger.error("%s failed: %s", args.command, e)
        return 1
    finally:
        clear_log_context()


if __name__ == "__main__":
    sys.exit(main())
