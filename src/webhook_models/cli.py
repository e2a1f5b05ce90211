"""
Command-line interface for webhook_models.

Lets you inspect the registered record types and check a JSON payload
against one of them, which is handy when debugging what a client actually
sends or receives.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from webhook_models.bootstrap import load_builtin_models
from webhook_models.core.exceptions import WebhookModelsException
from webhook_models.core.logger import configure_root_logger, get_logger
from webhook_models.core.record import Record
from webhook_models.registry import RecordRegistry
from webhook_models.schema.builder import load_schema_document, register_schema_document

logger = get_logger(__name__)


def prepare_registry(schema_paths: Sequence[str] = ()) -> List[str]:
    """Load built-in models plus any schema documents; return registered names."""
    load_builtin_models()
    for path in schema_paths:
        document = load_schema_document(path)
        register_schema_document(document, overwrite=True)
        logger.info(f"Loaded schema document {path}")
    return RecordRegistry.names()


def describe_record(name: str) -> List[Dict[str, Any]]:
    """
    Return the field classification table of a registered record type.

    Example:
        >>> describe_record("EventTypeUpdate")[0]
        {'name': 'archived', 'json_key': 'archived', 'kind': 'optional', 'default': False}
    """
    record_class = RecordRegistry.get(name)
    rows = []
    for spec in record_class.field_specs():
        row: Dict[str, Any] = {"name": spec.name, "json_key": spec.json_key, "kind": spec.kind.value}
        if spec.has_default:
            row["default"] = spec.default
        rows.append(row)
    return rows


def decode_payload(name: str, payload_path: str) -> Record:
    """
    Decode a JSON payload file (``-`` for stdin) as the named record type.

    Raises:
        RecordRegistryError: If no record type has that name
        MalformedInputError: If the payload does not match the record shape
        FileNotFoundError: If the payload file doesn't exist
    """
    record_class = RecordRegistry.get(name)

    if payload_path == "-":
        raw = sys.stdin.buffer.read()
    else:
        payload_file = Path(payload_path)
        if not payload_file.exists():
            raise FileNotFoundError(f"Payload file not found: {payload_path}")
        raw = payload_file.read_bytes()

    logger.debug(f"Decoding {len(raw)} bytes as {name}")
    return record_class.from_json(raw)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="webhook-models",
        description="Inspect webhook API record types and check payloads against them",
    )
    parser.add_argument(
        "--schema",
        action="append",
        default=[],
        metavar="PATH",
        help="Register extra record types from a JSON/YAML schema document (repeatable)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    subparsers.add_parser("list", help="List registered record types")

    describe_parser = subparsers.add_parser("describe", help="Show the fields of a record type")
    describe_parser.add_argument("record", help="Record type name, e.g. EventTypeUpdate")

    decode_parser = subparsers.add_parser(
        "decode",
        help="Decode a JSON payload and print it re-encoded",
    )
    decode_parser.add_argument("record", help="Record type name, e.g. EventTypeUpdate")
    decode_parser.add_argument("payload", help="Path to a JSON payload, or - for stdin")

    return parser


def cli(argv: Optional[Sequence[str]] = None) -> None:
    """
    Command-line interface for webhook_models.

    Supports subcommands:
    - list: Print registered record type names
    - describe: Print a record type's field table
    - decode: Decode a payload and print its canonical encoding

    Usage:
        webhook-models list
        webhook-models describe EventTypeUpdate
        webhook-models --schema extra.yaml decode MyEvent payload.json
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_root_logger("DEBUG" if args.verbose else "INFO")

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    try:
        names = prepare_registry(args.schema)

        if args.command == "list":
            for name in names:
                print(name)

        elif args.command == "describe":
            print(json.dumps(describe_record(args.record), indent=2, default=str))

        elif args.command == "decode":
            record = decode_payload(args.record, args.payload)
            print(json.dumps(record.to_dict(), indent=2))

    except (WebhookModelsException, FileNotFoundError) as e:
        logger.error(f"{args.command} failed: {e}")
        sys.exit(1)

    sys.exit(0)


if __name__ == "__main__":
    cli()
