from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from splunk_hec.collector import HTTPCollector
from splunk_hec.config import default_config_path, init_config, load_config
from splunk_hec.errors import CollectorError
from splunk_hec.logging import configure_logging

logger = logging.getLogger("splunk_hec")


def parse_fields(pairs: list[str]) -> dict[str, str]:
    fields: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"expected KEY=VALUE, got {pair!r}")
        fields[key] = value
    return fields


def cmd_init(args: argparse.Namespace) -> int:
    path = init_config(Path(args.config).expanduser())
    print(f"initialized config: {path}")
    return 0


def cmd_send(args: argparse.Namespace) -> int:
    try:
        fields = parse_fields(args.fields)
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return 2

    config = load_config(Path(args.config).expanduser())
    collector = HTTPCollector(config)
    try:
        collector.log(fields)
    except CollectorError as exc:
        logger.debug("send failed kind=%s", exc.kind.value)
        print(str(exc), file=sys.stderr)
        return 1
    print("sent")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="splunk-hec")
    parser.add_argument("--verbose", action="store_true")
    subparsers = parser.add_subparsers(dest="command", required=True)

    init_parser = subparsers.add_parser("init", help="write a template config file")
    init_parser.add_argument("--config", type=str, default=str(default_config_path()))
    init_parser.set_defaults(func=cmd_init)

    send_parser = subparsers.add_parser("send", help="send one event built from KEY=VALUE pairs")
    send_parser.add_argument("--config", type=str, default=str(default_config_path()))
    send_parser.add_argument("fields", nargs="*", metavar="KEY=VALUE")
    send_parser.set_defaults(func=cmd_send)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(bool(args.verbose))
    return int(args.func(args))
