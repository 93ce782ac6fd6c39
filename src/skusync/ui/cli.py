from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from skusync.app import INVENTORY_LEVELS_UPDATE, reconcile_inventory_webhook
from skusync.config import configure_logging

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Mirror inventory levels across same-SKU items")
    subparsers = parser.add_subparsers(dest="command", required=True)

    reconcile = subparsers.add_parser(
        "reconcile",
        help="Replay one inventory_levels/update webhook payload",
    )
    reconcile.add_argument(
        "payload",
        nargs="?",
        default="-",
        help="Path to the JSON webhook body, or '-' for stdin (default: %(default)s)",
    )
    reconcile.add_argument(
        "--topic",
        type=str,
        default=INVENTORY_LEVELS_UPDATE,
        help="Webhook topic the payload was delivered under (default: %(default)s)",
    )
    reconcile.add_argument(
        "--verbose",
        action="store_true",
        help="Log raw payloads and debug details",
    )

    return parser.parse_args(list(argv))


def _read_payload(source: str) -> object:
    try:
        text = sys.stdin.read() if source == "-" else Path(source).read_text(encoding="utf-8")
    except OSError as exc:
        raise ValueError(f"Cannot read payload from {source}: {exc}") from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON payload: {exc}") from exc


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        payload = _read_payload(parsed_args.payload)
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(2)

    outcome = reconcile_inventory_webhook(payload, topic=parsed_args.topic)
    log.info("Reconciliation finished: %s", outcome.state)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
