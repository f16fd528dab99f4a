from __future__ import annotations

import argparse
import logging
import sys

from .client import fetch_bundle
from .exceptions import Ans104Error, reason_code_for_exception
from .indexer import index_bundle

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="ans104-index", description="ANS-104 bundle indexer for Arweave"
    )
    ap.add_argument("tx_id", help="The transaction ID of the ANS-104 bundle")
    ap.add_argument("-o", "--output", required=True, help="File to write the parsed items to")
    ap.add_argument("--gateway", help="Gateway base URL (default: $ANS104_GATEWAY or arweave.net)")
    ap.add_argument("--timeout", type=float, help="Request timeout in seconds")
    ap.add_argument(
        "--strict",
        action="store_true",
        help="Fail when item sizes do not cover the container or tag counts disagree",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    print(f"Indexing bundle with transaction ID: {args.tx_id}")
    try:
        items = index_bundle(
            args.tx_id,
            args.output,
            gateway=args.gateway,
            timeout=args.timeout,
            strict=args.strict,
            fetch=fetch_bundle,
        )
    except Ans104Error as e:
        print(f"error [{reason_code_for_exception(e)}]: {e}", file=sys.stderr)
        return 1
    logger.info("indexed %d items from %s", len(items), args.tx_id)
    print(f"Bundle indexed successfully and saved to: {args.output}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
