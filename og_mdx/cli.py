"""Command-line entry point for og-mdx."""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from typing import Any, Dict, Sequence

from .config import FetchConfig
from .errors import FetchTimeoutError
from .fetcher import fetch_with_config

logger = logging.getLogger("og_mdx.cli")

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_TIMEOUT = 2


def summarize(url: str, result) -> Dict[str, Any]:
    """Build the JSON-able record printed for a single URL."""
    if result is False:
        return {
            "url": url,
            "found": False,
            "valid": False,
            "type": None,
            "schema": None,
            "attributes": {},
        }
    return {
        "url": url,
        "found": True,
        "valid": result.valid,
        "type": result.type,
        "schema": result.schema,
        "attributes": result.to_dict(),
    }


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Fetch web pages and print their Open Graph metadata as JSON.",
    )
    parser.add_argument("urls", nargs="+", help="One or more URLs to inspect")
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Connect and read timeout in seconds; expiry is reported as an error",
    )
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Fall back to <meta name> tags and the canonical link, and keep incomplete results",
    )
    parser.add_argument(
        "--proxy",
        default=None,
        help="Proxy URL used for these requests",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser.parse_args(list(sys.argv[1:] if argv is None else argv))


def run(args: argparse.Namespace) -> int:
    config = FetchConfig(
        timeout=args.timeout,
        strict=not args.lenient,
        proxy=args.proxy,
    )

    status = EXIT_OK
    overall_start = time.perf_counter()
    for url in args.urls:
        try:
            result = fetch_with_config(url, config)
        except FetchTimeoutError as exc:
            logger.error("%s", exc)
            status = max(status, EXIT_TIMEOUT)
            continue
        if result is False:
            status = max(status, EXIT_NOT_FOUND)
        sys.stdout.write(json.dumps(summarize(url, result), sort_keys=True) + "\n")
    sys.stdout.flush()

    logger.debug(
        "Finished %d URL(s) in %.2fs", len(args.urls), time.perf_counter() - overall_start
    )
    return status


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )
    sys.exit(run(args))


if __name__ == "__main__":
    main()
