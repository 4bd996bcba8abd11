from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from typing import List, Optional

import requests

from .clients import MODES, build_client
from .errors import SankakuError
from .html_client import SankakuHtmlClient


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sankaku", description="Fetch post metadata from Sankaku."
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.add_argument(
        "--timeout", type=float, default=None, help="per-request timeout in seconds"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    search = sub.add_parser("search", help="search posts by tag query")
    search.add_argument("keyword", help='tag query, e.g. "rating:s"')
    search.add_argument("--page", type=int, default=1)
    search.add_argument("--mode", choices=MODES, default=None)

    show = sub.add_parser("show", help="scrape a single post page")
    show.add_argument("post_id")

    return parser


def _run(args: argparse.Namespace) -> object:
    if args.command == "search":
        client = build_client(args.mode)
        if isinstance(client, SankakuHtmlClient):
            posts = client.search_post_infos(args.keyword, args.page, timeout=args.timeout)
        else:
            posts = client.search_posts(args.keyword, args.page, timeout=args.timeout)
        print(f"[sankaku] Retrieved {len(posts)} posts", file=sys.stderr)
        return [asdict(p) for p in posts]

    client = build_client("html")
    return asdict(client.get_post(args.post_id, timeout=args.timeout))


def main(argv: Optional[List[str]] = None) -> None:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        result = _run(args)
    except (SankakuError, requests.RequestException, ValueError) as exc:
        print(f"[sankaku] ERROR: {exc}", file=sys.stderr)
        sys.exit(1)

    json.dump(result, sys.stdout, ensure_ascii=False, indent=2)
    sys.stdout.write("\n")


if __name__ == "__main__":
    main()
