"""Console entry point for the Bookmark Shell application."""

import argparse
import logging
import sys
from typing import List, Optional

from .config import configure_logging, get_settings
from .models.bookmark_store import get_store
from .services.dispatcher import create_dispatcher

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bookmark-shell",
        description="Add bookmarks and list them without starting the GUI",
    )
    parser.add_argument("urls", nargs="*", help="URLs to bookmark")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Add the given URLs concurrently, then print every bookmark."""
    args = build_parser().parse_args(argv)

    settings = get_settings()
    configure_logging(settings.log_level)

    failed = False
    with create_dispatcher(get_store(), settings) as dispatcher:
        futures = [dispatcher.invoke("add_bookmark", url=url) for url in args.urls]
        for url, future in zip(args.urls, futures):
            result = future.result()
            if not result.ok:
                print(f"Could not add {url}: {result.error}", file=sys.stderr)
                failed = True

        result = dispatcher.call("get_bookmarks")

    if not result.ok:
        print(f"Could not list bookmarks: {result.error}", file=sys.stderr)
        return 1

    print(f"Bookmarks ({len(result.value)}):")
    for position, url in enumerate(result.value, start=1):
        print(f"  {position}. {url}")

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
