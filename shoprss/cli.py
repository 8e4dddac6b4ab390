"""Command line entry point."""
import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from shoprss.config import Settings, get_settings
from shoprss.core.feed.models import FeedConfig
from shoprss.core.feed.service import generate_feed
from shoprss.core.shop_client import ShopClient

logger = logging.getLogger(__name__)

USAGE = """\
Usage:
  shop-rss                      # print RSS XML to stdout
  shop-rss -o feed.xml          # write to file
  shop-rss --serve 8080         # HTTP server on port 8080
"""


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="shop-rss",
        description="Fortnite item shop RSS feed generator",
        usage=USAGE,
        add_help=False,
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Write the feed to this file instead of stdout",
    )
    parser.add_argument(
        "--serve",
        type=int,
        default=None,
        metavar="PORT",
        help="Run an HTTP server on PORT; every request rebuilds the feed",
    )
    parser.add_argument(
        "--host",
        default=None,
        help="Interface to bind in server mode (default from SHOP_RSS_HOST)",
    )
    parser.add_argument(
        "-h",
        "--help",
        action="store_true",
        help="Show usage and exit",
    )
    return parser.parse_args(argv)


def setup_logging(level: str) -> None:
    """Log to stderr so stdout only carries the feed."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


async def render_feed(settings: Settings) -> str:
    """One fetch+build cycle."""
    async with ShopClient.from_settings(settings) as client:
        return await generate_feed(client, FeedConfig.from_settings(settings))


def serve(host: str, port: int) -> None:
    """Run the feed server until interrupted."""
    import uvicorn

    from shoprss.main import app

    logger.info(f"Serving shop RSS at http://{host}:{port}/")
    uvicorn.run(app, host=host, port=port)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    if args.help:
        print(USAGE, end="")
        return 0

    settings = get_settings()
    setup_logging(settings.log_level)

    if args.serve:
        serve(args.host or settings.host, args.serve)
        return 0

    try:
        xml_string = asyncio.run(render_feed(settings))
        if args.output:
            args.output.write_text(xml_string, encoding="utf-8")
            print(f"Wrote RSS feed to {args.output}", file=sys.stderr)
        else:
            sys.stdout.write(xml_string)
    except Exception as e:
        logger.debug("Feed generation failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
