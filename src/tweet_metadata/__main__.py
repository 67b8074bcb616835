import argparse
import asyncio
import json
import logging
import sys
from dataclasses import replace

from tweet_metadata.config import load_config
from tweet_metadata.twitter.source import extract


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tweet_metadata",
        description="Print normalized metadata for a tweet or Twitter image URL.",
    )
    parser.add_argument("url", help="tweet, image or legacy proxy URL")
    parser.add_argument("--referer", default=None, help="page the URL was found on")
    parser.add_argument("--no-fetch", action="store_true", help="do not call the Twitter API")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config()
    except RuntimeError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        level=getattr(logging, config.log_level),
    )

    if args.no_fetch:
        config = replace(config, fetch=False)

    metadata = asyncio.run(extract(args.url, args.referer, config))
    print(json.dumps(metadata.to_dict(), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
