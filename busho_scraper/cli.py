# -*- coding: utf-8 -*-

"""
Batch driver.

Usage:
  busho-scrape 奇才
  busho-scrape 奇才 test.json --out out/kisai.json
  busho-scrape               # lists the categories of characters.json

The JSON result (sorted by 没年) goes to stdout unless --out is given;
logs go to stderr.
"""

import argparse
import os
import sys
from typing import List, Optional

from .config import Config
from .errors import BatchAborted, ConfigError, SourceError
from .extract import CharacterExtractor
from .fetch import WikiClient
from .log import get_logger, setup_logging
from .output import save_json, to_json
from .pipeline import scrape_batch
from .sources import describe_categories, load_categories, load_targets

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="busho-scrape", description="Scrape character sheets from the wiki.")
    ap.add_argument("category", nargs="?", help="Category name in the input JSON")
    ap.add_argument("json_file", nargs="?", help="Input JSON (category -> names), default characters.json")
    ap.add_argument("--out", default="", help="Write the result here instead of stdout")
    ap.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    ap.add_argument("--log-file", default=None, help="Also log (DEBUG) to this file")
    ap.add_argument("--quiet", action="store_true", help="No console logging")
    return ap


def show_categories(json_file: str) -> None:
    try:
        categories = load_categories(json_file)
    except SourceError as e:
        print(f"{json_file}: {e}", file=sys.stderr)
        return
    print(describe_categories(categories) + "\n", file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    setup_logging(level=args.log_level, log_file=args.log_file, quiet=args.quiet)

    try:
        cfg = Config.from_env()
    except ConfigError as e:
        logger.error("configuration error: %s", e)
        return 1

    json_file = args.json_file or cfg.default_json_file

    if not args.category:
        show_categories(json_file)
        ap.print_usage(sys.stderr)
        return 2

    try:
        urls = load_targets(json_file, args.category, cfg.base_url)
    except SourceError as e:
        logger.error("could not load characters: %s", e)
        if "available" in e.details:
            show_categories(json_file)
        return 1

    logger.info("category %r: %d characters", args.category, len(urls))

    client = WikiClient(cfg)
    extractor = CharacterExtractor(derived_year_offset=cfg.derived_year_offset)

    try:
        result = scrape_batch(urls, client, extractor)
    except BatchAborted as e:
        logger.critical("%s (%s)", e.message, e.cause)
        return 1

    text = to_json(result.records, cfg.derived_year_offset)
    if args.out:
        save_json(args.out, text)
        logger.info("wrote %s (characters=%d, failed=%d)", os.path.abspath(args.out),
                    len(result.records), len(result.failures))
    else:
        print(text)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
