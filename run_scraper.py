#!/usr/bin/env python3
"""
Command-line script to scrape metadata from local HTML files.

Usage:
    python run_scraper.py page.html
    python run_scraper.py page1.html page2.html --parser lxml
    python run_scraper.py page.html --providers jsonLd,openGraph,other --structured-data
    python run_scraper.py page*.html -o metadata.json

Provider selection falls back to GLYPTO_PROVIDERS (read from .env if
present), then to the four default providers.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from glypto.dom import PARSERS, parse_html
from glypto.exceptions import GlyptoError
from glypto.logger import setup_logger
from glypto.main import create_scraper


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Scrape title, description, image, favicon and feeds from HTML files"
    )
    parser.add_argument(
        "files",
        nargs="+",
        help="HTML files to scrape"
    )
    parser.add_argument(
        "--parser", "-p",
        choices=PARSERS,
        default="html5lib",
        help="BeautifulSoup tree builder (default: html5lib)"
    )
    parser.add_argument(
        "--providers",
        help="Comma-separated provider names, e.g. openGraph,twitter,meta,other,jsonLd"
    )
    parser.add_argument(
        "--structured-data", "-s",
        action="store_true",
        help="Also read <script type=\"application/ld+json\"> blocks"
    )
    parser.add_argument(
        "--output", "-o",
        help="Output JSON file (default: print to stdout)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose logging"
    )
    return parser


def main(argv=None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)

    # stdout carries the JSON; logs go to stderr
    setup_logger(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        stream=sys.stderr
    )

    provider_names = args.providers.split(",") if args.providers else None
    scraper = create_scraper(provider_names, scan_structured_data=args.structured_data)

    results = []

    for file_path in args.files:
        path = Path(file_path)
        print(f"Scraping: {path.name}", file=sys.stderr)

        try:
            document = parse_html(path.read_bytes(), parser=args.parser)
            metadata = scraper.scrape(document)

            results.append({
                "file": str(path),
                "status": "success",
                "metadata": metadata.to_summary().model_dump()
            })
            print(f"  ✓ {metadata.title or 'Untitled'}", file=sys.stderr)

        except (OSError, GlyptoError) as e:
            results.append({
                "file": str(path),
                "status": "error",
                "error": str(e)
            })
            print(f"  ✗ Error: {e}", file=sys.stderr)

    # ensure_ascii=False keeps non-ASCII titles readable
    output = json.dumps(results, indent=2, ensure_ascii=False)

    if args.output:
        Path(args.output).write_text(output, encoding="utf-8")
        print(f"\nSaved to: {args.output}", file=sys.stderr)
    else:
        print(output)

    return 0 if all(r["status"] == "success" for r in results) else 1


if __name__ == "__main__":
    sys.exit(main())
