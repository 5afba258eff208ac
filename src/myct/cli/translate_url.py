"""CLI entrypoint that translates one URL into a MYCT document."""

from __future__ import annotations

import argparse
from dataclasses import replace
import json
import logging

from dotenv import load_dotenv

load_dotenv()

from myct.translator.config import TranslatorSettings
from myct.translator.fetch import HttpPageFetcher, PageFetcher
from myct.translator.translator import PageTranslator


def _build_fetcher(settings: TranslatorSettings) -> PageFetcher:
    return HttpPageFetcher(settings)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.INFO if verbose else logging.WARNING,
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Fetch a web page and print its MYCT document as JSON")
    parser.add_argument("--url", required=True, help="Page URL; https:// is assumed when no scheme is given")
    parser.add_argument("--timeout", type=float, default=None, help="Fetch timeout in seconds (overrides env)")
    parser.add_argument("--verbose", action="store_true", help="Log progress to stderr")
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        settings = TranslatorSettings.from_env()
        if args.timeout is not None:
            if args.timeout < 1.0:
                raise ValueError("--timeout must be >= 1.0")
            settings = replace(settings, fetch_timeout_seconds=args.timeout)
    except ValueError as exc:
        print(json.dumps({"url": args.url, "error": str(exc)}, ensure_ascii=True, indent=2))
        return 2

    result = PageTranslator(_build_fetcher(settings)).translate(args.url)

    payload = {"url": args.url, **result.to_dict()}
    print(json.dumps(payload, ensure_ascii=True, indent=2))
    return 0 if result.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
