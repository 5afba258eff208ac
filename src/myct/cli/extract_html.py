"""CLI entrypoint for running the extractor over a saved HTML file."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from myct.extraction.extractor import extract_content
from myct.model.nodes import MyctNode, stack_node, text_node
from myct.model.outline import build_outline


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.INFO if verbose else logging.WARNING,
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Extract MYCT content from a local HTML file")
    parser.add_argument("--path", required=True, help="HTML file to read")
    parser.add_argument("--base-url", required=True, help="Absolute URL the page was served from")
    parser.add_argument("--encoding", default="utf-8", help="File encoding")
    parser.add_argument("--verbose", action="store_true", help="Log extraction details to stderr")
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    source = Path(args.path)
    try:
        html = source.read_text(encoding=args.encoding, errors="replace")
    except (OSError, LookupError) as exc:
        print(json.dumps({"path": str(source), "error": f"Failed to read HTML file: {exc}"}, ensure_ascii=True, indent=2))
        return 1

    page = extract_content(html, args.base_url)
    outline_nodes: list[MyctNode] = [text_node(page.title, "page-title")] if page.title else []
    outline = build_outline(stack_node([*outline_nodes, *page.content]))

    payload = {
        "base_url": args.base_url,
        **page.to_dict(),
        "outline": [entry.to_dict() for entry in outline],
    }
    print(json.dumps(payload, ensure_ascii=True, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
