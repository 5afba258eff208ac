"""CLI entrypoint that prints the resolved lens style for a node."""

from __future__ import annotations

import argparse
import json
import logging

from myct.lens.engine import resolve_style
from myct.lens.models import LensDocument, NodeState
from myct.lens.registry import LensLoadError, LensRegistry, load_lens_file


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.INFO if verbose else logging.WARNING,
    )


def _load_lens(args: argparse.Namespace) -> LensDocument:
    if args.lens_file:
        return load_lens_file(args.lens_file)
    registry = LensRegistry.default()
    return registry.get(args.lens) if args.lens else registry.first()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Resolve the lens style applied to a node type/role")
    parser.add_argument("--type", required=True, dest="node_type", help="Node type, e.g. text or stack")
    parser.add_argument("--role", default=None, help="Node role, e.g. heading-2")
    parser.add_argument(
        "--state",
        default=NodeState.NORMAL.value,
        choices=[state.value for state in NodeState],
        help="Interaction state",
    )
    parser.add_argument("--mobile", action="store_true", help="Resolve for the mobile viewport")
    parser.add_argument("--verbose", action="store_true", help="Log lens loading details to stderr")
    lens_group = parser.add_mutually_exclusive_group()
    lens_group.add_argument("--lens", default=None, help="Built-in lens name or slug")
    lens_group.add_argument("--lens-file", default=None, help="Path to a JSON lens file")
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        lens = _load_lens(args)
    except (KeyError, LensLoadError) as exc:
        message = exc.args[0] if isinstance(exc, KeyError) else str(exc)
        print(json.dumps({"error": message}, ensure_ascii=True, indent=2))
        return 1

    node = {"type": args.node_type, "role": args.role}
    styles = resolve_style(node, lens, NodeState(args.state), args.mobile)

    payload = {
        "lens": lens.name,
        "node": node,
        "state": args.state,
        "is_mobile": args.mobile,
        "styles": styles,
    }
    print(json.dumps(payload, ensure_ascii=True, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
