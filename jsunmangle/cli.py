"""Command line entry point for the unmangler."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

import esprima

from .exceptions import UnmangleError
from .name_pool import NamePool
from .options import UnmangleOptions, keep_names
from .traverse import from_dict, to_dict
from .unmangler import Unmangler
from .utils import read_source, setup_logging, write_output

LOG = logging.getLogger(__name__)


def load_tree(content: str, filename: str, *, module: bool = False) -> Any:
    """Parse JavaScript source, or load an ESTree JSON document."""

    if filename.endswith(".json"):
        tree = from_dict(json.loads(content))
        if getattr(tree, "type", None) != "Program":
            raise ValueError("JSON input must contain an ESTree Program")
        return tree
    if module:
        return esprima.parseModule(content)
    return esprima.parseScript(content)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Rename mangled JavaScript identifiers to readable words")
    parser.add_argument("input", help="JavaScript source or ESTree JSON (*.json)")
    parser.add_argument("-o", "--output", default=None, help="write the renamed ESTree JSON here")
    parser.add_argument("--module", action="store_true", help="parse the input as an ES module")
    parser.add_argument("--prefix", default="", help="prefix for every generated name")
    parser.add_argument("--keep", action="append", default=[], metavar="NAME", help="never rename NAME")
    parser.add_argument("--seed", type=int, default=None, help="seed the word generator")
    parser.add_argument("--report", action="store_true", help="print the rename mapping to stderr")
    parser.add_argument("--indent", type=int, default=2)
    parser.add_argument("-v", "--verbose", action="store_true")

    args = parser.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    content = read_source(args.input)
    if content is None:
        return 1

    try:
        tree = load_tree(content, args.input, module=args.module)
    except (esprima.Error, ValueError) as exc:
        LOG.error("Failed to parse %s: %s", args.input, exc)
        return 1

    options = UnmangleOptions(rename_prefix=args.prefix, should_rename=keep_names(*args.keep))
    unmangler = Unmangler(options, pool=NamePool(seed=args.seed))
    try:
        result = unmangler.run(tree)
    except UnmangleError as exc:
        LOG.error("Failed to unmangle %s: %s", args.input, exc)
        return 2

    rendered = json.dumps(to_dict(result), indent=args.indent if args.indent > 0 else None) + "\n"
    if args.output:
        if not write_output(args.output, rendered):
            return 1
    else:
        sys.stdout.write(rendered)

    if args.report:
        sys.stderr.write(unmangler.get_mapping_report() + "\n")
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI wrapper
    raise SystemExit(main())
