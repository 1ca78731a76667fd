from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import fields, is_dataclass
from enum import Enum

from .api import parse_file
from .errors import DidError
from .format import display
from .logging_config import configure_logging


logger = logging.getLogger(__name__)


def _to_jsonable(obj):
    if is_dataclass(obj):
        # Tag nodes with their kind; contexts are kept so positions show up too.
        out = {f.name: _to_jsonable(getattr(obj, f.name)) for f in fields(obj)}
        kind = getattr(type(obj), "kind", None)
        if kind is not None:
            out["kind"] = kind.value
        return out
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, (tuple, list)):
        return [_to_jsonable(x) for x in obj]
    return obj


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="mavka-did", description="Parse Did documents")
    ap.add_argument("files", nargs="+", help="Did files to parse")
    ap.add_argument("--json", action="store_true", help="Print parsed tree as JSON")
    ap.add_argument("--compact", action="store_true", help="Render each tree on one line")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = ap.parse_args(argv)

    configure_logging(args.verbose)

    status = 0
    for path in args.files:
        try:
            tree = parse_file(path)
        except (DidError, OSError, UnicodeDecodeError) as e:
            print(f"{path}: {e}", file=sys.stderr)
            status = 1
            continue
        logger.debug("parsed %s", path)
        if args.json:
            print(json.dumps(_to_jsonable(tree), indent=2, ensure_ascii=False))
        else:
            print(display(tree, pretty=not args.compact))
    return status


if __name__ == "__main__":
    raise SystemExit(main())
