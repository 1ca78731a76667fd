from __future__ import annotations

import argparse
from pathlib import Path

from mavka_did import parse
from mavka_did.testing import generate_corpus_files


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="generate_corpus", description="Write generated Did documents")
    ap.add_argument("--seed", type=int, default=1)
    ap.add_argument("--count", type=int, default=1000)
    ap.add_argument("--max-depth", type=int, default=4, help="Nesting depth of generated containers")
    ap.add_argument("--check", action="store_true", help="Parse every document before writing it")
    ap.add_argument("--out", default="tests/fixtures/generated_corpus")
    args = ap.parse_args(argv)

    out_dir = Path(args.out).resolve() / f"seed_{args.seed}_depth_{args.max_depth}_count_{args.count}"
    out_dir.mkdir(parents=True, exist_ok=True)

    files = generate_corpus_files(seed=args.seed, count=args.count, max_depth=args.max_depth)
    for rel, src in files:
        if args.check:
            parse(src, max_depth=args.max_depth)
        (out_dir / rel).write_text(src, encoding="utf-8")

    print(str(out_dir))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
