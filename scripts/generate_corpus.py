"""Write the seeded module corpus, with identity source maps, for manual
inspection with `errorframe frame` or an editor's source-map tooling."""
from __future__ import annotations

import argparse
from pathlib import Path

from errorframe.testing import write_corpus


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="generate_corpus", description=__doc__)
    ap.add_argument("out", type=Path, help="Directory to fill (created if missing)")
    ap.add_argument("--seed", type=int, default=1)
    ap.add_argument("--count", type=int, default=50)
    ap.add_argument("-v", "--verbose", action="store_true", help="List every written module")
    args = ap.parse_args(argv)

    written = write_corpus(args.out.resolve(), seed=args.seed, count=args.count)
    if args.verbose:
        for p, src in written:
            print(f"{p}\t{len(src.splitlines())} lines")
    print(f"wrote {len(written)} modules and maps to {args.out.resolve()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
