from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict, is_dataclass, replace
from pathlib import Path

from .codeframe import generate_code_frame
from .diff import render_diff
from .options import ReportOptions
from .spans import Position
from .stack import parse_stack
from .style import palette_for


def _to_jsonable(obj):
    if is_dataclass(obj):
        return {k: _to_jsonable(v) for k, v in asdict(obj).items()}
    if isinstance(obj, (list, tuple)):
        return [_to_jsonable(x) for x in obj]
    return obj


def _options(args: argparse.Namespace) -> ReportOptions:
    opts = ReportOptions.from_env()
    if getattr(args, "context", None) is not None:
        opts = replace(opts, context=args.context)
    if getattr(args, "size", None) is not None:
        opts = replace(opts, diff_size=args.size)
    if args.color:
        opts = replace(opts, color=True)
    return opts


def _cmd_frame(args: argparse.Namespace) -> int:
    opts = _options(args)
    source = Path(args.file).read_text(encoding="utf-8")
    start = Position(line=args.line, column=args.column)
    end = None
    if args.end_line is not None:
        end = Position(line=args.end_line, column=args.end_column or 0)
    print(generate_code_frame(source, start, end, opts.context, palette=palette_for(opts.color)))
    return 0


def _cmd_diff(args: argparse.Namespace) -> int:
    opts = _options(args)
    actual = Path(args.actual).read_text(encoding="utf-8")
    expected = Path(args.expected).read_text(encoding="utf-8")
    print(render_diff(actual, expected, size=opts.diff_size, palette=palette_for(opts.color)))
    return 0


def _cmd_stack(args: argparse.Namespace) -> int:
    text = Path(args.file).read_text(encoding="utf-8") if args.file else sys.stdin.read()
    frames = parse_stack(text)
    if args.json:
        print(json.dumps(_to_jsonable(frames), indent=2, sort_keys=True))
    else:
        for f in frames:
            print(f"{f.method}\t{f.format()}")
    return 0


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="errorframe", description="Render code frames, value diffs and stack traces")
    sub = ap.add_subparsers(dest="command", required=True)

    fr = sub.add_parser("frame", help="Show the source around a position")
    fr.add_argument("file", help="Source file")
    fr.add_argument("--line", type=int, required=True, help="1-based line")
    fr.add_argument("--column", type=int, default=0, help="0-based column (default: 0)")
    fr.add_argument("--end-line", type=int, help="1-based line where the marked span ends")
    fr.add_argument("--end-column", type=int, help="0-based column where the marked span ends")
    fr.add_argument("-C", "--context", type=int, help="Lines of context (default: 2)")
    fr.add_argument("--color", action="store_true", help="Emit ANSI colours")
    fr.set_defaults(func=_cmd_frame)

    df = sub.add_parser("diff", help="Diff two files as actual/expected values")
    df.add_argument("actual")
    df.add_argument("expected")
    df.add_argument("--size", type=int, help="Characters kept per side (default: 2048)")
    df.add_argument("--color", action="store_true", help="Emit ANSI colours")
    df.set_defaults(func=_cmd_diff)

    st = sub.add_parser("stack", help="Parse a stack trace")
    st.add_argument("file", nargs="?", help="Stack trace file (default: stdin)")
    st.add_argument("--json", action="store_true", help="Print frames as JSON")
    st.set_defaults(func=_cmd_stack)

    args = ap.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
