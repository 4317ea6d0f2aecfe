import argparse
import os
import sys
from typing import List, Optional

from .config import NSConfig, OUTPUT_FORMATS
from .errors import NamespaceError
from .parser import Namespace, parse_lines
from .reader import iter_file_lines, open_source, read_lines
from .utils.yaml_utils import render, summarize

def _dbg(enabled: bool, *args):
    if enabled:
        print("[app]", *args, file=sys.stderr)

def _load(args, cfg: NSConfig) -> Namespace:
    delimiter = args.delimiter if args.delimiter is not None else cfg.delimiter
    _dbg(args.verbose, f"input={args.file or '-'} delimiter={delimiter!r}")
    if args.file in (None, "-"):
        with open_source(None, encoding=cfg.encoding) as f:
            ns = parse_lines(read_lines(f), delimiter, verbose=args.verbose)
    else:
        ns = parse_lines(iter_file_lines(args.file, cfg.encoding), delimiter, verbose=args.verbose)
    _dbg(args.verbose, f"namespaces: {len(ns)}")
    return ns

def cmd_parse(args, cfg: NSConfig) -> int:
    ns = _load(args, cfg)
    fmt = args.format or cfg.output_format
    text = render(ns, fmt, indent=cfg.indent, sort_keys=cfg.sort_keys)
    print(text)
    if args.out:
        out_dir = os.path.dirname(args.out)
        if out_dir:
            os.makedirs(out_dir, exist_ok=True)
        with open(args.out, "w", encoding="utf-8") as f:
            f.write(text + "\n")
        print(f"Wrote {args.out}", file=sys.stderr)
    return 0

def cmd_keys(args, cfg: NSConfig) -> int:
    for line in summarize(_load(args, cfg)):
        print(line)
    return 0

def cmd_show(args, cfg: NSConfig) -> int:
    ns = _load(args, cfg)
    if args.name not in ns:
        print(f"error: no namespace named {args.name!r} (have: {', '.join(ns) or 'none'})", file=sys.stderr)
        return 1
    for clause in ns[args.name]:
        print(clause)
    return 0

def _add_file_arg(p: argparse.ArgumentParser) -> None:
    p.add_argument("file", nargs="?", default="-", help="input file, '-' for stdin")

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="nsparse", description="Group clause lines into [namespace] sections")
    p.add_argument("--root", default=None, help="directory holding .nsparse/config.yaml (default: cwd)")
    sub = p.add_subparsers(dest="cmd", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-d", "--delimiter", help="header key delimiter (default from config, '/')")
    common.add_argument("-v", "--verbose", action="store_true")

    p_parse = sub.add_parser("parse", parents=[common], help="print the namespace mapping")
    _add_file_arg(p_parse)
    p_parse.add_argument("-f", "--format", choices=OUTPUT_FORMATS, help="output format")
    p_parse.add_argument("--out", help="also write the output to this file")
    p_parse.set_defaults(func=cmd_parse)

    p_keys = sub.add_parser("keys", parents=[common], help="list namespaces with clause counts")
    _add_file_arg(p_keys)
    p_keys.set_defaults(func=cmd_keys)

    p_show = sub.add_parser("show", parents=[common], help="print the clauses of one namespace")
    p_show.add_argument("name", help="namespace key, e.g. global")
    _add_file_arg(p_show)
    p_show.set_defaults(func=cmd_show)
    return p

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        cfg = NSConfig.from_root(args.root)
        if cfg.debug:
            args.verbose = True
        return args.func(args, cfg)
    except FileNotFoundError as e:
        print(f"error: input not found: {e.filename}", file=sys.stderr)
        return 2
    except (NamespaceError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

if __name__ == "__main__":
    sys.exit(main())
