# ==================================================
# shader_blob/cli.py
# ==================================================
"""Command line for permutation blobs (pack, list, extract)."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .blob_file import ShaderBlobFile
from .config import configure_logging, load_settings
from .diagnostics import format_not_found_message
from .keys import Constant
from .writer import BlobWriter, FileSink


def parse_define(text: str) -> Constant:
    name, sep, value = text.partition("=")
    if not sep or not name:
        raise ValueError(f"expected NAME=VALUE, got {text!r}")
    return Constant(name, value)


def parse_key(text: str) -> list[Constant]:
    """``"A=1 B=2"`` -> constants; an empty string is the default permutation."""
    return [parse_define(tok) for tok in text.split()]


def pack_command(args: argparse.Namespace) -> int:
    try:
        perms = [(parse_key(key), Path(src).read_bytes()) for key, src in args.perm]
    except (OSError, ValueError) as exc:
        raise SystemExit(f"[-] {exc}")
    for (key, src), (_, binary) in zip(args.perm, perms):
        if not binary:
            raise SystemExit(f"[-] {src}: empty binary for permutation {key!r}")

    with open(args.out, "wb") as f:
        writer = BlobWriter(FileSink(f))
        ok = writer.write_header()
        for constants, binary in perms:
            ok &= writer.add(constants, binary)
    if not ok:
        raise SystemExit(f"[-] failed writing {args.out}")
    print(f"[+] wrote {args.out} ({writer.count} permutations)")
    return 0


def list_command(args: argparse.Namespace) -> int:
    with ShaderBlobFile(args.path) as blob:
        if args.digests:
            for info in blob.entries():
                print(f"{info.offset:>10}  {info.data_size:>10}  {info.digest}  {info.key}")
        else:
            for key in blob.permutations():
                print(key)
    return 0


def extract_command(args: argparse.Namespace) -> int:
    try:
        constants = [parse_define(d) for d in args.define]
    except ValueError as exc:
        raise SystemExit(f"[-] {exc}")

    with ShaderBlobFile(args.path) as blob:
        res = blob.find(constants)
        if not res:
            print(format_not_found_message(blob.buf, constants), file=sys.stderr)
            return 1
        args.out.write_bytes(res.binary)
    print(f"[+] {args.path} -> {args.out} (len={len(res.binary)})")
    return 0


def build_parser(settings) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="shader-blob", description="Shader permutation blob tool")
    ap.add_argument("--log-level", default=settings.log_level)
    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("pack", help="pack binaries into a blob")
    p.add_argument("out", type=Path)
    p.add_argument("--perm", nargs=2, action="append", default=[], metavar=("KEY", "FILE"),
                   help='permutation key such as "A=1 B=2" ("" for default) and its binary')
    p.set_defaults(func=pack_command)

    p = sub.add_parser("list", help="list permutations in a blob")
    p.add_argument("path", type=Path)
    p.add_argument("--digests", action="store_true", default=settings.digests,
                   help="show offset, size and xxh64 digest of each entry")
    p.set_defaults(func=list_command)

    p = sub.add_parser("extract", help="write one permutation's binary")
    p.add_argument("path", type=Path)
    p.add_argument("-D", "--define", action="append", default=[], metavar="NAME=VALUE")
    p.add_argument("-o", "--out", type=Path, required=True)
    p.set_defaults(func=extract_command)
    return ap


def main(argv: list[str] | None = None) -> int:
    settings = load_settings()
    args = build_parser(settings).parse_args(argv)
    try:
        configure_logging(settings, args.log_level)
    except ValueError as exc:
        raise SystemExit(f"[-] {exc}")
    try:
        return args.func(args)
    except OSError as exc:
        raise SystemExit(f"[-] {exc}")


if __name__ == "__main__":
    sys.exit(main())
