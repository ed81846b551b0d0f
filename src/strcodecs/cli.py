from __future__ import annotations
import argparse, json, sys
from .binary.reader import B2DecodeError, _load_bytes

def _read_input(path: str) -> bytes:
    if path == "-":
        return sys.stdin.buffer.read()
    return _load_bytes(path)

def _write_output(data: bytes, path: str | None) -> None:
    if path is None or path == "-":
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
        return
    with open(path, "wb") as out:
        out.write(data)

def _chomp(data: bytes) -> bytes:
    """Drop one trailing line ending (from `echo` or an editor), nothing more."""
    if data.endswith(b"\r\n"):
        return data[:-2]
    if data.endswith(b"\n"):
        return data[:-1]
    return data

def cmd_qs(args):
    from .binary.reader import parse_query
    from .binary.codecs.qsiter import QsCursor

    if args.file:
        raw = _chomp(_read_input(args.file))
    elif args.query is not None:
        raw = args.query.encode("utf-8", errors="surrogateescape")
    else:
        print("error: give a QUERY or --file", file=sys.stderr)
        return 2

    if args.json:
        pairs = parse_query(raw)
        print(json.dumps([p.model_dump(mode="json") for p in pairs], indent=2))
        found = len(pairs)
    else:
        # raw bytes straight from the cursor views; no charset round trip
        out = bytearray()
        found = 0
        cur = QsCursor(raw)
        while cur.next():
            out += cur.key
            if cur.has_value:
                out += b"=" + cur.value
            out += b"\n"
            found += 1
        _write_output(bytes(out), None)
    if not found:
        print("Warning: no key/value pairs found", file=sys.stderr)
    return 0

def cmd_b2_encode(args):
    from .binary.writer import b2_encode
    _write_output(b2_encode(_read_input(args.input)), args.output)
    return 0

def cmd_b2_decode(args):
    from .binary.reader import b2_decode
    # trailing newline from `echo` or a text editor is not part of the payload
    text = _chomp(_read_input(args.input))
    try:
        data = b2_decode(text, strict=args.strict)
    except B2DecodeError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    if not args.strict and len(text) % 8:
        print(f"Warning: dropped {len(text) % 8} trailing bit(s)", file=sys.stderr)
    _write_output(data, args.output)
    return 0

def cmd_sizes(args):
    from .binary.sizing import b2_encode_len, b2_encode_strlen, b2_decode_len
    from .models.common import SizeReport
    n = args.n
    if n < 0:
        print("error: N must be >= 0", file=sys.stderr)
        return 2
    rep = SizeReport(n=n, encode_len=b2_encode_len(n),
                     encode_strlen=b2_encode_strlen(n), decode_len=b2_decode_len(n))
    print(json.dumps(rep.model_dump(mode="json"), indent=2))
    return 0

def build_parser():
    p = argparse.ArgumentParser(prog="strcodecs", description="Query string tokenizer and base-2 codec")
    sub = p.add_subparsers(dest="cmd")

    sp = sub.add_parser("qs", help="split a URL query string into key/value pairs")
    sp.add_argument("query", nargs="?", help="Query string, e.g. 'a=1&b=2' (no leading '?')")
    sp.add_argument("--file", help="Read the query string from a file ('-' for stdin)")
    sp.add_argument("--json", action="store_true", help="Print pairs with offsets as JSON")
    sp.set_defaults(func=cmd_qs)

    sp = sub.add_parser("b2-encode", help="encode bytes as '0'/'1' text")
    sp.add_argument("input", help="Input file, or '-' for stdin")
    sp.add_argument("-o", "--output", default=None, help="Output file (default stdout)")
    sp.set_defaults(func=cmd_b2_encode)

    sp = sub.add_parser("b2-decode", help="decode '0'/'1' text back to bytes")
    sp.add_argument("input", help="Input file, or '-' for stdin")
    sp.add_argument("-o", "--output", default=None, help="Output file (default stdout)")
    sp.add_argument("--strict", action="store_true",
                    help="Reject characters other than 0/1 and lengths not a multiple of 8")
    sp.set_defaults(func=cmd_b2_decode)

    sp = sub.add_parser("sizes", help="print base-2 buffer capacities for an input length")
    sp.add_argument("n", type=int)
    sp.set_defaults(func=cmd_sizes)

    return p

def main(argv=None):
    p = build_parser()
    ns = p.parse_args(argv)
    if not hasattr(ns, "func"):
        p.print_help()
        return 2
    return ns.func(ns)


if __name__ == "__main__":
    raise SystemExit(main())
