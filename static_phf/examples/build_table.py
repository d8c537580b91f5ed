# ==================================================
# examples/build_table.py
# ==================================================
import argparse, logging, sys
from static_phf import BuildError, PerfectHashTable
from static_phf.const import LOG_LEVEL


def read_keys(path):
    """One key per line, optionally followed by an integer value."""
    pairs = []
    with open(path, "rb") as f:
        for line in f:
            fields = line.split()
            if not fields or fields[0].startswith(b"#"):
                continue
            value = int(fields[1]) if len(fields) > 1 else len(pairs)
            pairs.append((fields[0], value))
    return pairs


def parse_signature(text):
    return tuple(int(p) for p in text.split(",") if p.strip())


def main(argv=None):
    p = argparse.ArgumentParser(description="build a perfect hash table from a key list")
    p.add_argument("keys", help="file with one key per line")
    p.add_argument("--signature", type=parse_signature,
                   help="comma separated byte positions, e.g. --signature=0,-1")
    p.add_argument("--min-signature-len", type=int, default=0)
    p.add_argument("--out", help="write a snapshot to this path")
    p.add_argument("--lookup", action="append", default=[], metavar="KEY")
    args = p.parse_args(argv)

    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    try:
        phf = PerfectHashTable(read_keys(args.keys), signature=args.signature,
                               min_signature_len=args.min_signature_len)
    except BuildError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(f"keys      : {len(phf)}")
    print(f"signature : {','.join(map(str, phf.signature))}")
    print(f"max hash  : {phf.max_hash}")
    print(f"occupancy : {phf.occupancy():.1%}")
    for key in args.lookup:
        print(f"{key} -> {phf.get(key)}")
    if args.out:
        phf.save(args.out)
        print(f"snapshot  : {args.out}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
