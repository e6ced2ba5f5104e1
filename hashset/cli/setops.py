from typing import *
from hashset.version import __version__
from hashset.hash_set import HashSet, sorted_items
import argparse
import contextlib
import sys

class SetOpsError(Exception):
    pass

OPERATIONS: Dict[str, Callable[[HashSet[str], HashSet[str]], HashSet[str]]] = {
    "union": HashSet.union,
    "intersect": HashSet.intersect,
    "difference": HashSet.difference,
}

def parse_args(argv: Optional[List[str]] = None) -> Tuple[argparse.ArgumentParser, argparse.Namespace]:
    ap = argparse.ArgumentParser(
        description = "combine two line based files as sets of lines"
    )

    ap.add_argument("operation", help = "the set operation (" + ", ".join(OPERATIONS) + ")", nargs = "?")
    ap.add_argument("left", help = "the left operand file, '-' for stdin", nargs = "?")
    ap.add_argument("right", help = "the right operand file, '-' for stdin", nargs = "?")
    ap.add_argument("-o", "--output", help = "the output file, '-' for stdout")
    ap.add_argument("-s", "--sorted", action = "store_true", default=False, help = "write the result in ascending order")
    ap.add_argument("-c", "--count", action = "store_true", default=False, help = "write only the number of result elements")
    ap.add_argument("-v", "--version", action = "store_true", default=False, help = "print current version and exit")

    return ap, ap.parse_args(argv)

def read_items(f: TextIO) -> HashSet[str]:
    s: HashSet[str] = HashSet()
    for line in f:
        item = line.rstrip("\r\n")
        if item:
            s.insert(item)
    return s

def load_set(path: str) -> HashSet[str]:
    try:
        if path == "-":
            return read_items(sys.stdin)
        with open(path, "r", encoding = "utf-8") as f:
            return read_items(f)
    except OSError as e:
        raise SetOpsError(f"could not read '{path}': {e.strerror}") from e
    except UnicodeDecodeError as e:
        raise SetOpsError(f"could not read '{path}': {e.reason} at byte {e.start}") from e

def write_result(outfile: str, lines: Iterable[str]):
    try:
        with contextlib.nullcontext(sys.stdout) if outfile == "-" else open(outfile, "w", encoding = "utf-8") as f:
            for line in lines:
                print(line, file = f)
    except OSError as e:
        raise SetOpsError(f"could not write '{outfile}': {e.strerror}") from e

def main(argv: Optional[List[str]] = None):
    ap, args = parse_args(argv)

    if args.version:
        print(f"{ap.prog} {__version__}")
        return

    if args.right is None:
        ap.print_help()
        return

    operation = args.operation
    if operation not in OPERATIONS:
        print(f"error: unsupported operation '{operation}'", file = sys.stderr)
        print("info: supported operations: " + ", ".join(OPERATIONS), file = sys.stderr)
        sys.exit(1)

    outfile = args.output
    if outfile is None:
        outfile = "-"

    try:
        if args.left == "-" and args.right == "-":
            raise SetOpsError("stdin can only be used for one operand")
        left = load_set(args.left)
        right = load_set(args.right)
    except SetOpsError as e:
        print(f"error: {e}", file = sys.stderr)
        sys.exit(1)

    result = OPERATIONS[operation](left, right)

    if args.count:
        lines = [str(result.size())]
    elif args.sorted:
        lines = sorted_items(result)
    else:
        lines = result.to_list()

    try:
        write_result(outfile, lines)
    except SetOpsError as e:
        print(f"error: {e}", file = sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()
