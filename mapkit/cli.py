"""
Map containers command-line interface (CLI)

Small driver for comparing the two map implementations. It offers:
- A timing benchmark of put/get/remove over random integer keys
- A demo that fills a ChainingMap and prints its bucket layout

Usage examples:
    python -m mapkit.cli bench --sizes 100 1000 --repeats 5 --csv results.csv
    python -m mapkit.cli demo --buckets 13 0=x 13=y 26=z 1=w
"""

import argparse
import csv
import logging
import random
import statistics
import sys
import time

from .datastructures import ChainingMap, ListMap

logger = logging.getLogger(__name__)

# Benchmark defaults
DEFAULT_SIZES = [100, 200, 400, 800]
DEFAULT_REPEATS = 5
DEFAULT_BUCKETS = ChainingMap.DEFAULT_SIZE

IMPLEMENTATIONS = {
    "list": lambda buckets: ListMap(),
    "chaining": lambda buckets: ChainingMap(buckets),
}

CSV_HEADER = [
    "Implementation",
    "Input Size",
    "Operation",
    "Average Time (ms)",
    "Std Dev (ms)",
]


# -------------------------------------------------------------------
# Benchmark helpers
# -------------------------------------------------------------------
def generate_random_keys(size: int):
    """Generate `size` distinct random integer keys."""
    return random.sample(range(size * 10), size)


def time_operations(factory, keys):
    """Run put, get and remove over `keys` on a fresh map; return ms per operation."""
    m = factory()
    timings = {}

    start = time.perf_counter()
    for k in keys:
        m.put(k, k)
    timings["put"] = (time.perf_counter() - start) * 1000

    start = time.perf_counter()
    for k in keys:
        m.get(k)
    timings["get"] = (time.perf_counter() - start) * 1000

    start = time.perf_counter()
    for k in keys:
        m.remove(k)
    timings["remove"] = (time.perf_counter() - start) * 1000

    return timings


def run_benchmark(sizes, repeats, buckets):
    """Return rows of (implementation, size, operation, mean ms, std ms)."""
    rows = []
    for name, make in IMPLEMENTATIONS.items():
        for size in sizes:
            samples = {"put": [], "get": [], "remove": []}
            for _ in range(repeats):
                timings = time_operations(lambda: make(buckets), generate_random_keys(size))
                for op, ms in timings.items():
                    samples[op].append(ms)
            for op, values in samples.items():
                avg = statistics.mean(values)
                std = statistics.stdev(values) if len(values) > 1 else 0.0
                rows.append((name, size, op, avg, std))
            logger.info("benchmarked %s with %d keys", name, size)
    return rows


# -------------------------------------------------------------------
# Command handlers
# -------------------------------------------------------------------
def cmd_bench(args):
    """Time both implementations and print (and optionally save) the results."""
    rows = run_benchmark(args.sizes, args.repeats, args.buckets)
    for name, size, op, avg, std in rows:
        print(f"{name:<9} | Size: {size:<8} | {op:<6} | Avg Time: {avg:.3f} ms | Std: {std:.3f} ms")

    if args.csv:
        with open(args.csv, "w", newline="") as f:
            writer = csv.writer(f)
            writer.writerow(CSV_HEADER)
            for name, size, op, avg, std in rows:
                writer.writerow([name, size, op, f"{avg:.3f}", f"{std:.3f}"])
        print(f"Results saved to {args.csv}")


def cmd_demo(args):
    """Fill a ChainingMap with the given pairs and show its buckets."""
    m = ChainingMap(args.buckets)
    for key, value in args.pairs:
        m.put(key, value)
    print(m, end="")
    print(f"size: {m.size()}")


# -------------------------------------------------------------------
# CLI parser setup
# -------------------------------------------------------------------
def positive_int(text):
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {text}")
    return value


def key_value_pair(text):
    """Parse ``KEY=VALUE`` with an integer key."""
    key, sep, value = text.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {text!r}")
    try:
        return int(key), value
    except ValueError:
        raise argparse.ArgumentTypeError(f"key must be an integer, got {key!r}") from None


def build_parser():
    """Build the argparse command-line parser with subcommands."""
    p = argparse.ArgumentParser(prog="python -m mapkit.cli", description="Map containers CLI")
    p.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    sub = p.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("bench", help="Benchmark ListMap against ChainingMap")
    s.add_argument("--sizes", type=positive_int, nargs="+", default=DEFAULT_SIZES)
    s.add_argument("--repeats", type=positive_int, default=DEFAULT_REPEATS)
    s.add_argument("--buckets", type=positive_int, default=DEFAULT_BUCKETS)
    s.add_argument("--csv", help="Write results to this CSV file")
    s.set_defaults(func=cmd_bench)

    s = sub.add_parser("demo", help="Show the bucket layout of a ChainingMap")
    s.add_argument("--buckets", type=positive_int, default=DEFAULT_BUCKETS)
    s.add_argument("pairs", type=key_value_pair, nargs="*", metavar="KEY=VALUE")
    s.set_defaults(func=cmd_demo)

    return p


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------
def main(argv=None):
    """CLI entry point when invoked via `python -m mapkit.cli`."""
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    args.func(args)
    return 0


if __name__ == "__main__":
    sys.exit(main())
