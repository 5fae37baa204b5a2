#!/usr/bin/env python3
# Spawn-frequency report across many seeded runs.
#
#   python tools/spawn_report.py
#   python tools/spawn_report.py --runs 5000 --tiles 50,150,300,600 --top 8
#   python tools/spawn_report.py --json

import argparse, json, logging, sys
from datetime import datetime, timezone

from stepspawn.config import DEFAULT_RULES, load_rules
from stepspawn.report import DEFAULT_RUNS, DEFAULT_TILES, DEFAULT_TOP, format_report, run_report

def parse_tiles(text):
    tiles = []
    for chunk in text.split(","):
        chunk = chunk.strip()
        if not chunk:
            continue
        try:
            v = int(chunk)
        except ValueError:
            raise argparse.ArgumentTypeError(f"not a tile index: {chunk!r}")
        if v >= 0:
            tiles.append(v)
    if not tiles:
        raise argparse.ArgumentTypeError("expected comma-separated tile indices")
    return sorted(set(tiles))

def positive_int(text):
    v = int(text)
    if v <= 0:
        raise argparse.ArgumentTypeError("must be > 0")
    return v

def main(argv=None):
    ap = argparse.ArgumentParser(description="Aggregate spawn statistics over seeded runs")
    ap.add_argument("--runs", type=positive_int, default=DEFAULT_RUNS, help="Number of simulated runs")
    ap.add_argument("--tiles", type=parse_tiles, default=list(DEFAULT_TILES),
                    help="Comma-separated tile indices to sample")
    ap.add_argument("--top", type=positive_int, default=DEFAULT_TOP, help="Entries per ranking")
    ap.add_argument("--json", action="store_true", help="Emit JSON instead of text")
    ap.add_argument("--rules", type=str, default=None, help="JSON file of spawn rule overrides")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    rules = load_rules(args.rules) if args.rules else DEFAULT_RULES

    report = run_report(runs=args.runs, tiles=args.tiles, top=args.top, rules=rules)
    if args.json:
        report["generated_at"] = datetime.now(timezone.utc).isoformat()
        print(json.dumps(report, indent=2))
    else:
        print(format_report(report, top=args.top))
    return 0

if __name__ == "__main__":
    sys.exit(main())
