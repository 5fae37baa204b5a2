#!/usr/bin/env python3
import argparse, csv, os
from stepspawn.rng import seed_for_run
from stepspawn.spawn.sequencer import generate_sequence

HEADER = ["index", "platform", "hazard", "forced"]

def write_tsv(spawns, path, include_header=False):
    d = os.path.dirname(path)
    if d:
        os.makedirs(d, exist_ok=True)
    with open(path, 'w', newline='') as f:
        w = csv.writer(f, delimiter='\t')
        if include_header:
            w.writerow(HEADER)
        for s in spawns:
            w.writerow(s.as_row())

def cmd_emit(args):
    seed = args.seed if args.seed is not None else seed_for_run(args.run)
    spawns = generate_sequence(seed, args.tiles)
    write_tsv(spawns, args.out, include_header=args.header)
    print(f"Wrote {args.out} (seed {seed}, {args.tiles} tiles)")

def cmd_golden(args):
    os.makedirs(args.outdir, exist_ok=True)
    for run in range(1, args.runs + 1):
        spawns = generate_sequence(seed_for_run(run), args.tiles)
        write_tsv(spawns, os.path.join(args.outdir, f"run{run:03d}.tsv"))
    print(f"Wrote golden pack to {args.outdir}")

def main():
    p = argparse.ArgumentParser()
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit')
    g = p1.add_mutually_exclusive_group(required=True)
    g.add_argument('--seed', type=int, help='Raw 32-bit seed')
    g.add_argument('--run', type=int, help='Run number (seed derived like the report)')
    p1.add_argument('--tiles', type=int, default=600)
    p1.add_argument('--out', type=str, required=True)
    p1.add_argument('--header', action='store_true')
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('golden')
    p2.add_argument('--runs', type=int, default=10)
    p2.add_argument('--tiles', type=int, default=600)
    p2.add_argument('--outdir', type=str, required=True)
    p2.set_defaults(func=cmd_golden)
    args = p.parse_args()
    args.func(args)

if __name__ == '__main__':
    main()
