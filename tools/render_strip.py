#!/usr/bin/env python3
# Render a seed's spawn sequence to a PNG strip using Pillow.
# One column per tile: platform block with the hazard marker above it.
# Forced hazards get a white outline; window starts get a tick mark.

import argparse, os
from PIL import Image, ImageDraw

from stepspawn.render.palette import BACKGROUND, hazard_color, platform_color
from stepspawn.rng import seed_for_run
from stepspawn.spawn.sequencer import generate_sequence

WINDOW_TICK = (90, 90, 110, 255)

def render_strip(spawns, out_png, tile_size=8, per_row=100, window_size=10):
    rows = max(1, (len(spawns) + per_row - 1) // per_row)
    row_h = tile_size * 3
    w, h = per_row * tile_size, rows * row_h
    canvas = Image.new("RGBA", (w, h), BACKGROUND)
    draw = ImageDraw.Draw(canvas)
    for i, s in enumerate(spawns):
        x0 = (i % per_row) * tile_size
        y0 = (i // per_row) * row_h
        # platform sits on the bottom third
        draw.rectangle((x0, y0 + 2 * tile_size, x0 + tile_size - 1, y0 + row_h - 1), fill=platform_color(s.platform))
        hc = hazard_color(s.hazard)
        if hc is not None:
            box = (x0 + 1, y0 + tile_size, x0 + tile_size - 2, y0 + 2 * tile_size - 2)
            draw.rectangle(box, fill=hc, outline=(255, 255, 255, 255) if s.forced else None)
        if s.index % window_size == 0:
            draw.line((x0, y0, x0, y0 + tile_size // 2), fill=WINDOW_TICK)
    d = os.path.dirname(out_png)
    if d:
        os.makedirs(d, exist_ok=True)
    canvas.save(out_png)

def main():
    ap = argparse.ArgumentParser()
    g = ap.add_mutually_exclusive_group()
    g.add_argument("--seed", type=int, help="Raw 32-bit seed")
    g.add_argument("--run", type=int, default=1, help="Run number (seed derived like the report)")
    ap.add_argument("--tiles", type=int, default=600, help="How many tiles to render")
    ap.add_argument("--tile", type=int, default=8, help="Tile size in pixels")
    ap.add_argument("--per-row", type=int, default=100, help="Tiles per image row")
    ap.add_argument("--out", type=str, default="out/png/strip.png", help="Output PNG")
    args = ap.parse_args()

    seed = args.seed if args.seed is not None else seed_for_run(args.run)
    spawns = generate_sequence(seed, args.tiles)
    render_strip(spawns, args.out, tile_size=args.tile, per_row=args.per_row)
    print(f"Wrote {args.out} (seed {seed})")

if __name__ == "__main__":
    main()
