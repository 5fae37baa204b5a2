#!/usr/bin/env python3
# Minimal interactive viewer for spawn sequences (no gameplay).
# - Scroll the track: LEFT/RIGHT (one tile), PAGEUP/PAGEDOWN (one screen)
# - Next/previous run seed: UP/DOWN
# - Toggle tile labels: L
# - 60 Hz fixed loop

import argparse
import pygame

from stepspawn.render.palette import BACKGROUND, hazard_color, platform_color
from stepspawn.rng import seed_for_run
from stepspawn.spawn.sequencer import Sequencer

VISIBLE_TILES = 24

class TrackCache:
    """Lazily extends one seed's sequence as the view scrolls forward."""
    def __init__(self, seed: int):
        self.seq = Sequencer(seed)
        self.spawns = []

    def upto(self, n: int):
        while len(self.spawns) < n:
            self.spawns.append(self.seq.advance())
        return self.spawns

def draw_track(screen, font, spawns, first, tile, labels):
    h = screen.get_height()
    for col in range(VISIBLE_TILES):
        s = spawns[first + col]
        x = col * tile
        pygame.draw.rect(screen, platform_color(s.platform), pygame.Rect(x + 1, h - tile, tile - 2, tile // 2))
        hc = hazard_color(s.hazard)
        if hc is not None:
            r = pygame.Rect(x + tile // 4, h - 2 * tile, tile // 2, tile // 2)
            pygame.draw.rect(screen, hc, r)
            if s.forced:
                pygame.draw.rect(screen, (255, 255, 255), r, 1)
        if labels:
            img = font.render(str(s.index), True, (220, 220, 220))
            screen.blit(img, (x + 2, 2))

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--run", type=int, default=1, help="Run number (seed derived like the report)")
    ap.add_argument("--tile", type=int, default=40, help="Tile width in pixels")
    args = ap.parse_args()

    pygame.init()
    clock = pygame.time.Clock()
    W, H = VISIBLE_TILES * args.tile, 4 * args.tile
    screen = pygame.display.set_mode((W, H))
    font = pygame.font.SysFont(None, max(10, args.tile // 3))

    run = args.run
    track = TrackCache(seed_for_run(run))
    first = 0
    labels = True
    running = True
    while running:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif ev.key == pygame.K_RIGHT:
                    first += 1
                elif ev.key == pygame.K_LEFT:
                    first = max(0, first - 1)
                elif ev.key == pygame.K_PAGEUP:
                    first += VISIBLE_TILES
                elif ev.key == pygame.K_PAGEDOWN:
                    first = max(0, first - VISIBLE_TILES)
                elif ev.key == pygame.K_UP:
                    run += 1
                    track = TrackCache(seed_for_run(run))
                elif ev.key == pygame.K_DOWN:
                    run = max(1, run - 1)
                    track = TrackCache(seed_for_run(run))
                elif ev.key == pygame.K_l:
                    labels = not labels

        spawns = track.upto(first + VISIBLE_TILES)
        screen.fill(BACKGROUND[:3])
        draw_track(screen, font, spawns, first, args.tile, labels)
        pygame.display.set_caption(
            f"Spawn Viewer - Run {run}  Seed {track.seq.seed}  Tiles {first}..{first + VISIBLE_TILES - 1}"
        )
        pygame.display.flip()
        clock.tick(60)

    pygame.quit()

if __name__ == "__main__":
    main()
