"""Application entry: window, event poll and the frame loop.

One ``ParticleSystem.tick`` per presented frame; the clock's elapsed time
is the raw dt that the frame filter stabilises.

Usage:
    python app.py [--seed N] [--frames N]
"""

from __future__ import annotations

import argparse

import pygame

from explosion.constants import FPS_CAP, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from explosion.input_router import InputRouter, spawn_points
from explosion.logger import get_logger
from explosion.particle_system import ParticleSystem
from explosion.renderer import PygameCanvas
from explosion.rng_service import RNGService

log = get_logger("app")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Click to explode particles.")
    parser.add_argument("--seed", type=int, default=None, help="Seed the spawn RNG for reproducible bursts")
    parser.add_argument("--frames", type=int, default=0, help="Exit after N frames (0 = run until closed)")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    if args.seed is not None:
        RNGService.initialize(args.seed)

    pygame.init()
    screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
    pygame.display.set_caption(WINDOW_TITLE)
    clock = pygame.time.Clock()

    system = ParticleSystem()
    router = InputRouter()
    canvas = PygameCanvas(screen)
    log.info(f"Started {WINDOW_WIDTH}x{WINDOW_HEIGHT}, fps cap {FPS_CAP}")

    frames = 0
    running = True
    try:
        while running:
            actions = router.process(pygame.event.get())
            for name, _ in actions:
                if name == "quit":
                    running = False
                elif name == "clear":
                    system.clear()
            # Only one burst per frame; the latest click wins
            clicks = spawn_points(actions)
            raw_dt = clock.tick(FPS_CAP) / 1000.0
            system.tick(raw_dt, canvas, spawn_at=clicks[-1] if clicks else None)
            pygame.display.flip()

            frames += 1
            if args.frames and frames >= args.frames:
                running = False
    except KeyboardInterrupt:
        log.info("Interrupted")
    finally:
        log.info(f"Stopped after {frames} frames; {system.frame_filter.spike_count} frame spikes smoothed")
        pygame.quit()


if __name__ == "__main__":  # pragma: no cover
    main()
