"""ParticleSystem: owns every live particle and the frame-time filter.

Per-frame protocol (``tick``), in this exact order:

1. clear the canvas
2. spawn a burst if a click fired this frame
3. stable dt from ``FrameTimeFilter``
4. update each particle, then draw its shadow
5. draw every body (second pass so no shadow covers a body)
6. drop particles whose lifetime ran out
7. overlay text (hint, particle count, FPS from the stable dt)

Public API:
    spawn_burst(pos) -> list of new particles
    update(dt) -> number of particles removed (headless stepping)
    tick(raw_dt, canvas, spawn_at=None) -> stable dt
    clear()
"""

from __future__ import annotations

import math
from typing import Iterator, List, Optional, Tuple

from explosion.config import DEFAULT_CONFIG, EffectConfig
from explosion.constants import (
    BACKGROUND_COLOR,
    OVERLAY_COLOR,
    OVERLAY_FONT_SIZE,
    OVERLAY_HINT,
    OVERLAY_LINE_HEIGHT,
    OVERLAY_X,
    OVERLAY_Y,
)
from explosion.frame_filter import FrameTimeFilter
from explosion.logger import get_logger
from explosion.particle import Particle
from explosion.renderer import Canvas
from explosion.rng_service import RandomSource, RNGService

log = get_logger("particles")


class ParticleSystem:
    def __init__(
        self,
        config: EffectConfig = DEFAULT_CONFIG,
        rng: Optional[RandomSource] = None,
        frame_filter: Optional[FrameTimeFilter] = None,
    ):
        self.config = config
        self.rng = rng if rng is not None else RNGService.get()
        if frame_filter is None:
            frame_filter = FrameTimeFilter(config.frame_window_size, config.spike_multiplier)
        self.frame_filter = frame_filter
        self.particles: List[Particle] = []
        self.last_dt = 0.0

    # --- Collection Protocol -------------------------------------------------
    def __len__(self) -> int:
        return len(self.particles)

    def __iter__(self) -> Iterator[Particle]:
        return iter(self.particles)

    # ---- Spawn ----
    def spawn_burst(self, pos: Tuple[float, float]) -> List[Particle]:
        cfg = self.config
        rng = self.rng
        burst = []
        for _ in range(cfg.burst_size):
            angle = rng.uniform(0.0, math.tau)
            speed = rng.uniform(*cfg.speed_range)
            vertical_vel = rng.uniform(*cfg.vertical_range)
            lifetime = rng.uniform(*cfg.lifetime_range)
            burst.append(
                Particle(
                    pos,
                    (math.cos(angle) * speed, math.sin(angle) * speed),
                    height=cfg.spawn_height,
                    vertical_vel=vertical_vel,
                    lifetime=lifetime,
                    config=cfg,
                )
            )
        self.particles.extend(burst)
        log.debug(f"Burst of {len(burst)} at ({pos[0]:.0f}, {pos[1]:.0f}); live={len(self.particles)}")
        return burst

    # ---- Simulation ----
    def _retain_alive(self) -> int:
        before = len(self.particles)
        self.particles = [p for p in self.particles if p.is_alive()]
        return before - len(self.particles)

    def update(self, dt: float) -> int:
        """Advance every particle by an already-stable ``dt`` and drop the dead.

        Returns the number of removed particles.
        """
        for p in self.particles:
            p.update(dt)
        return self._retain_alive()

    def tick(self, raw_dt: float, canvas: Canvas, spawn_at: Optional[Tuple[float, float]] = None) -> float:
        """Run one full frame against ``canvas``; returns the stable dt used."""
        canvas.clear(BACKGROUND_COLOR)

        if spawn_at is not None:
            self.spawn_burst(spawn_at)

        dt = self.frame_filter.filter(raw_dt)
        self.last_dt = dt

        radius = self.config.particle_radius
        for p in self.particles:
            p.update(dt)
            x, y = p.shadow_position
            canvas.draw_filled_circle(x, y, p.shadow_radius, p.shadow_color)

        for p in self.particles:
            x, y = p.body_position
            canvas.draw_filled_circle(x, y, radius, p.body_color)

        self._retain_alive()
        self._draw_overlay(canvas, dt)
        return dt

    def _draw_overlay(self, canvas: Canvas, dt: float) -> None:
        fps_text = f"FPS: {1.0 / dt:.1f}" if dt > 0 else "FPS: --"
        lines = [OVERLAY_HINT, f"Particles : {len(self.particles)}", fps_text]
        for i, text in enumerate(lines):
            canvas.draw_text(text, OVERLAY_X, OVERLAY_Y + i * OVERLAY_LINE_HEIGHT, OVERLAY_FONT_SIZE, OVERLAY_COLOR)

    def clear(self) -> None:
        self.particles.clear()


__all__ = ["ParticleSystem"]
