"""Immutable effect configuration.

``EffectConfig`` bundles the tuning constants into one frozen object that is
built once at startup and handed to ``Particle`` / ``ParticleSystem``. Tests
build variants with ``dataclasses.replace`` (e.g. zero gravity) without
touching module state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from explosion import constants as C

Color = Tuple[float, float, float, float]


@dataclass(frozen=True)
class EffectConfig:
    gravity: float = C.GRAVITY_ACCEL
    bounce_damping: float = C.BOUNCE_DAMPING
    drag_force: float = C.DRAG_FORCE
    airborne_height: float = C.AIRBORNE_HEIGHT
    settle_speed: float = C.SETTLE_SPEED

    particle_radius: float = C.PARTICLE_RADIUS
    shadow_offset: float = C.SHADOW_OFFSET
    max_shadow_height: float = C.MAX_SHADOW_HEIGHT
    fade_window: float = C.FADE_WINDOW
    body_color: Color = C.BODY_COLOR
    shadow_color: Color = C.SHADOW_COLOR

    burst_size: int = C.BURST_SIZE
    spawn_height: float = C.SPAWN_HEIGHT
    speed_range: Tuple[float, float] = (C.SPAWN_SPEED_MIN, C.SPAWN_SPEED_MAX)
    vertical_range: Tuple[float, float] = (C.SPAWN_VERTICAL_MIN, C.SPAWN_VERTICAL_MAX)
    lifetime_range: Tuple[float, float] = (C.SPAWN_LIFETIME_MIN, C.SPAWN_LIFETIME_MAX)

    frame_window_size: int = C.FRAME_WINDOW_SIZE
    spike_multiplier: float = C.SPIKE_MULTIPLIER


DEFAULT_CONFIG = EffectConfig()

__all__ = ["EffectConfig", "DEFAULT_CONFIG", "Color"]
