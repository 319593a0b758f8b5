"""Single explosion particle.

Motion is split into a planar part (``pos`` / ``vel``: where the particle
is on the ground plane, in screen coordinates) and a decoupled vertical
part (``height`` / ``vertical_vel``: elevation above that plane). The body
is drawn ``height`` pixels above ``pos``, the shadow stays on the plane.

Ground contact frames bounce the vertical axis and apply friction to each
planar axis independently. Once every velocity and the height are exactly
zero the particle is dormant: it keeps aging and fading but skips all
motion work.
"""

from __future__ import annotations

import math
from typing import Tuple

from pygame.math import Vector2

from explosion.config import DEFAULT_CONFIG, Color, EffectConfig


def apply_axis_friction(v: float, drag: float) -> float:
    """Reduce ``|v|`` by ``drag``, snapping to 0 instead of reversing."""
    if v == 0.0:
        return v
    sign = math.copysign(1.0, v)
    new_v = v - sign * drag
    if math.copysign(1.0, new_v) != sign:
        return 0.0
    return new_v


class Particle:
    def __init__(
        self,
        pos,
        vel,
        height: float,
        vertical_vel: float,
        lifetime: float,
        config: EffectConfig = DEFAULT_CONFIG,
    ):
        self.pos = Vector2(pos)
        self.vel = Vector2(vel)
        self.height = height
        self.vertical_vel = vertical_vel
        self.lifetime = lifetime
        self.config = config

    def __repr__(self) -> str:  # pragma: no cover - debug aid
        return (
            f"Particle(pos=({self.pos.x:.1f}, {self.pos.y:.1f}), height={self.height:.2f}, "
            f"vertical_vel={self.vertical_vel:.2f}, lifetime={self.lifetime:.2f})"
        )

    def is_alive(self) -> bool:
        return self.lifetime > 0.0

    def is_moving(self) -> bool:
        return self.vel.x != 0.0 or self.vel.y != 0.0 or self.vertical_vel != 0.0 or self.height != 0.0

    def update(self, dt: float) -> None:
        # Backwards timer: leave state untouched
        if dt < 0.0:
            return

        self.lifetime -= dt

        if not self.is_moving():
            return

        cfg = self.config

        # Gravity only well above the ground; near it, slow particles settle
        if self.height > cfg.airborne_height:
            self.vertical_vel -= cfg.gravity * dt
        elif abs(self.vertical_vel) < cfg.settle_speed:
            self.vertical_vel = 0.0
            self.height = 0.0
        self.height += self.vertical_vel * dt
        self.pos += self.vel * dt

        if self.height <= 0.0:
            self.height = 0.0
            if abs(self.vertical_vel) > cfg.settle_speed:
                self.vertical_vel = -self.vertical_vel * cfg.bounce_damping
            else:
                self.vertical_vel = 0.0

            drag = cfg.drag_force * dt
            self.vel.x = apply_axis_friction(self.vel.x, drag)
            self.vel.y = apply_axis_friction(self.vel.y, drag)

    # ---- Render data ----
    @property
    def alpha(self) -> float:
        """Opaque until the last ``fade_window`` seconds, then linear to 0."""
        return max(0.0, min(self.lifetime / self.config.fade_window, 1.0))

    @property
    def body_color(self) -> Color:
        r, g, b, _ = self.config.body_color
        return (r, g, b, self.alpha)

    @property
    def shadow_color(self) -> Color:
        r, g, b, _ = self.config.shadow_color
        return (r, g, b, self.alpha)

    @property
    def shadow_radius(self) -> float:
        cfg = self.config
        return cfg.particle_radius * (1.0 - min(self.height / cfg.max_shadow_height, 1.0))

    @property
    def body_position(self) -> Tuple[float, float]:
        return (self.pos.x, self.pos.y - self.height)

    @property
    def shadow_position(self) -> Tuple[float, float]:
        return (self.pos.x, self.pos.y + self.config.shadow_offset)


__all__ = ["Particle", "apply_axis_friction"]
