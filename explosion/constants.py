"""Tuning constants for the explosion effect.

Centralizes numeric tuning values so the physics, spawning and overlay
code share one set of literals. Lengths are pixels, times seconds.
The settle/airborne thresholds were tuned by eye against GRAVITY_ACCEL;
changing them changes the visible bounce noticeably.
"""

# Window
WINDOW_TITLE = "Particle Explosion"
WINDOW_WIDTH = 1000
WINDOW_HEIGHT = 800
FPS_CAP = 60  # clock.tick limit; 0 disables the cap
BACKGROUND_COLOR = (0.0, 0.0, 0.0, 1.0)

# Physics
GRAVITY_ACCEL = 500.0  # pulls vertical velocity down while airborne
BOUNCE_DAMPING = 0.4  # fraction of vertical speed kept after a bounce
DRAG_FORCE = 100.0  # ground friction, velocity lost per second per axis
AIRBORNE_HEIGHT = 1.0  # gravity only applies above this height
SETTLE_SPEED = 10.0  # vertical speed under which a grounded particle stops

# Particle look
PARTICLE_RADIUS = 5.0
SHADOW_OFFSET = 3.0  # shadow drawn this far below the planar position
MAX_SHADOW_HEIGHT = 300.0  # shadow vanishes at or above this height
FADE_WINDOW = 5.0  # particles fade out over their last N seconds
BODY_COLOR = (0.376, 0.168, 1.0, 1.0)
SHADOW_COLOR = (0.184, 0.109, 0.321, 1.0)

# Burst spawning
BURST_SIZE = 20
SPAWN_HEIGHT = 0.01  # small positive seed so spawn frame is not "grounded"
SPAWN_SPEED_MIN = 20.0
SPAWN_SPEED_MAX = 60.0
SPAWN_VERTICAL_MIN = 100.0
SPAWN_VERTICAL_MAX = 450.0
SPAWN_LIFETIME_MIN = 6.0
SPAWN_LIFETIME_MAX = 12.0

# Frame time filter
FRAME_WINDOW_SIZE = 11  # 10 history samples + current
SPIKE_MULTIPLIER = 2.0  # samples above median * this are replaced

# Overlay
OVERLAY_X = 20.0
OVERLAY_Y = 20.0
OVERLAY_LINE_HEIGHT = 20.0
OVERLAY_FONT_SIZE = 20
OVERLAY_COLOR = (1.0, 1.0, 1.0, 1.0)
OVERLAY_HINT = "Left Click to EXPLODE PARTICLES!"

__all__ = [name for name in globals().keys() if name.isupper()]
