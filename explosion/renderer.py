"""Drawing collaborators.

``ParticleSystem`` never touches pygame drawing directly; it issues calls
on a *canvas*:

    clear(rgba)
    draw_filled_circle(x, y, radius, rgba)
    draw_text(text, x, y, size, rgba)

Colors are RGBA floats in ``[0, 1]``.

``PygameCanvas`` draws onto a pygame Surface with real alpha blending.
``RecordingCanvas`` only records the calls; it backs headless tools and
tests.

Design Notes:
- pygame.draw ignores per-pixel alpha on the destination, so each circle
  is stamped onto a small SRCALPHA surface and blitted.
- Optional ``capture_sequence`` records high-level steps ("clear",
  "circle", "text") for tests without pixel sampling.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Protocol, Sequence, Tuple

import pygame

from explosion.logger import get_logger

_log = get_logger("renderer")

RGBA = Sequence[float]


class Canvas(Protocol):
    def clear(self, rgba: RGBA) -> None: ...

    def draw_filled_circle(self, x: float, y: float, radius: float, rgba: RGBA) -> None: ...

    def draw_text(self, text: str, x: float, y: float, size: int, rgba: RGBA) -> None: ...


def to_rgba255(rgba: RGBA) -> Tuple[int, int, int, int]:
    """Convert float RGBA in [0, 1] to pygame's 0..255 ints (clamped)."""
    return tuple(max(0, min(255, int(round(c * 255)))) for c in rgba)  # type: ignore[return-value]


class PygameCanvas:
    """Canvas backed by a pygame Surface (usually the display surface)."""

    def __init__(self, surface: pygame.Surface, capture_sequence: Optional[List[str]] = None) -> None:
        self.surface = surface
        self.capture_sequence = capture_sequence
        self._fonts: Dict[int, pygame.font.Font] = {}

    def _record(self, step: str) -> None:
        if self.capture_sequence is not None:
            self.capture_sequence.append(step)

    def clear(self, rgba: RGBA) -> None:
        self.surface.fill(to_rgba255(rgba))
        self._record("clear")

    def draw_filled_circle(self, x: float, y: float, radius: float, rgba: RGBA) -> None:
        self._record("circle")
        color = to_rgba255(rgba)
        if radius <= 0 or color[3] == 0:
            return
        size = int(radius * 2) + 2
        stamp = pygame.Surface((size, size), pygame.SRCALPHA)
        pygame.draw.circle(stamp, color, (size / 2, size / 2), radius)
        self.surface.blit(stamp, (x - size / 2, y - size / 2))

    def _font(self, size: int) -> pygame.font.Font | None:
        font = self._fonts.get(size)
        if font is None:
            if not pygame.font.get_init():
                try:
                    pygame.font.init()
                except pygame.error as e:  # pragma: no cover - depends on SDL_ttf build
                    _log.warn("Font module unavailable; overlay text disabled", e)
                    return None
            font = pygame.font.Font(None, size)
            self._fonts[size] = font
        return font

    def draw_text(self, text: str, x: float, y: float, size: int, rgba: RGBA) -> None:
        self._record("text")
        font = self._font(size)
        if font is None:
            return
        color = to_rgba255(rgba)
        img = font.render(text, True, color[:3])
        if color[3] < 255:
            img.set_alpha(color[3])
        # y is the text baseline
        self.surface.blit(img, (x, y - font.get_ascent()))


class RecordingCanvas:
    """Canvas that stores every call as a tuple; nothing is drawn."""

    def __init__(self) -> None:
        self.calls: List[tuple] = []

    def clear(self, rgba: RGBA) -> None:
        self.calls.append(("clear", tuple(rgba)))

    def draw_filled_circle(self, x: float, y: float, radius: float, rgba: RGBA) -> None:
        self.calls.append(("circle", x, y, radius, tuple(rgba)))

    def draw_text(self, text: str, x: float, y: float, size: int, rgba: RGBA) -> None:
        self.calls.append(("text", text, x, y, size, tuple(rgba)))

    def reset(self) -> None:
        self.calls.clear()

    @property
    def kinds(self) -> List[str]:
        return [c[0] for c in self.calls]

    def texts(self) -> List[str]:
        return [c[1] for c in self.calls if c[0] == "text"]


__all__ = ["Canvas", "PygameCanvas", "RecordingCanvas", "to_rgba255"]
