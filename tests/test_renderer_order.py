import pygame
import pytest

from explosion.particle_system import ParticleSystem
from explosion.renderer import PygameCanvas, to_rgba255
from explosion.rng_service import RNGService


@pytest.fixture(scope="module")
def pygame_init():
    pygame.init()
    yield
    pygame.quit()


def test_frame_sequence(pygame_init):
    surface = pygame.Surface((400, 400))
    seq = []
    canvas = PygameCanvas(surface, capture_sequence=seq)
    ps = ParticleSystem(rng=RNGService(9))
    ps.tick(0.016, canvas, spawn_at=(200.0, 200.0))
    assert seq == ["clear"] + ["circle"] * 40 + ["text"] * 3


def test_opaque_circle_pixels(pygame_init):
    surface = pygame.Surface((50, 50))
    canvas = PygameCanvas(surface)
    canvas.clear((0.0, 0.0, 0.0, 1.0))
    canvas.draw_filled_circle(25, 25, 5, (1.0, 0.0, 0.0, 1.0))
    assert tuple(surface.get_at((25, 25)))[:3] == (255, 0, 0)
    assert tuple(surface.get_at((2, 2)))[:3] == (0, 0, 0)


def test_alpha_blends_with_background(pygame_init):
    surface = pygame.Surface((50, 50))
    canvas = PygameCanvas(surface)
    canvas.clear((0.0, 0.0, 0.0, 1.0))
    canvas.draw_filled_circle(25, 25, 5, (1.0, 1.0, 1.0, 0.5))
    r = surface.get_at((25, 25)).r
    assert 120 <= r <= 135
    canvas.draw_filled_circle(10, 10, 5, (1.0, 1.0, 1.0, 0.0))
    assert surface.get_at((10, 10)).r == 0


def test_zero_radius_draws_nothing(pygame_init):
    surface = pygame.Surface((20, 20))
    canvas = PygameCanvas(surface)
    canvas.clear((0.0, 0.0, 0.0, 1.0))
    canvas.draw_filled_circle(10, 10, 0.0, (1.0, 1.0, 1.0, 1.0))
    assert surface.get_at((10, 10)).r == 0


def test_text_renders(pygame_init):
    surface = pygame.Surface((300, 60))
    canvas = PygameCanvas(surface)
    canvas.clear((0.0, 0.0, 0.0, 1.0))
    canvas.draw_text("Particles : 20", 5, 30, 20, (1.0, 1.0, 1.0, 1.0))
    lit = any(surface.get_at((x, y)).r > 0 for x in range(300) for y in range(60))
    assert lit


def test_to_rgba255_clamps():
    assert to_rgba255((1.0, 0.0, 0.5, 1.0)) == (255, 0, 128, 255)
    assert to_rgba255((2.0, -1.0, 0.0, -0.2)) == (255, 0, 0, 0)
