import random

from explosion.rng_service import RNGService


def test_rng_singleton():
    rng1 = RNGService.get()
    rng2 = RNGService.get()
    assert rng1 is rng2


def test_initialize_replaces_instance():
    RNGService.initialize(5)
    rng = RNGService.get()
    assert rng.seed_value == 5
    assert RNGService.get() is rng


def test_rng_determinism():
    rng = RNGService.get()

    rng.seed(12345)
    val_a1 = rng.uniform(0.0, 1.0)
    val_a2 = rng.uniform(20.0, 60.0)

    rng.seed(12345)
    val_b1 = rng.uniform(0.0, 1.0)
    val_b2 = rng.uniform(20.0, 60.0)

    assert val_a1 == val_b1
    assert val_a2 == val_b2
    assert 20.0 <= val_a2 <= 60.0


def test_rng_independent_of_global():
    """Ensure service does not share state with global random module."""
    rng = RNGService.get()
    rng.seed(999)
    random.seed(999)

    assert rng.uniform(6.0, 12.0) == random.uniform(6.0, 12.0)

    rng.seed(111)
    assert rng.uniform(6.0, 12.0) != random.uniform(6.0, 12.0)


def test_seeded_instances_draw_identical_bursts():
    a = RNGService(2024)
    b = RNGService(2024)
    assert [a.uniform(100.0, 450.0) for _ in range(5)] == [b.uniform(100.0, 450.0) for _ in range(5)]
