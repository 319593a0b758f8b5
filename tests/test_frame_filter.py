import math
import random

import pytest

from explosion.frame_filter import FrameTimeFilter


def test_first_sample_passes_through():
    f = FrameTimeFilter()
    assert f.filter(0.5) == 0.5
    assert f.samples == [0.5]


def test_spike_after_steady_frames_replaced_by_median():
    f = FrameTimeFilter()
    for _ in range(10):
        assert f.filter(0.016) == 0.016
    out = f.filter(0.5)
    assert out == pytest.approx(0.016)
    assert f.spike_count == 1
    assert len(f) == 11


def test_steady_stream_never_flagged():
    f = FrameTimeFilter()
    for _ in range(50):
        assert f.filter(0.02) == 0.02
    assert f.spike_count == 0


def test_exactly_double_is_not_a_spike():
    f = FrameTimeFilter()
    for _ in range(10):
        f.filter(0.01)
    assert f.filter(0.02) == 0.02


def test_window_is_bounded_and_evicts_oldest():
    f = FrameTimeFilter()
    values = [0.010 + i * 0.0001 for i in range(20)]
    for v in values:
        f.filter(v)
    assert len(f) == 11
    assert f.samples == values[-11:]


def test_median_uses_upper_middle_for_even_window():
    f = FrameTimeFilter()
    for v in (0.01, 0.02, 0.03, 0.04):
        f.filter(v)
    assert f.median == 0.03


def test_output_is_always_a_window_value():
    rng = random.Random(7)
    f = FrameTimeFilter()
    for _ in range(200):
        raw = rng.choice([0.016, 0.017, 0.015, 0.1, 0.5, 0.001])
        out = f.filter(raw)
        assert out in f.samples


def test_negative_and_nan_samples_fall_back_to_median():
    f = FrameTimeFilter()
    for _ in range(5):
        f.filter(0.016)
    assert f.filter(-1.0) == 0.016
    assert f.filter(float("nan")) == 0.016
    assert f.filter(math.inf) == 0.016
    assert len(f) == 5


def test_degenerate_sample_on_empty_window_yields_zero():
    f = FrameTimeFilter()
    assert f.filter(-0.5) == 0.0
    assert len(f) == 0
    assert f.median is None


def test_reset_clears_history():
    f = FrameTimeFilter()
    for _ in range(10):
        f.filter(0.016)
    f.filter(1.0)
    f.reset()
    assert len(f) == 0
    assert f.spike_count == 0
    # fresh window: large first sample is accepted as-is
    assert f.filter(1.0) == 1.0


def test_invalid_window_size():
    with pytest.raises(ValueError):
        FrameTimeFilter(window_size=0)
