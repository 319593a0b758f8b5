#!/usr/bin/env python3
"""
Headless simulation benchmark for the particle explosion.

Usage:
    python3 tools/benchmark.py [--bursts 10] [--seconds 20] [--dt 0.016] [--seed 1]

This script:
1. Seeds the RNG and spawns the requested bursts (one per frame).
2. Ticks the ParticleSystem against a RecordingCanvas at a fixed dt.
3. Prints a report: peak load, per-tick CPU cost, frame the scene emptied.
"""

import argparse
import os
import statistics
import sys
import time

# Ensure we can import the package from root
current_dir = os.path.dirname(os.path.abspath(__file__))
root_dir = os.path.dirname(current_dir)
sys.path.insert(0, root_dir)

from explosion.particle_system import ParticleSystem  # noqa: E402
from explosion.renderer import RecordingCanvas  # noqa: E402
from explosion.rng_service import RNGService  # noqa: E402


def run(bursts: int, seconds: float, dt: float, seed: int) -> dict:
    """Run the simulation and return collected metrics."""
    rng = RNGService(seed)
    system = ParticleSystem(rng=rng)
    canvas = RecordingCanvas()

    frames = int(seconds / dt)
    work_ms = []
    counts = []
    emptied_at = None
    for frame in range(frames):
        spawn_at = (500.0, 400.0) if frame < bursts else None
        canvas.reset()
        t0 = time.perf_counter()
        system.tick(dt, canvas, spawn_at=spawn_at)
        work_ms.append((time.perf_counter() - t0) * 1000.0)
        counts.append(len(system))
        if emptied_at is None and frame >= bursts and not system.particles:
            emptied_at = frame
    return {"frames": frames, "work_ms": work_ms, "counts": counts, "emptied_at": emptied_at, "dt": dt}


def report(result: dict) -> None:
    work_ms = result["work_ms"]
    counts = result["counts"]
    if not work_ms:
        print("No frames simulated.")
        return

    print("\n" + "=" * 40)
    print(" SIMULATION REPORT")
    print("=" * 40)
    print(f"Total Frames: {result['frames']} (dt={result['dt']})")
    print("-" * 20)
    print("Tick cost (ms):")
    print(f"  Avg:  {statistics.mean(work_ms):.3f}")
    print(f"  Max:  {max(work_ms):.3f}")
    print("-" * 20)
    print(f"Peak Particles: {max(counts)}")
    if result["emptied_at"] is not None:
        print(f"Scene empty at frame {result['emptied_at']} ({result['emptied_at'] * result['dt']:.2f}s)")
    else:
        print("Scene still populated at end of run.")
    print("=" * 40 + "\n")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Headless particle simulation benchmark")
    parser.add_argument("--bursts", type=int, default=10)
    parser.add_argument("--seconds", type=float, default=20.0)
    parser.add_argument("--dt", type=float, default=0.016)
    parser.add_argument("--seed", type=int, default=1)
    args = parser.parse_args(argv)
    report(run(args.bursts, args.seconds, args.dt, args.seed))


if __name__ == "__main__":
    main()
