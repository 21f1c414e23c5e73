# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Benchmarking utilities for profiling the RK4 hot path.

Provides micro-benchmarks (kernels and a single step) and a macro-benchmark
(a fixed-step trajectory of the harmonic oscillator) with timing and
optional cProfile output.
"""

import time
import cProfile
import logging
import pstats
import io
import numpy as np

logger = logging.getLogger(__name__)


def _make_test_data(d=64, seed=0):
    """Create a state vector and four slope vectors of length d."""
    rng = np.random.default_rng(seed)
    x = rng.standard_normal(d)
    ks = [rng.standard_normal(d) for _ in range(4)]
    return x, ks


def _time_fn(fn, args=(), kwargs=None, n_warmup=3, n_iter=100):
    """Time a function over n_iter calls, returning median and stats."""
    kwargs = kwargs or {}
    for _ in range(n_warmup):
        fn(*args, **kwargs)
    times = []
    for _ in range(n_iter):
        t0 = time.perf_counter_ns()
        fn(*args, **kwargs)
        t1 = time.perf_counter_ns()
        times.append((t1 - t0) * 1e-6)  # ms
    times = np.array(times)
    return {
        "median_ms": float(np.median(times)),
        "mean_ms": float(np.mean(times)),
        "std_ms": float(np.std(times)),
        "min_ms": float(np.min(times)),
        "max_ms": float(np.max(times)),
        "n_iter": n_iter,
    }


def bench_stage_state(d=64, n_iter=500):
    """Benchmark the stage-state kernel."""
    from rungekutta.solvers.kernels import stage_state
    x, ks = _make_test_data(d)
    return _time_fn(stage_state, args=(x, ks[0], 0.5), n_iter=n_iter)


def bench_rk4_combine(d=64, n_iter=500):
    """Benchmark the weighted RK4 combination kernel."""
    from rungekutta.solvers.kernels import rk4_combine
    x, ks = _make_test_data(d)
    return _time_fn(rk4_combine, args=(x, *ks), n_iter=n_iter)


def bench_rk4_step(d=64, n_iter=500):
    """Benchmark one rk4_step call on exponential decay of dimension d."""
    from rungekutta.models.reference import ExponentialDecay
    from rungekutta.solvers.time_integrators import rk4_step
    model = ExponentialDecay(lam=1.0, d=d)
    x, _ = _make_test_data(d)
    return _time_fn(rk4_step, args=(0.0, x, 1e-3, d, model), n_iter=n_iter)


def bench_stepper(d=64, n_iter=500):
    """Benchmark one RK4.step() call."""
    from rungekutta.models.reference import ExponentialDecay
    from rungekutta.solvers.time_integrators import RK4
    stepper = RK4(ExponentialDecay(lam=1.0, d=d), dt=1e-3)
    x, _ = _make_test_data(d)
    return _time_fn(stepper.step, args=(x, 0.0), n_iter=n_iter)


def _integrate_oscillator(n_steps, dt):
    from rungekutta.models.reference import HarmonicOscillator
    from rungekutta.solvers.time_integrators import RK4
    model = HarmonicOscillator(omega=1.0)
    stepper = RK4(model, dt=dt)
    x0 = np.array([1.0, 0.0])
    x = x0
    t = 0.0
    for _ in range(n_steps):
        x = stepper.step(x, t)
        t += dt
    return x, model.exact(t, x0)


def bench_trajectory(n_steps=10000, dt=1e-3):
    """Time a full fixed-step trajectory (macro benchmark)."""
    t0 = time.perf_counter()
    x, exact = _integrate_oscillator(n_steps, dt)
    elapsed = time.perf_counter() - t0
    return {
        "elapsed_s": elapsed,
        "n_steps": n_steps,
        "max_error": float(np.max(np.abs(x - exact))),
    }


def profile_trajectory(n_steps=10000, dt=1e-3):
    """Run cProfile on a fixed-step trajectory, return stats as string."""
    pr = cProfile.Profile()
    pr.enable()
    _integrate_oscillator(n_steps, dt)
    pr.disable()
    s = io.StringIO()
    ps = pstats.Stats(pr, stream=s).sort_stats("cumulative")
    ps.print_stats(30)
    return s.getvalue()


def run_all_benchmarks(d=64, verbose=True, n_steps=10000):
    """Run all micro and macro benchmarks. Returns dict of results."""
    logger.info("Starting benchmarks: d=%d, n_steps=%d", d, n_steps)
    results = {}

    benches = [
        ("stage_state", bench_stage_state),
        ("rk4_combine", bench_rk4_combine),
        ("rk4_step", bench_rk4_step),
        ("stepper", bench_stepper),
    ]

    for name, fn in benches:
        if verbose:
            print(f"  {name}...", end="", flush=True)
        r = fn(d=d)
        results[name] = r
        if verbose:
            print(f" {r['median_ms']:.4f} ms (median, n={r['n_iter']})")

    if verbose:
        print(f"  trajectory ({n_steps} steps)...", end="", flush=True)
    r = bench_trajectory(n_steps=n_steps)
    results["trajectory"] = r
    if verbose:
        print(f" {r['elapsed_s']:.2f} s (max error {r['max_error']:.2e})")

    logger.info("Benchmarks complete: %d results", len(results))
    return results


def compare_results(before, after):
    """Print a comparison table of two benchmark result sets."""
    print(f"\n{'Benchmark':<22} {'Before':>10} {'After':>10} {'Speedup':>10}")
    print("-" * 55)
    for key in before:
        if key == "trajectory":
            b = before[key]["elapsed_s"]
            a = after[key]["elapsed_s"]
            speedup = b / a if a > 0 else float("inf")
            print(f"{key:<22} {b:>9.2f}s {a:>9.2f}s {speedup:>9.1f}x")
        else:
            b = before[key]["median_ms"]
            a = after[key]["median_ms"]
            speedup = b / a if a > 0 else float("inf")
            print(f"{key:<22} {b:>8.3f}ms {a:>8.3f}ms {speedup:>9.1f}x")


if __name__ == "__main__":
    from rungekutta.log_utils import configure_logging
    configure_logging()

    print("=" * 55)
    print("RK4 Benchmarks")
    print("=" * 55)
    print()

    print("cProfile of trajectory (10000 steps):")
    print(profile_trajectory())

    print("Micro-benchmarks (d=64):")
    run_all_benchmarks(d=64)
