"""Timing harness for the FFT engine.

Two suites are provided:

* :func:`bench_sizes` - a 1 Hz sine at every size in :data:`DEFAULT_SIZES`,
  showing how the transform scales with length;
* :func:`bench_signals` - the waveforms in
  :data:`radixfft.signals.SIGNAL_TYPES` at a fixed size.

Both reuse a single :class:`~radixfft.fft.FFT` across calls, so the twiddle
cache is rebuilt only when the size changes.
"""

import time
from dataclasses import dataclass

from .fft import FFT
from .signals import SIGNAL_TYPES, sine_wave


DEFAULT_SIZES = (8, 16, 32, 64, 128, 256, 512, 1024, 2048, 4096)
SIGNAL_SIZE = 1024
DEFAULT_REPEATS = 20


@dataclass(frozen=True)
class BenchResult:
    """Timing of one signal: best and mean wall time per transform (seconds)."""

    name: str
    size: int
    repeats: int
    best: float
    mean: float

    @property
    def per_call_us(self):
        return self.mean * 1e6


def time_transform(engine, signal, repeats=DEFAULT_REPEATS, name="signal"):
    """Run ``engine.transform(signal)`` *repeats* times and time each call."""
    if repeats < 1:
        raise ValueError(f"repeats must be >= 1, got {repeats}")

    timings = []
    for _ in range(repeats):
        t0 = time.perf_counter()
        engine.transform(signal)
        timings.append(time.perf_counter() - t0)

    return BenchResult(
        name=name,
        size=len(signal),
        repeats=repeats,
        best=min(timings),
        mean=sum(timings) / repeats,
    )


def bench_sizes(sizes=DEFAULT_SIZES, repeats=DEFAULT_REPEATS, engine=None):
    """Time a 1 Hz sine wave at each of *sizes*."""
    engine = engine or FFT()
    results = []
    for size in sizes:
        if size < 1:
            raise ValueError(f"sizes must be positive, got {size}")
        results.append(time_transform(engine, sine_wave(1.0, size), repeats, "sine_wave"))
    return results


def bench_signals(size=SIGNAL_SIZE, repeats=DEFAULT_REPEATS, engine=None):
    """Time every waveform in ``SIGNAL_TYPES`` at a fixed *size*."""
    if size < 1:
        raise ValueError(f"size must be positive, got {size}")
    engine = engine or FFT()
    return [
        time_transform(engine, build(size), repeats, name)
        for name, build in SIGNAL_TYPES.items()
    ]


def format_results(results):
    """Render *results* as an aligned plain-text table."""
    header = ("signal", "size", "repeats", "best (us)", "mean (us)")
    rows = [
        (r.name, str(r.size), str(r.repeats), f"{r.best * 1e6:.1f}", f"{r.per_call_us:.1f}")
        for r in results
    ]
    widths = [max(len(row[c]) for row in [header] + rows) for c in range(len(header))]

    lines = []
    for row in [header] + rows:
        cells = [row[0].ljust(widths[0])] + [cell.rjust(w) for cell, w in zip(row[1:], widths[1:])]
        lines.append("  ".join(cells))
    return "\n".join(lines)
