"""Synthetic test waveforms: sinusoids, sums, uniform noise and DC."""

import math
import random

from .complex_number import Complex


def sine_wave(freq, samples, amplitude=1.0):
    """Return *samples* points of ``amplitude * sin(2*pi*freq*t)``.

    ``t`` runs over ``[0, 1)`` in steps of ``1 / samples``, so an integer
    *freq* completes exactly *freq* cycles and lands in bin *freq*.
    """
    return [
        Complex(amplitude * math.sin(2.0 * math.pi * freq * i / samples), 0.0)
        for i in range(samples)
    ]


def sum_signals(*signals):
    """Element-wise sum of several complex signals (truncated to the shortest)."""
    if not signals:
        return []
    result = list(signals[0])
    for other in signals[1:]:
        result = [a + b for a, b in zip(result, other)]
    return result


def white_noise(samples, seed=None):
    """Uniform noise in ``[-1, 1]``; pass *seed* for a reproducible sequence."""
    rng = random.Random(seed)
    return [Complex(rng.uniform(-1.0, 1.0), 0.0) for _ in range(samples)]


def dc_signal(samples, value=1.0):
    """A constant signal."""
    return [Complex(value, 0.0)] * samples


def _complex_signal(samples):
    return sum_signals(sine_wave(1.0, samples), sine_wave(10.0, samples))


# Name -> builder(samples), in the order the benchmark reports them.
SIGNAL_TYPES = {
    "sine_1hz": lambda samples: sine_wave(1.0, samples),
    "complex_signal": _complex_signal,
    "white_noise": lambda samples: white_noise(samples, seed=0),
    "dc_signal": dc_signal,
}
