"""Iterative radix-2 Cooley-Tukey FFT with a cached twiddle table."""

import math

from .complex_number import Complex, ONE, ZERO


def next_power_of_two(n):
    """Return the smallest power-of-two >= *n* (``1`` for ``n <= 1``)."""
    p = 1
    while p < n:
        p <<= 1
    return p


def _is_power_of_two(n):
    return n > 0 and n & (n - 1) == 0


class FFT:
    """Forward DFT engine.

    The engine keeps the twiddle factors ``e^{-2*pi*i*k/n}`` for the last
    transform length it saw.  Calling it again with a signal that pads to
    the same length reuses them; a different length rebuilds the table.

    An instance is not safe to share between threads; give each thread its
    own engine.

    Examples
    --------
    >>> fft = FFT()
    >>> spectrum = fft.transform_real([1.0, 1.0, 1.0])
    >>> len(spectrum)
    4
    >>> round(spectrum[0].re, 10)
    3.0
    """

    def __init__(self):
        self.twiddle_cache = []
        self.current_size = 0

    # ------------------------------------------------------------------
    # Public entry points
    # ------------------------------------------------------------------

    def transform(self, signal):
        """Compute the DFT of *signal* (sequence of complex samples).

        The input is zero-padded to the next power of two, so the returned
        list of :class:`Complex` bins is always a power of two long (an
        empty input yields a single zero bin).
        """
        n = next_power_of_two(len(signal))
        data = [Complex.from_complex(z) for z in signal]
        data.extend([ZERO] * (n - len(data)))

        self._fft_inplace(data)
        return data

    def transform_real(self, signal):
        """Compute the DFT of a real-valued *signal*."""
        n = next_power_of_two(len(signal))
        data = [Complex(x, 0.0) for x in signal]
        data.extend([ZERO] * (n - len(data)))

        self._fft_inplace(data)
        return data

    def compute_twiddle_factors(self, size):
        """Fill the twiddle cache for transforms of length *size*.

        A no-op when the cache already matches *size*.  Factors are produced
        by repeated multiplication with a single rotation step rather than
        one ``cos``/``sin`` pair per index; the rounding error this
        accumulates grows slowly with the index.
        """
        if size == self.current_size:
            return

        self.twiddle_cache.clear()

        base_angle = -2.0 * math.pi / size if size else 0.0
        factor = ONE
        step = Complex.from_polar(1.0, base_angle)

        for _ in range(size):
            self.twiddle_cache.append(factor)
            factor *= step

        self.current_size = size

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _fft_inplace(self, data):
        n = len(data)
        assert _is_power_of_two(n), f"buffer length {n} is not a power of two"

        if n != self.current_size:
            self.compute_twiddle_factors(n)

        _bit_reverse_permutation(data)

        twiddle = self.twiddle_cache
        size = 2
        step = n // 2

        while size <= n:
            half = size // 2
            for i in range(0, n, size):
                for j in range(half):
                    even = data[i + j]
                    odd = data[i + j + half] * twiddle[j * step]
                    data[i + j] = even + odd
                    data[i + j + half] = even - odd
            size *= 2
            step //= 2


def _bit_reverse_permutation(data):
    """Reorder *data* in place by bit-reversed index."""
    n = len(data)
    bits = n.bit_length() - 1

    # 0 and n-1 map to themselves.
    for i in range(1, n - 1):
        rev = 0
        j = i
        for _ in range(bits):
            rev = (rev << 1) | (j & 1)
            j >>= 1
        if rev > i:
            data[i], data[rev] = data[rev], data[i]
