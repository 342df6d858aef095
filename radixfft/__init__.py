"""radixfft - iterative radix-2 FFT on a small complex-number type."""

__version__ = "0.1.0"

from .complex_number import Complex, I  # noqa: E402
from .fft import FFT, next_power_of_two  # noqa: E402

__all__ = ["Complex", "FFT", "I", "next_power_of_two", "__version__"]
