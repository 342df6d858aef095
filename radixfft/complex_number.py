"""Immutable complex-number value type used by the FFT engine.

A :class:`Complex` is a pair of IEEE-754 doubles ``(re, im)`` standing for
``re + im*i``.  Every operation is available twice: as a named method
returning a new value (``a.mul(b)``) and through the matching Python
operator (``a * b``).  The compound forms (``a *= b``, ``a.imul(b)``)
return the replacement value and rebind the name; no instance is ever
mutated.

Nothing here raises on numeric input.  The :mod:`math` functions raise
``ValueError``/``OverflowError`` in a few places where IEEE-754 defines a
result (``cosh(1000)``, ``sin(inf)``, ``x / 0`` ...); the private helpers
below return that result instead.
"""

import math


INF = float("inf")
NAN = float("nan")


# ---------------------------------------------------------------------------
# IEEE-754 scalar helpers
# ---------------------------------------------------------------------------

def _fma(x, y, z):
    """Fused ``x * y + z`` with a single rounding."""
    try:
        return math.fma(x, y, z)
    except (ValueError, OverflowError):
        # Invalid (inf * 0) or overflowing results: the unfused expression
        # produces the same nan / inf without raising.
        return x * y + z


def _div(x, s):
    """IEEE-754 division of a real by a real scalar."""
    if s != 0.0:
        return x / s
    if x != x or x == 0.0:
        return NAN
    return math.copysign(INF, x) * math.copysign(1.0, s)


def _fmod(x, s):
    """Truncated remainder (C ``fmod``), ``nan`` where undefined."""
    try:
        return math.fmod(x, s)
    except ValueError:
        return NAN


def _sin(x):
    return math.sin(x) if math.isfinite(x) else NAN


def _cos(x):
    return math.cos(x) if math.isfinite(x) else NAN


def _cosh(x):
    try:
        return math.cosh(x)
    except OverflowError:
        return INF


def _sinh(x):
    try:
        return math.sinh(x)
    except OverflowError:
        return math.copysign(INF, x)


# ---------------------------------------------------------------------------
# Complex value type
# ---------------------------------------------------------------------------

class Complex:
    """A point ``re + im*i`` in the complex plane."""

    __slots__ = ("_re", "_im")

    def __init__(self, re=0.0, im=0.0):
        object.__setattr__(self, "_re", float(re))
        object.__setattr__(self, "_im", float(im))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    # -- construction -------------------------------------------------------

    @classmethod
    def from_polar(cls, r, theta):
        """Build ``r * (cos(theta) + i*sin(theta))``."""
        return cls(r * _cos(theta), r * _sin(theta))

    @classmethod
    def i(cls):
        """The imaginary unit ``(0, 1)``."""
        return cls(0.0, 1.0)

    @classmethod
    def from_complex(cls, z):
        """Lift a :class:`Complex`, a built-in ``complex`` or a real number."""
        if isinstance(z, cls):
            return z
        z = complex(z)
        return cls(z.real, z.imag)

    # -- accessors ----------------------------------------------------------

    @property
    def re(self):
        return self._re

    @property
    def im(self):
        return self._im

    def norm(self):
        """Euclidean magnitude, via :func:`math.hypot` to avoid overflow."""
        return math.hypot(self._re, self._im)

    # -- trigonometry -------------------------------------------------------

    def sin(self):
        """``sin(a+bi) = sin(a)cosh(b) + i*cos(a)sinh(b)``."""
        a, b = self._re, self._im
        return Complex(_sin(a) * _cosh(b), _cos(a) * _sinh(b))

    def cos(self):
        """``cos(a+bi) = cos(a)cosh(b) - i*sin(a)sinh(b)``."""
        a, b = self._re, self._im
        return Complex(_cos(a) * _cosh(b), -_sin(a) * _sinh(b))

    # -- arithmetic ---------------------------------------------------------

    def add(self, other):
        return Complex(self._re + other._re, self._im + other._im)

    def sub(self, other):
        return Complex(self._re - other._re, self._im - other._im)

    def mul(self, other):
        """``(a+bi)(c+di) = (ac - bd) + (ad + bc)i`` using fused multiply-add."""
        a, b = self._re, self._im
        c, d = other._re, other._im
        return Complex(_fma(a, c, -(b * d)), _fma(a, d, b * c))

    def div(self, s):
        """Divide both components by the real scalar *s*."""
        return Complex(_div(self._re, s), _div(self._im, s))

    def mod(self, s):
        """Component-wise truncated remainder by the real scalar *s*."""
        return Complex(_fmod(self._re, s), _fmod(self._im, s))

    # In-place forms: the returned value replaces the left operand.
    iadd = add
    isub = sub
    imul = mul
    idiv = div
    imod = mod

    # -- operator protocol --------------------------------------------------

    def __add__(self, other):
        if not isinstance(other, Complex):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Complex):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other):
        if not isinstance(other, Complex):
            return NotImplemented
        return self.mul(other)

    def __truediv__(self, s):
        if not isinstance(s, (int, float)):
            return NotImplemented
        return self.div(s)

    def __mod__(self, s):
        if not isinstance(s, (int, float)):
            return NotImplemented
        return self.mod(s)

    __iadd__ = __add__
    __isub__ = __sub__
    __imul__ = __mul__
    __itruediv__ = __truediv__
    __imod__ = __mod__

    def __neg__(self):
        return Complex(-self._re, -self._im)

    # -- comparison / conversion --------------------------------------------

    def __eq__(self, other):
        # Exact IEEE comparison: NaN components never compare equal.
        if not isinstance(other, Complex):
            return NotImplemented
        return self._re == other._re and self._im == other._im

    def __hash__(self):
        return hash((self._re, self._im))

    def __complex__(self):
        return complex(self._re, self._im)

    def __reduce__(self):
        return (Complex, (self._re, self._im))

    def __iter__(self):
        yield self._re
        yield self._im

    def __repr__(self):
        return f"Complex({self._re!r}, {self._im!r})"

    def __str__(self):
        sign = "-" if math.copysign(1.0, self._im) < 0 else "+"
        return f"{self._re} {sign} {abs(self._im)}i"


I = Complex.i()
ZERO = Complex(0.0, 0.0)
ONE = Complex(1.0, 0.0)
