import numbers
import numpy as np
from imaginary.backend import get_backend


def _is_real(x):
    return isinstance(x, numbers.Real)


def _format(x):
    if isinstance(x, (float, np.floating)):
        return get_backend(x).format(x)
    return str(x)


def _zero_like(x):
    """Zero of the same kind as x, a 0-d tensor or array stays 0-d."""
    if isinstance(x, numbers.Number):
        return type(x)(0)
    if hasattr(x, "new_zeros"):
        return x.new_zeros(x.shape)
    return np.zeros_like(x)


class Complex:
    """A complex number r + i·j over an arbitrary scalar type.

    The algebraic operators only use the scalar's own +, -, *, / and unary -,
    so any type providing the operators a given operation needs will do
    (int, Fraction, numpy scalars, 0-d torch tensors, ...). The transcendental
    methods (abs, exp, sqrt, cos, ...) require real components and are
    computed in float32 or float64 depending on the component types, see
    imaginary.backend.get_backend.

    Values behave like immutable numbers: every operator returns a new
    Complex and `a += b` rebinds `a` instead of mutating it.

    Attributes:
        r : The real part.
        i : The imaginary part.
    """

    __slots__ = ("r", "i")

    # numpy scalars on the left of an operator defer to our reflected methods
    __array_ufunc__ = None

    def __init__(self, r=0.0, i=None):
        if i is None:
            i = _zero_like(r)
        self.r = r
        self.i = i

    @classmethod
    def from_pair(cls, pair: tuple):
        """Build from a (real, imag) pair."""
        r, i = pair
        return cls(r, i)

    @classmethod
    def from_scalar(cls, x):
        """Build from a real scalar, the imaginary part is the scalar type's zero."""
        return cls(x)

    def to_pair(self):
        return (self.r, self.i)

    def __iter__(self):
        yield self.r
        yield self.i

    def __repr__(self):
        return f"{self.__class__.__name__}(r={self.r!r}, i={self.i!r})"

    def __str__(self):
        """Human readable form, e.g. '3', 'i', '-4*i', '3 - 4*i', '-3 + i'."""
        r, i = self.r, self.i
        if i == 0:
            return _format(r)
        if r == 0:
            if i == 1:
                return "i"
            if i == -1:
                return "-i"
            return f"{_format(i)}*i"
        if i < 0:
            if i == -1:
                return f"{_format(r)} - i"
            return f"{_format(r)} - {_format(-i)}*i"
        if i == 1:
            return f"{_format(r)} + i"
        return f"{_format(r)} + {_format(i)}*i"

    def __eq__(self, other):
        if not isinstance(other, Complex):
            return NotImplemented
        return bool(self.r == other.r) and bool(self.i == other.i)

    __hash__ = None

    # ---------- algebraic core ----------

    def __neg__(self):
        return Complex(-self.r, -self.i)

    def conj(self):
        """Complex conjugate (r, -i)."""
        return Complex(self.r, -self.i)

    def __add__(self, other):
        """Add a Complex or a real scalar."""
        if isinstance(other, Complex):
            return Complex(self.r + other.r, self.i + other.i)
        if _is_real(other):
            return Complex(self.r + other, self.i)
        return NotImplemented

    def __radd__(self, other):
        if _is_real(other):
            return Complex(other + self.r, self.i)
        return NotImplemented

    def __sub__(self, other):
        """Subtract a Complex or a real scalar."""
        if isinstance(other, Complex):
            return Complex(self.r - other.r, self.i - other.i)
        if _is_real(other):
            return Complex(self.r - other, self.i)
        return NotImplemented

    def __rsub__(self, other):
        if _is_real(other):
            return Complex(other - self.r, -self.i)
        return NotImplemented

    def __mul__(self, other):
        """Multiply by a Complex or a real scalar."""
        if isinstance(other, Complex):
            return Complex(
                self.r * other.r - self.i * other.i,
                self.r * other.i + self.i * other.r,
            )
        if _is_real(other):
            return Complex(self.r * other, self.i * other)
        return NotImplemented

    def __rmul__(self, other):
        if _is_real(other):
            return Complex(other * self.r, other * self.i)
        return NotImplemented

    def __truediv__(self, other):
        """Divide by a Complex or a real scalar.

        Uses the textbook formula (a·conj(b)) / |b|², so operands far from unit
        magnitude may overflow or underflow in the denominator. Division by zero
        gives whatever the scalar type gives (inf/nan for numpy floats).
        """
        if isinstance(other, Complex):
            denom = other.r * other.r + other.i * other.i
            return Complex(
                (self.r * other.r + self.i * other.i) / denom,
                (self.i * other.r - self.r * other.i) / denom,
            )
        if _is_real(other):
            return Complex(self.r / other, self.i / other)
        return NotImplemented

    def __rtruediv__(self, other):
        if _is_real(other):
            denom = self.r * self.r + self.i * self.i
            return Complex(other * self.r / denom, -other * self.i / denom)
        return NotImplemented

    def __pow__(self, n):
        """z ** n, with powc for a Complex exponent and powf for a real one."""
        if isinstance(n, Complex):
            return self.powc(n)
        if _is_real(n):
            return self.powf(n)
        return NotImplemented

    def __abs__(self):
        return self.abs()

    # ---------- floating-point functions ----------

    @property
    def nx(self):
        """The floating-point backend matching the component types."""
        return get_backend(self.r, self.i)

    def _parts(self):
        nx = self.nx
        return nx, nx.scalar(self.r), nx.scalar(self.i)

    @classmethod
    def cis(cls, theta):
        """cos θ + i sin θ, i.e. e^(iθ)."""
        nx = get_backend(theta)
        theta = nx.scalar(theta)
        return cls(nx.cos(theta), nx.sin(theta))

    def abs(self):
        """Magnitude, computed with hypot to avoid overflow in r² + i²."""
        nx, x, y = self._parts()
        return nx.hypot(x, y)

    def sign(self):
        """Unit-magnitude value in the same direction. NaN for zero."""
        nx, x, y = self._parts()
        return Complex(x, y) / nx.hypot(x, y)

    def angle(self):
        """Principal argument in (-π, π]."""
        nx, x, y = self._parts()
        return nx.atan2(y, x)

    def recip(self):
        """Multiplicative inverse conj(z) / |z|²."""
        nx, x, y = self._parts()
        denom = x * x + y * y
        return Complex(x / denom, -y / denom)

    def exp(self):
        nx, x, y = self._parts()
        return nx.exp(x) * Complex.cis(y)

    def ln(self):
        """Natural logarithm on the principal branch."""
        nx, x, y = self._parts()
        return Complex(nx.log(nx.hypot(x, y)), nx.atan2(y, x))

    def powf(self, n):
        """z^n for a real exponent n."""
        nx = self.nx
        n = nx.scalar(n)
        r = nx.power(self.abs(), n)
        return r * Complex.cis(n * self.angle())

    def powc(self, n):
        """z^n for a complex exponent n."""
        if not isinstance(n, Complex):
            n = Complex(n)
        return (n * self.ln()).exp()

    def sqrt(self):
        """Principal square root.

        On the real axis the sign of i picks the side of the cut, so
        sqrt(-1 + 0i) = i and sqrt(-1 - 0i) = -i. Off the axis the half-angle
        formula is evaluated with m + r for r >= 0 and with m - r for r < 0,
        so neither branch subtracts nearly equal numbers.
        """
        nx, x, y = self._parts()
        if y == 0:
            if x >= 0:
                return Complex(nx.sqrt(x), nx.zero)
            return Complex(nx.zero, nx.copysign(nx.sqrt(-x), y))

        m = nx.hypot(x, y)
        if x >= 0:
            t = nx.sqrt(m + x)
            return Complex(t * nx.sqrt1_2, y / t * nx.sqrt1_2)
        t = nx.sqrt((m - x) / 2)
        return Complex(nx.abs(y) / (2 * t), nx.copysign(t, y))

    def cbrt(self):
        """Principal cube root, polished with one Newton step on w³ - z."""
        nx, x, y = self._parts()
        r = nx.hypot(x, y)
        if r == 0:
            return Complex(nx.zero, nx.zero)
        z = Complex(x, y)
        w = nx.cbrt(r) * Complex.cis(nx.atan2(y, x) / 3)
        w2 = w * w
        return w - (w2 * w - z) / (3 * w2)

    def cos(self):
        nx, x, y = self._parts()
        return Complex(nx.cos(x) * nx.cosh(y), -(nx.sin(x) * nx.sinh(y)))

    def sin(self):
        nx, x, y = self._parts()
        return Complex(nx.sin(x) * nx.cosh(y), nx.cos(x) * nx.sinh(y))

    def tan(self):
        """Tangent. For |y| > 1 the quotient is scaled by e^(-2|y|) so cosh(2y)
        never overflows and tan tends to copysign(1, y)·i.
        """
        nx, x, y = self._parts()
        if nx.abs(y) > 1:
            e = nx.exp(-2 * nx.abs(y))
            denom = 1 + 2 * e * nx.cos(2 * x) + e * e
            return Complex(
                2 * e * nx.sin(2 * x) / denom, nx.copysign(1 - e * e, y) / denom
            )
        denom = nx.cos(2 * x) + nx.cosh(2 * y)
        return Complex(nx.sin(2 * x) / denom, nx.sinh(2 * y) / denom)

    def sec(self):
        return self.cos().recip()

    def csc(self):
        return self.sin().recip()

    def cot(self):
        return self.tan().recip()

    def cosh(self):
        nx, x, y = self._parts()
        return Complex(nx.cosh(x) * nx.cos(y), nx.sinh(x) * nx.sin(y))

    def sinh(self):
        nx, x, y = self._parts()
        return Complex(nx.sinh(x) * nx.cos(y), nx.cosh(x) * nx.sin(y))

    def tanh(self):
        nx, x, y = self._parts()
        # same scaling as tan, with the roles of x and y swapped
        if nx.abs(x) > 1:
            e = nx.exp(-2 * nx.abs(x))
            denom = 1 + 2 * e * nx.cos(2 * y) + e * e
            return Complex(
                nx.copysign(1 - e * e, x) / denom, 2 * e * nx.sin(2 * y) / denom
            )
        denom = nx.cosh(2 * x) + nx.cos(2 * y)
        return Complex(nx.sinh(2 * x) / denom, nx.sin(2 * y) / denom)

    def sech(self):
        return self.cosh().recip()

    def csch(self):
        return self.sinh().recip()

    def coth(self):
        return self.tanh().recip()
