import numbers
import numpy as np

"""
Floating-point capability sets used by the transcendental part of Complex.
One generic implementation over numpy ufuncs, instantiated per precision.
Currently only float32 and float64 are supported.
"""


class FloatBackend:
    """Scalar floating-point operations for a single numpy dtype.

    Every method casts its result back to ``dtype`` so a computation started in
    single precision stays in single precision.

    Attributes:
        dtype (type) : The numpy scalar type, e.g. np.float32.
        eps (dtype) : Machine epsilon of dtype.
        pi (dtype) : π rounded to dtype.
    """

    dtype = None

    def __init__(self):
        assert self.dtype is not None, "Use Float32Backend or Float64Backend"
        self.eps = np.finfo(self.dtype).eps
        self.pi = self.dtype(np.pi)
        self.sqrt1_2 = self.dtype(np.sqrt(0.5))
        self.zero = self.dtype(0)
        self.one = self.dtype(1)

    def __repr__(self):
        return f"{self.__class__.__name__}()"

    def scalar(self, x):
        return self.dtype(x)

    def isnan(self, x):
        return bool(np.isnan(x))

    def abs(self, x):
        return self.dtype(np.abs(x))

    def sqrt(self, x):
        return self.dtype(np.sqrt(x))

    def cbrt(self, x):
        return self.dtype(np.cbrt(x))

    def hypot(self, x, y):
        return self.dtype(np.hypot(x, y))

    def atan2(self, y, x):
        return self.dtype(np.arctan2(y, x))

    def copysign(self, x, y):
        return self.dtype(np.copysign(x, y))

    def exp(self, x):
        return self.dtype(np.exp(x))

    def log(self, x):
        return self.dtype(np.log(x))

    def power(self, x, n):
        return self.dtype(np.power(self.dtype(x), self.dtype(n)))

    def cos(self, x):
        return self.dtype(np.cos(x))

    def sin(self, x):
        return self.dtype(np.sin(x))

    def cosh(self, x):
        return self.dtype(np.cosh(x))

    def sinh(self, x):
        return self.dtype(np.sinh(x))

    def format(self, x):
        """Shortest round-trip positional form, '3' rather than '3.0'."""
        return np.format_float_positional(self.dtype(x), trim="-")


class Float32Backend(FloatBackend):
    dtype = np.float32


class Float64Backend(FloatBackend):
    dtype = np.float64


_FLOAT32 = Float32Backend()
_FLOAT64 = Float64Backend()


def get_backend(*args):
    """Return the backend matching the scalar types of args.

    float32 values select single precision unless a float64 is also present;
    Python ints and floats adapt to whichever precision the other arguments
    request. Any other real number is computed in double precision.

    Args:
        *args : Real scalars, typically the two components of a Complex.

    """
    for a in args:
        if not isinstance(a, numbers.Real):
            raise ValueError(f"Backend not supported, type={a.__class__}")

    if any(isinstance(a, np.float32) for a in args) and not any(
        isinstance(a, np.float64) for a in args
    ):
        return _FLOAT32
    return _FLOAT64
