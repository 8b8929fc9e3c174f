from imaginary.backend import Float64Backend
from imaginary.complex import Complex
import imaginary.functions as fn

"""
Double precision (numpy.float64) constants and free functions.
"""

nx = Float64Backend()

I = Complex(nx.zero, nx.one)
CBRT_1 = fn.cbrt_1(nx)
EPSILON = nx.eps
PI = nx.pi


def cis(theta):
    return fn.cis(theta, nx)


def ln(x):
    return fn.ln(x, nx)


def sqrt(x):
    return fn.sqrt(x, nx)


def quad(a, b, c):
    return fn.quad(a, b, c, nx)


def cubic(a, b, c, d):
    return fn.cubic(a, b, c, d, nx)
