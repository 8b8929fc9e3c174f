from imaginary.backend import FloatBackend, get_backend
from imaginary.complex import Complex

"""
Real-to-complex functions and closed-form polynomial solvers, written once over
a FloatBackend. imaginary.f32 and imaginary.f64 bind them to a precision.
"""


class InvalidCoefficientsError(ValueError):
    """The polynomial has a zero leading coefficient or a NaN coefficient."""


def cbrt_1(nx: FloatBackend):
    """The primitive cube root of unity -1/2 + (√3/2)i."""
    return Complex(nx.scalar(-0.5), nx.sqrt(nx.scalar(3)) / 2)


def cis(theta, nx: FloatBackend):
    """cos θ + i sin θ in the precision of nx."""
    theta = nx.scalar(theta)
    return Complex(nx.cos(theta), nx.sin(theta))


def ln(x, nx: FloatBackend):
    """Principal complex logarithm of a real number, ln(-x) + πi for x < 0."""
    x = nx.scalar(x)
    if x >= 0:
        return Complex(nx.log(x), nx.zero)
    return Complex(nx.log(-x), nx.pi)


def sqrt(x, nx: FloatBackend):
    """Principal complex square root of a real number, i√(-x) for x < 0."""
    x = nx.scalar(x)
    if x >= 0:
        return Complex(nx.sqrt(x), nx.zero)
    return Complex(nx.zero, nx.sqrt(-x))


def _check_coefficients(coeffs, nx: FloatBackend):
    coeffs = tuple(nx.scalar(c) for c in coeffs)
    if any(nx.isnan(c) for c in coeffs):
        raise InvalidCoefficientsError(f"Coefficients must not be NaN, got {coeffs}")
    if coeffs[0] == 0:
        raise InvalidCoefficientsError(
            f"The leading coefficient must be nonzero, got {coeffs}"
        )
    return coeffs


def quad(a, b, c, nx: FloatBackend):
    """Compute both roots of a x^2 + b x + c.

    Args:
        a (float): The coefficient of x^2, must be nonzero.
        b (float): The coefficient of x.
        c (float): The constant term.
        nx (FloatBackend): The precision used for computation.

    Returns:
        tuple of two Complex roots, (-b + √D) / 2a first.

    Raises:
        InvalidCoefficientsError: if a == 0 or any coefficient is NaN.
    """
    a, b, c = _check_coefficients((a, b, c), nx)
    sqrt_d = sqrt(b * b - 4 * a * c, nx)
    return ((-b + sqrt_d) / (2 * a), (-b - sqrt_d) / (2 * a))


def _horner(coeffs, x):
    a, b, c, d = coeffs
    f = ((a * x + b) * x + c) * x + d
    df = (3 * a * x + 2 * b) * x + c
    return f, df


def _polish(coeffs, x):
    """One Newton step on the cubic, kept only if it lowers the residual."""
    f, df = _horner(coeffs, x)
    if f.abs() == 0 or df.abs() == 0:
        return x
    y = x - f / df
    fy, _ = _horner(coeffs, y)
    return y if fy.abs() < f.abs() else x


def cubic(a, b, c, d, nx: FloatBackend):
    """Compute the three roots of a x^3 + b x^2 + c x + d with Cardano's method.

    The polynomial is reduced to t^3 + p t + q with x = t - b / 3a. One cube
    root u of -q/2 ± √(q²/4 + p³/27) is rotated by the cube roots of unity to
    get the three values of t = u - p / 3u, and every root is then polished
    with one Newton step on the original polynomial.

    Args:
        a (float): The coefficient of x^3, must be nonzero.
        b (float): The coefficient of x^2.
        c (float): The coefficient of x.
        d (float): The constant term.
        nx (FloatBackend): The precision used for computation.

    Returns:
        tuple of three Complex roots.

    Raises:
        InvalidCoefficientsError: if a == 0 or any coefficient is NaN.
    """
    coeffs = _check_coefficients((a, b, c, d), nx)
    a, b, c, d = coeffs

    # Transform coefficients
    b, c, d = b / a, c / a, d / a
    shift = b / 3
    p = c - b * b / 3
    q = 2 * b * b * b / 27 - b * c / 3 + d

    sqrt_disc = sqrt(q * q / 4 + p * p * p / 27, nx)
    u3 = -q / 2 + sqrt_disc
    u3_alt = -q / 2 - sqrt_disc
    # the larger branch is zero only when p == q == 0
    if u3_alt.abs() > u3.abs():
        u3 = u3_alt

    w = u3.cbrt()
    omega = cbrt_1(nx)
    roots = []
    for u in (w, w * omega, w / omega):
        if u.abs() == 0:
            x = Complex(-shift, nx.zero)
        else:
            x = u - p / (3 * u) - shift
        roots.append(_polish(coeffs, x))
    return tuple(roots)


def main():
    nx = get_backend(0.0)
    for coeffs in [(1, -4, 13), (1, 2, 1), (2, 0, 8)]:
        roots = quad(*coeffs, nx=nx)
        print(f"quad{coeffs}:", ", ".join(str(z) for z in roots))
    for coeffs in [(1, 0, -7, -6), (1, 3, -6, 4), (1, 0, -4, 2), (1, -3, 3, -1)]:
        roots = cubic(*coeffs, nx=nx)
        print(f"cubic{coeffs}:", ", ".join(str(z) for z in roots))


if __name__ == "__main__":
    main()
