import imaginary.backend as be
from fractions import Fraction
import numpy as np
import pytest


class TestGetBackend:
    def test_float64(self):
        assert isinstance(be.get_backend(1.0, 2.0), be.Float64Backend)
        assert isinstance(be.get_backend(np.float64(1.0)), be.Float64Backend)
        assert isinstance(be.get_backend(1, 2), be.Float64Backend)
        assert isinstance(be.get_backend(Fraction(1, 2)), be.Float64Backend)

    def test_float32(self):
        assert isinstance(be.get_backend(np.float32(1.0)), be.Float32Backend)
        assert isinstance(be.get_backend(np.float32(1.0), 0.0), be.Float32Backend)
        assert isinstance(be.get_backend(0, np.float32(1.0)), be.Float32Backend)

    def test_mixed_precision_promotes(self):
        nx = be.get_backend(np.float32(1.0), np.float64(1.0))
        assert isinstance(nx, be.Float64Backend)

    def test_not_supported(self):
        with pytest.raises(ValueError):
            be.get_backend(1j)
        with pytest.raises(ValueError):
            be.get_backend(1.0, "2")

    def test_base_class_needs_dtype(self):
        with pytest.raises(AssertionError):
            be.FloatBackend()


class TestFloatBackend:
    def test_constants_f32(self):
        nx = be.Float32Backend()
        assert nx.eps == np.finfo(np.float32).eps
        assert isinstance(nx.pi, np.float32)
        assert isinstance(nx.zero, np.float32)

    def test_constants_f64(self):
        nx = be.Float64Backend()
        assert nx.eps == np.finfo(np.float64).eps
        assert nx.pi == np.pi

    def test_results_keep_dtype_f32(self):
        nx = be.Float32Backend()
        for f in (nx.sqrt, nx.cbrt, nx.exp, nx.log, nx.cos, nx.sin, nx.cosh, nx.sinh):
            assert isinstance(f(0.5), np.float32)
        assert isinstance(nx.hypot(3.0, 4.0), np.float32)
        assert isinstance(nx.atan2(1.0, 1.0), np.float32)
        assert isinstance(nx.power(2.0, 0.5), np.float32)

    def test_copysign(self):
        nx = be.Float64Backend()
        assert nx.copysign(2.0, -0.0) == -2.0
        assert nx.copysign(2.0, 0.0) == 2.0

    def test_format(self):
        assert be.Float64Backend().format(3.0) == "3"
        assert be.Float64Backend().format(-0.25) == "-0.25"
        assert be.Float32Backend().format(0.1) == "0.1"

    def test_isnan(self):
        nx = be.Float64Backend()
        assert nx.isnan(float("nan"))
        assert not nx.isnan(1.0)
