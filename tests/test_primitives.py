"""Tests for raymarch2d/primitives.py: batched distance kernels and helpers.

Tests verify:
- Correct sign (negative inside a circle, zero on surface, positive outside)
- Unsigned rectangle distance (zero everywhere inside)
- Array shape / broadcasting consistency
"""

import numpy as np
import numpy.testing as npt
import pytest

from raymarch2d import primitives as sdf


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _p2(*xy) -> np.ndarray:
    """Single 2-D point as shape ``(1, 2)``."""
    return np.array([list(xy)], dtype=float)


def _grid2(n: int = 8, lo: float = -1.0, hi: float = 1.0) -> np.ndarray:
    """Uniform ``n²`` grid of 2-D points in ``[lo, hi]²`` (shape ``(n, n, 2)``)."""
    lin = np.linspace(lo, hi, n)
    Y, X = np.meshgrid(lin, lin, indexing="ij")
    return np.stack([X, Y], axis=-1)


# ===========================================================================
# Vector helpers
# ===========================================================================

class TestVecHelpers:
    def test_vec2_shape(self):
        v = sdf.vec2(np.array([1.0, 2.0]), np.array([3.0, 4.0]))
        assert v.shape == (2, 2)

    def test_vec2_broadcasts_scalar(self):
        v = sdf.vec2(np.arange(3.0), 1.0)
        npt.assert_array_equal(v[:, 1], [1.0, 1.0, 1.0])

    def test_length_single(self):
        npt.assert_allclose(sdf.length(np.array([[3.0, 4.0]])), [5.0])

    def test_dot_single(self):
        a = np.array([[1.0, 2.0]])
        b = np.array([[3.0, 4.0]])
        npt.assert_allclose(sdf.dot(a, b), [11.0])

    def test_clamp(self):
        x = np.array([-2.0, 0.5, 3.0])
        npt.assert_allclose(sdf.clamp(x, 0.0, 1.0), [0.0, 0.5, 1.0])


class TestPolarOffset:
    def test_zero_degrees_is_plus_x(self):
        npt.assert_allclose(sdf.polar_offset(np.array([1.0, 2.0]), 0.0, 5.0), [6.0, 2.0])

    def test_ninety_degrees_is_plus_y(self):
        npt.assert_allclose(sdf.polar_offset(np.zeros(2), 90.0, 3.0), [0.0, 3.0], atol=1e-12)

    def test_vectorised_angles(self):
        angles = np.array([0.0, 90.0, 180.0, 270.0])
        out = sdf.polar_offset(np.zeros(2), angles, 1.0)
        assert out.shape == (4, 2)
        npt.assert_allclose(sdf.length(out), np.ones(4))


# ===========================================================================
# Distance kernels
# ===========================================================================

class TestSdCircle:
    C = np.array([1.0, 1.0])
    R = 0.5

    def test_inside_at_centre(self):
        npt.assert_allclose(sdf.sdCircle(_p2(1.0, 1.0), self.C, self.R), [-self.R])

    def test_on_surface(self):
        npt.assert_allclose(sdf.sdCircle(_p2(1.5, 1.0), self.C, self.R), [0.0], atol=1e-12)

    def test_outside(self):
        npt.assert_allclose(sdf.sdCircle(_p2(1.0, 3.0), self.C, self.R), [1.5])

    def test_grid_shape(self):
        assert sdf.sdCircle(_grid2(6), self.C, self.R).shape == (6, 6)

    def test_many_circles_broadcast(self):
        centres = np.array([[0.0, 0.0], [10.0, 0.0]])
        radii = np.array([1.0, 2.0])
        d = sdf.sdCircle(_p2(5.0, 0.0)[:, None, :], centres, radii)
        npt.assert_allclose(d, [[4.0, 3.0]])


class TestUdRect2D:
    LO = np.array([0.0, 0.0])
    HI = np.array([2.0, 1.0])

    def test_inside_is_zero(self):
        pts = _grid2(5, 0.1, 0.9)
        npt.assert_array_equal(sdf.udRect2D(pts, self.LO, self.HI), np.zeros((5, 5)))

    def test_on_edge_is_zero(self):
        npt.assert_allclose(sdf.udRect2D(_p2(2.0, 0.5), self.LO, self.HI), [0.0])

    def test_beside_edge(self):
        npt.assert_allclose(sdf.udRect2D(_p2(3.0, 0.5), self.LO, self.HI), [1.0])

    def test_off_corner(self):
        npt.assert_allclose(sdf.udRect2D(_p2(5.0, 5.0), self.LO, self.HI), [5.0])

    def test_never_negative(self):
        assert (sdf.udRect2D(_grid2(16, -3.0, 3.0), self.LO, self.HI) >= 0).all()


class TestOpUnion:
    def test_min(self):
        npt.assert_array_equal(
            sdf.opUnion(np.array([1.0, -2.0]), np.array([0.5, 3.0])), [0.5, -2.0]
        )

    @pytest.mark.parametrize("shape", [(1,), (4, 4)])
    def test_shape_preserved(self, shape):
        assert sdf.opUnion(np.zeros(shape), np.ones(shape)).shape == shape
