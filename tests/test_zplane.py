from __future__ import annotations

import math
import warnings

import numpy as np
from scipy import signal

from filterscope.analysis.zplane import ROOT_AT_INFINITY, iir_zeros_poles_z, to_z_plane


def test_reciprocal_of_real_root() -> None:
    z = to_z_plane([0.5 + 0j])
    np.testing.assert_allclose(z, [2.0 + 0j])


def test_zero_root_maps_to_infinity_sentinel() -> None:
    z = to_z_plane([0j])
    assert z.size == 1
    assert math.isinf(z[0].real) and z[0].real > 0
    assert math.isinf(z[0].imag) and z[0].imag > 0
    assert not np.isnan(z[0].real)
    assert z[0] == ROOT_AT_INFINITY


def test_double_application_returns_input() -> None:
    w = np.array([0.5 + 0.25j, -2.0 + 0j, 0.1 - 3.0j, 1j])
    np.testing.assert_allclose(to_z_plane(to_z_plane(w)), w, rtol=1e-12)


def test_order_is_preserved() -> None:
    w = np.array([4.0, 0.0, -0.25, 2j])
    z = to_z_plane(w)
    np.testing.assert_allclose(z[[0, 2, 3]], [0.25, -4.0, -0.5j])
    assert z[1] == ROOT_AT_INFINITY


def test_empty_input_gives_empty_output() -> None:
    assert to_z_plane([]).size == 0


def test_first_order_sections() -> None:
    # b = 1 + 0.5 w, a = 1 - 0.9 w
    zeros, poles = iir_zeros_poles_z([1.0, 0.5], [1.0, -0.9])
    np.testing.assert_allclose(zeros, [-0.5 + 0j])
    np.testing.assert_allclose(poles, [0.9 + 0j])


def test_pure_delay_numerator_has_zero_at_infinity() -> None:
    zeros, poles = iir_zeros_poles_z([0.0, 1.0], [1.0])
    assert zeros.tolist() == [ROOT_AT_INFINITY]
    assert poles.size == 0


def test_butterworth_matches_scipy_tf2zpk(assert_same_roots) -> None:
    b, a = signal.butter(4, 0.3)
    zeros, poles = iir_zeros_poles_z(b, a)
    z_ref, p_ref, _ = signal.tf2zpk(b, a)

    assert_same_roots(poles, p_ref, atol=1e-8)
    # fourfold zero at z = -1 is ill-conditioned
    assert_same_roots(zeros, z_ref, atol=1e-3)
    assert np.all(np.abs(poles) < 1.0)


def test_sentinel_input_maps_to_nan_without_warning() -> None:
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        z = to_z_plane([ROOT_AT_INFINITY, 0.5 + 0j])
    assert np.isnan(z[0].real) and np.isnan(z[0].imag)
    assert z[1] == 2.0 + 0j
