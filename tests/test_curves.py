import numpy as np
import pytest
from pvloop import curves


def test_espvr_passes_through_V0():
    assert curves.end_systolic_pressure(curves.V0, 2.5) == 0.0
    assert np.isclose(curves.end_systolic_pressure(50.0, 2.5), 100.0)
    assert curves.end_systolic_pressure(5.0, 2.5) < 0


@pytest.mark.parametrize("alpha", [0.0, 0.005, 0.02, 0.04])
def test_edpvr_zero_at_zero_volume(alpha):
    assert curves.end_diastolic_pressure(0.0, alpha) == 0.0


@pytest.mark.parametrize("alpha", [0.005, 0.02, 0.04])
def test_edpvr_strictly_increasing(alpha):
    v = np.linspace(0, 220, 111)
    p = curves.end_diastolic_pressure(v, alpha)
    assert np.all(np.diff(p) > 0)


def test_edpvr_inverse():
    v = np.array([50.0, 120.0, 180.0])
    p = curves.end_diastolic_pressure(v, 0.02)
    assert np.isclose(p[1], 0.5 * (np.exp(2.4) - 1))
    assert np.allclose(curves.end_diastolic_volume(p, 0.02), v)
