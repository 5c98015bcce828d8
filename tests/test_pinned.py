import numpy as np
import pytest
from pvloop import curves, solver

baseline = solver.baseline_state()


def pinned(Ees=2.5, EDV=120.0, alpha=0.02):
    return solver.solve_pinned(Ees, EDV, alpha, baseline.ESP, baseline.LVEDP)


def test_pinned_at_baseline_reproduces_baseline():
    state = pinned()
    assert state.EDV == pytest.approx(baseline.EDV)
    assert state.ESV == pytest.approx(baseline.ESV)
    assert state.ESP == baseline.ESP
    assert state.EF == pytest.approx(baseline.EF)


@pytest.mark.parametrize("Ees", [0.05, 0.5, 1.0, 2.5, 8.0])
@pytest.mark.parametrize("EDV", [20.0, 50.0, 120.0, 250.0])
@pytest.mark.parametrize("alpha", [0.0, 0.0005, 0.01, 0.02, 0.04])
def test_pinned_never_inverts_volumes(Ees, EDV, alpha):
    state = pinned(Ees, EDV, alpha)
    assert state.ESV <= state.EDV - 1
    assert state.EDV >= solver.MIN_VIABLE_EDV
    assert state.ESP == baseline.ESP
    assert abs(state.SV - (state.EDV - state.ESV)) < 1e-9


def test_stiffer_ventricle_cannot_fill_past_pinned_pressure():
    state = pinned(alpha=0.03)
    cap = np.log(baseline.LVEDP / curves.A_ED + 1) / 0.03
    assert state.EDV == pytest.approx(cap)
    assert state.LVEDP == pytest.approx(baseline.LVEDP)


def test_compliant_ventricle_keeps_slider_preload():
    assert pinned(EDV=140.0, alpha=0.01).EDV == 140.0


def test_pinned_floors_preload():
    assert pinned(EDV=20.0).EDV == solver.MIN_VIABLE_EDV


def test_pinned_vanishing_compliance_uses_ceiling():
    assert solver.filling_volume_cap(baseline.LVEDP, 0.0) == solver.MAX_EFFECTIVE_EDV
    assert pinned(EDV=250.0, alpha=0.0).EDV == solver.MAX_EFFECTIVE_EDV


def test_higher_contractility_lowers_pinned_esv():
    assert pinned(Ees=4.0).ESV < pinned(Ees=2.5).ESV < pinned(Ees=1.5).ESV


@pytest.mark.parametrize("alpha", [0.02, 0.0205, 0.0195, 0.02099])
def test_effective_edv_identity_near_reference(alpha):
    assert solver.effective_edv(137.0, alpha) == 137.0


def test_effective_edv_low_compliance_fallback():
    assert solver.effective_edv(100.0, 0.0) == pytest.approx(130.0)
    assert solver.effective_edv(180.0, 0.001) == solver.MAX_EFFECTIVE_EDV


def test_effective_edv_keeps_filling_pressure():
    edv = solver.effective_edv(120.0, 0.03)
    assert edv == pytest.approx(80.0)
    assert curves.end_diastolic_pressure(edv, 0.03) == pytest.approx(
        curves.end_diastolic_pressure(120.0, curves.REFERENCE_ALPHA)
    )


def test_effective_edv_is_clamped():
    assert solver.effective_edv(120.0, 0.005) == solver.MAX_EFFECTIVE_EDV
    assert solver.effective_edv(60.0, 0.04) == solver.MIN_VIABLE_EDV
