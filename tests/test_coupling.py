import pytest
from pvloop import solver
from pvloop.coupling import ComputationMode, Control, Coupling, Session, transition
from pvloop.scenarios import SCENARIOS


@pytest.mark.parametrize("control", [Control.CONTRACTILITY, Control.PRELOAD, Control.COMPLIANCE])
def test_other_controls_keep_coupling(control):
    assert transition(Coupling.COUPLED, control) is Coupling.COUPLED
    assert transition(Coupling.DECOUPLED, control) is Coupling.DECOUPLED


def test_afterload_decouples_for_good():
    assert transition(Coupling.COUPLED, Control.AFTERLOAD) is Coupling.DECOUPLED
    assert transition(Coupling.DECOUPLED, Control.AFTERLOAD) is Coupling.DECOUPLED
    assert transition(Coupling.COUPLED, "arterial_elastance") is Coupling.DECOUPLED


def test_new_session_shows_normal_scenario():
    session = Session()
    assert session.mode is ComputationMode.SCENARIO
    assert session.coupling is Coupling.COUPLED
    assert session.sliders == solver.NORMAL_PARAMETERS
    assert session.state() == solver.baseline_state()
    assert session.current_step.title == "Filling"


def test_scenario_mode_solves_directly():
    session = Session().select_scenario("increased_afterload")
    params = SCENARIOS["increased_afterload"].parameters
    assert session.sliders == params
    assert not session.pinned
    assert session.state() == solver.solve_direct(
        params.contractility,
        params.preload_volume,
        params.arterial_elastance,
        params.compliance_alpha,
    )


def test_moving_contractility_uses_pinned_mode():
    session = Session().move(Control.CONTRACTILITY, 4.0)
    assert session.mode is ComputationMode.MANUAL
    assert session.pinned
    assert session.sliders.contractility == 4.0
    state = session.state()
    assert state.ESP == solver.baseline_state().ESP
    assert state == solver.solve_pinned(
        4.0, 120.0, 0.02, solver.baseline_state().ESP, solver.baseline_state().LVEDP
    )


def test_moving_afterload_switches_to_direct_mode():
    session = Session().move(Control.AFTERLOAD, 3.0)
    assert session.coupling is Coupling.DECOUPLED
    assert not session.pinned
    assert session.state() == solver.solve_direct(2.5, 120.0, 3.0, 0.02)

    # Sticky: later moves of other controls stay decoupled
    session = session.move(Control.PRELOAD, 140.0)
    assert session.coupling is Coupling.DECOUPLED
    assert session.state() == solver.solve_direct(2.5, 140.0, 3.0, 0.02)


def test_selecting_scenario_resets_coupling():
    session = Session().move(Control.AFTERLOAD, 3.0).select_scenario("normal")
    assert session.coupling is Coupling.COUPLED
    assert session.mode is ComputationMode.SCENARIO
    assert session.sliders == solver.NORMAL_PARAMETERS
    assert session.move(Control.PRELOAD, 100.0).pinned


def test_move_rejects_invalid_slider_value():
    with pytest.raises(ValueError):
        Session().move(Control.CONTRACTILITY, 0.0)


def test_step_navigation_is_clamped():
    session = Session().select_scenario("systolic_heart_failure")
    assert session.previous_step().step == 0
    session = session.next_step().next_step().next_step().next_step()
    assert session.step == len(SCENARIOS["systolic_heart_failure"]) - 1
    assert session.current_step is SCENARIOS["systolic_heart_failure"].steps[-1]
    assert session.select_scenario("normal").step == 0


def test_unknown_scenario():
    with pytest.raises(KeyError):
        Session().select_scenario("does_not_exist")
