import pytest
from pvloop import geometry, solver
from pvloop.scenarios import SCENARIOS, get_scenario

HIGHLIGHTS = {p.value for p in geometry.LoopPhase} | {c.value for c in geometry.CurveKind}


def test_normal_scenario_is_baseline():
    assert get_scenario("normal").parameters == solver.NORMAL_PARAMETERS


@pytest.mark.parametrize("key", list(SCENARIOS))
def test_scenarios_are_consistent(key):
    scenario = SCENARIOS[key]
    assert scenario.key == key
    assert len(scenario) > 0
    for step in scenario.steps:
        assert set(step.highlight) <= HIGHLIGHTS
    state = solver.solve(scenario.parameters, strict=True)
    assert 0 < state.EF <= 100


def test_scenarios_move_readouts_in_expected_direction():
    baseline = solver.baseline_state()

    def state(key):
        return solver.solve(get_scenario(key).parameters)

    assert state("increased_preload").SV > baseline.SV
    assert state("decreased_preload").SV < baseline.SV
    assert state("increased_afterload").ESP > baseline.ESP
    assert state("decreased_afterload").ESV < baseline.ESV
    assert state("increased_contractility").EF > baseline.EF
    assert state("decreased_contractility").EF < baseline.EF
    assert state("diastolic_dysfunction").LVEDP > baseline.LVEDP
    assert state("systolic_heart_failure").EF < 35


def test_get_scenario_unknown_key_lists_available():
    with pytest.raises(KeyError, match="normal"):
        get_scenario("cardiac_tamponade")
