import pytest
from pvloop import units


def test_pressure_conversion():
    assert units.mmHg_to_kPa(750.062) == pytest.approx(100.0, rel=1e-5)
    assert units.kPa_to_mmHg(units.mmHg_to_kPa(120.0)) == pytest.approx(120.0)


def test_to_working_unit():
    assert units.to_working_unit("EDV", 120.0) == 120.0
    assert units.to_working_unit("EDV", 0.12 * units.ureg("L")) == pytest.approx(120.0)
    assert units.to_working_unit("Ees", 2.5 * units.elastance) == pytest.approx(2.5)
    assert units.to_working_unit("alpha", 20.0 / units.ureg("L")) == pytest.approx(0.02)


def test_to_working_unit_errors():
    with pytest.raises(ValueError):
        units.to_working_unit("EDV", 1.0 * units.mmHg)
    with pytest.raises(ValueError):
        units.to_working_unit("HR", 1.0 * units.mmHg)


def test_remove_units():
    d = units.remove_units({"EDV": 120 * units.mL, "Ea": 2.0})
    assert d == {"EDV": pytest.approx(120.0), "Ea": 2.0}
