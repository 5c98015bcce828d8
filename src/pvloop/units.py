from __future__ import annotations
from typing import Any

import pint

ureg = pint.UnitRegistry()

mL = ureg("mL")
mmHg = ureg("mmHg")
elastance = mmHg / mL

# Units the solver works in when it receives plain floats
WORKING_UNITS = {
    "Ees": "mmHg / mL",
    "EDV": "mL",
    "Ea": "mmHg / mL",
    "alpha": "1 / mL",
}


def mmHg_to_kPa(p):
    return p * 133.322 / 1000.0


def kPa_to_mmHg(p):
    return p * 1000.0 / 133.322


def to_working_unit(name: str, value: Any) -> float:
    """Return the magnitude of `value` in the working unit of parameter `name`.

    Plain numbers are assumed to already be in working units.
    """
    if not isinstance(value, pint.Quantity):
        return float(value)
    try:
        unit = WORKING_UNITS[name]
    except KeyError as e:
        raise ValueError(
            f"Unknown parameter {name!r}, expected one of {list(WORKING_UNITS)}"
        ) from e
    try:
        return float(value.to(unit).magnitude)
    except pint.DimensionalityError as e:
        raise ValueError(f"Cannot express {name}={value} in {unit}") from e


def remove_units(parameters: dict[str, Any]) -> dict[str, Any]:
    return {k: to_working_unit(k, v) for k, v in parameters.items()}
