from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from rich.table import Table

from . import units
from .solver import HemodynamicState, baseline_state

#: Deltas smaller than this are not indicated [readout units]
DELTA_THRESHOLD = 0.5
#: The displayed end-diastolic pressure is clamped to this value [mmHg]
LVEDP_DISPLAY_CAP = 50.0


class Direction(str, Enum):
    UP = "▲"
    DOWN = "▼"


@dataclass(frozen=True)
class Readout:
    label: str
    value: float
    baseline: float
    unit: str

    @property
    def delta(self) -> float:
        return self.value - self.baseline

    @property
    def direction(self) -> Direction | None:
        if abs(self.delta) < DELTA_THRESHOLD:
            return None
        return Direction.UP if self.delta > 0 else Direction.DOWN

    @property
    def formatted(self) -> str:
        if self.value >= 100:
            return str(round(self.value))
        return f"{self.value:.1f}"


def readouts(
    state: HemodynamicState,
    baseline: HemodynamicState | None = None,
    pressure_unit: str = "mmHg",
) -> list[Readout]:
    """The six scalar readouts of `state` compared against `baseline`.

    Parameters
    ----------
    state : HemodynamicState
        State to report
    baseline : HemodynamicState | None, optional
        State to compare with, by default :func:`~pvloop.solver.baseline_state`
    pressure_unit : str, optional
        Either ``"mmHg"`` or ``"kPa"``, by default ``"mmHg"``
    """
    if baseline is None:
        baseline = baseline_state()

    if pressure_unit == "mmHg":
        pressure = lambda p: p
    elif pressure_unit == "kPa":
        pressure = units.mmHg_to_kPa
    else:
        raise ValueError(f"Unknown pressure unit {pressure_unit!r}, expected 'mmHg' or 'kPa'")

    return [
        Readout("EDV", state.EDV, baseline.EDV, "mL"),
        Readout(
            "LVEDP",
            pressure(min(state.LVEDP, LVEDP_DISPLAY_CAP)),
            pressure(baseline.LVEDP),
            pressure_unit,
        ),
        Readout("ESV", state.ESV, baseline.ESV, "mL"),
        Readout("Afterload", pressure(state.ESP), pressure(baseline.ESP), pressure_unit),
        Readout("Stroke Vol", state.SV, baseline.SV, "mL"),
        Readout("Ejection Fr", state.EF, baseline.EF, "%"),
    ]


def readout_table(items: list[Readout], title: str = "Hemodynamics") -> Table:
    table = Table(title=title)
    table.add_column("Readout")
    table.add_column("Value")
    table.add_column("Unit")
    table.add_column("Δ baseline")
    for r in items:
        arrow = r.direction.value if r.direction is not None else ""
        table.add_row(r.label, r.formatted, r.unit, f"{r.delta:+.1f} {arrow}".rstrip())
    return table
