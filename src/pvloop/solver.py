"""Hemodynamic state of a single cardiac cycle.

Two strategies are available. :func:`solve_direct` treats the four
physiological parameters as independent and finds the end-systolic point as
the intersection of the ESPVR and the arterial elastance line. :func:`solve_pinned`
holds the end-systolic and end-diastolic pressures of a reference state fixed
and derives the volumes from the remaining controls, which keeps single
parameter changes physiologically coupled.

Neither strategy raises on odd inputs; values are clamped instead. Pass
``strict=True`` to :func:`solve` to get a :class:`DegenerateStateError` for
states with a non-positive stroke volume or an end-systolic volume below
:data:`~pvloop.curves.V0`.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, asdict
from functools import lru_cache

from . import curves

logger = logging.getLogger(__name__)

#: Smallest end-diastolic volume the pinned solver will return [mL]
MIN_VIABLE_EDV = 50.0
#: Largest compliance-adjusted end-diastolic volume [mL]
MAX_EFFECTIVE_EDV = 200.0
#: Compliance coefficients this close to the reference map preload unchanged
REFERENCE_TOLERANCE = 0.001
#: Compliance coefficients at or below this value use the linear fallback
ALPHA_FLOOR = 0.001
#: Preload gain of the linear fallback for vanishing compliance coefficients
LOW_ALPHA_GAIN = 1.3
#: Minimum gap between end-diastolic and end-systolic volume in pinned mode [mL]
MIN_STROKE_GAP = 1.0


class DegenerateStateError(ValueError):
    """Raised in strict mode when a state cannot form a proper loop"""


@dataclass(frozen=True)
class PhysiologyParameters:
    """The four controls of the model.

    Parameters
    ----------
    contractility : float
        End-systolic elastance Ees, slope of the ESPVR [mmHg/mL]
    preload_volume : float
        End-diastolic volume EDV [mL]
    arterial_elastance : float
        Effective arterial elastance Ea [mmHg/mL]
    compliance_alpha : float
        Stiffness coefficient of the EDPVR [1/mL]
    """

    contractility: float
    preload_volume: float
    arterial_elastance: float
    compliance_alpha: float

    def __post_init__(self):
        if not self.contractility > 0:
            raise ValueError(f"contractility must be positive, got {self.contractility}")
        if not self.arterial_elastance > 0:
            raise ValueError(
                f"arterial_elastance must be positive, got {self.arterial_elastance}"
            )
        if not self.preload_volume > curves.V0:
            raise ValueError(
                f"preload_volume must exceed V0={curves.V0}, got {self.preload_volume}"
            )
        if self.compliance_alpha < 0:
            raise ValueError(
                f"compliance_alpha must be non-negative, got {self.compliance_alpha}"
            )

    @classmethod
    def from_dict(cls, d: dict[str, float]) -> "PhysiologyParameters":
        """Create parameters from the short names used in parameter dictionaries"""
        return cls(
            contractility=d["Ees"],
            preload_volume=d["EDV"],
            arterial_elastance=d["Ea"],
            compliance_alpha=d["alpha"],
        )

    def as_dict(self) -> dict[str, float]:
        return {
            "Ees": self.contractility,
            "EDV": self.preload_volume,
            "Ea": self.arterial_elastance,
            "alpha": self.compliance_alpha,
        }


NORMAL_PARAMETERS = PhysiologyParameters(
    contractility=2.5,
    preload_volume=120.0,
    arterial_elastance=2.0,
    compliance_alpha=curves.REFERENCE_ALPHA,
)


@dataclass(frozen=True)
class HemodynamicState:
    """Corner values of one pressure-volume loop.

    Volumes are in mL, pressures in mmHg and the ejection fraction in percent.
    ``ESVP0`` is the diastolic pressure at the end-systolic volume, i.e. the
    floor reached at the end of isovolumetric relaxation.
    """

    EDV: float
    ESV: float
    ESP: float
    SV: float
    EF: float
    LVEDP: float
    ESVP0: float

    @property
    def is_valid(self) -> bool:
        return self.ESV >= curves.V0 and self.EDV > self.ESV

    def as_dict(self) -> dict[str, float]:
        return asdict(self)


def _state(EDV: float, ESV: float, ESP: float, alpha: float) -> HemodynamicState:
    SV = EDV - ESV
    return HemodynamicState(
        EDV=EDV,
        ESV=ESV,
        ESP=ESP,
        SV=SV,
        EF=SV / EDV * 100,
        LVEDP=float(curves.end_diastolic_pressure(EDV, alpha)),
        ESVP0=float(curves.end_diastolic_pressure(ESV, alpha)),
    )


def solve_direct(Ees: float, EDV: float, Ea: float, alpha: float) -> HemodynamicState:
    """Solve for the state with all four parameters given independently.

    The end-systolic point is where the ESPVR meets the arterial elastance
    line through ``(EDV, 0)`` with slope ``-Ea``.
    """
    ESV = (Ea * EDV + Ees * curves.V0) / (Ees + Ea)
    ESP = float(curves.end_systolic_pressure(ESV, Ees))
    return _state(EDV=EDV, ESV=ESV, ESP=ESP, alpha=alpha)


def filling_volume_cap(ref_LVEDP: float, alpha: float) -> float:
    """Largest end-diastolic volume reachable without exceeding `ref_LVEDP`"""
    if alpha <= ALPHA_FLOOR:
        return MAX_EFFECTIVE_EDV
    return float(curves.end_diastolic_volume(ref_LVEDP, alpha))


def solve_pinned(
    Ees: float, slider_EDV: float, alpha: float, ref_ESP: float, ref_LVEDP: float
) -> HemodynamicState:
    """Solve for the state with end-systolic and filling pressures held fixed.

    Parameters
    ----------
    Ees : float
        Contractility [mmHg/mL]
    slider_EDV : float
        Requested end-diastolic volume [mL]
    alpha : float
        Compliance coefficient [1/mL]
    ref_ESP : float
        End-systolic pressure to hold fixed [mmHg]
    ref_LVEDP : float
        End-diastolic pressure that limits filling [mmHg]

    Returns
    -------
    HemodynamicState
        State with ``ESP == ref_ESP`` and ``ESV <= EDV - 1``
    """
    cap = filling_volume_cap(ref_LVEDP, alpha)
    EDV = max(MIN_VIABLE_EDV, min(cap, slider_EDV))
    if EDV != slider_EDV:
        logger.debug(f"Preload {slider_EDV:.1f} mL limited to {EDV:.1f} mL (cap {cap:.1f} mL)")

    ESV = min(ref_ESP / Ees + curves.V0, EDV - MIN_STROKE_GAP)
    return _state(EDV=EDV, ESV=ESV, ESP=ref_ESP, alpha=alpha)


def effective_edv(slider_EDV: float, alpha: float) -> float:
    """Preload after adjusting for a change in compliance.

    The filling pressure the reference ventricle would need for `slider_EDV`
    is kept, and the volume it produces under `alpha` is returned.
    """
    if abs(alpha - curves.REFERENCE_ALPHA) < REFERENCE_TOLERANCE:
        return slider_EDV
    if alpha <= ALPHA_FLOOR:
        return min(slider_EDV * LOW_ALPHA_GAIN, MAX_EFFECTIVE_EDV)
    ref_LVEDP = curves.end_diastolic_pressure(slider_EDV, curves.REFERENCE_ALPHA)
    edv = float(curves.end_diastolic_volume(ref_LVEDP, alpha))
    return max(MIN_VIABLE_EDV, min(edv, MAX_EFFECTIVE_EDV))


@lru_cache
def baseline_state() -> HemodynamicState:
    """State of the normal ventricle that pinned mode and deltas refer to"""
    p = NORMAL_PARAMETERS
    return solve_direct(
        p.contractility, p.preload_volume, p.arterial_elastance, p.compliance_alpha
    )


def check_state(state: HemodynamicState) -> HemodynamicState:
    if state.ESV >= state.EDV:
        raise DegenerateStateError(
            f"End-systolic volume {state.ESV:.2f} mL is not below "
            f"end-diastolic volume {state.EDV:.2f} mL"
        )
    if state.ESV < curves.V0:
        raise DegenerateStateError(
            f"End-systolic volume {state.ESV:.2f} mL is below V0={curves.V0} mL"
        )
    return state


def solve(
    parameters: PhysiologyParameters,
    pinned: bool = False,
    reference: HemodynamicState | None = None,
    strict: bool = False,
) -> HemodynamicState:
    """Compute the hemodynamic state for a parameter set.

    Parameters
    ----------
    parameters : PhysiologyParameters
        The four controls
    pinned : bool, optional
        Use :func:`solve_pinned` with the pressures of `reference`, by default False.
        The arterial elastance is ignored in pinned mode.
    reference : HemodynamicState | None, optional
        State providing the pinned pressures, by default :func:`baseline_state`
    strict : bool, optional
        Raise :class:`DegenerateStateError` for degenerate states instead of
        returning them, by default False
    """
    p = parameters
    if pinned:
        if reference is None:
            reference = baseline_state()
        state = solve_pinned(
            p.contractility,
            p.preload_volume,
            p.compliance_alpha,
            ref_ESP=reference.ESP,
            ref_LVEDP=reference.LVEDP,
        )
    else:
        state = solve_direct(
            p.contractility, p.preload_volume, p.arterial_elastance, p.compliance_alpha
        )

    if strict:
        return check_state(state)
    if not state.is_valid:
        logger.warning(f"Degenerate state ESV={state.ESV:.2f} mL, EDV={state.EDV:.2f} mL")
    return state
