"""Pressure-volume loop and boundary curve geometry.

The loop is built from four phases, each sampled on its own and
concatenated in the order of the cardiac cycle. The boundary curves are
sampled as open polylines over the display range.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

import numpy as np
import numpy.typing as npt

from . import curves
from .solver import HemodynamicState, PhysiologyParameters

logger = logging.getLogger(__name__)

FILLING_SAMPLES = 21
CONTRACTION_SAMPLES = 13
EJECTION_SAMPLES = 21
RELAXATION_SAMPLES = 13

#: Upper bound of the drawn diastolic pressure [mmHg]
FILLING_PRESSURE_CAP = 60.0
#: Height of the ejection bulge above the end-systolic pressure [mmHg]
EJECTION_BOW = 8.0
#: Ejection pressure may exceed the ESPVR by at most this much [mmHg]
ESPVR_MARGIN = 5.0
#: Ejection pressure may drop at most this far below ESP [mmHg]
EJECTION_FLOOR_DROP = 15.0
#: Upper bound of the pressure reached at the end of relaxation [mmHg]
RELAXATION_FLOOR_CAP = 30.0

#: Volume ceiling of the boundary curves [mL]
VMAX = 220.0
#: Pressure ceiling of the boundary curves [mmHg]
PMAX = 240.0
#: Volume step used when sampling boundary curves [mL]
CURVE_STEP = 2.0
#: The EDPVR is only drawn over its low pressure operating range [mmHg]
EDPVR_PRESSURE_CAP = 65.0


class LoopPhase(str, Enum):
    FILLING = "filling"
    ISOVOLUMETRIC_CONTRACTION = "isovolumetric_contraction"
    EJECTION = "ejection"
    ISOVOLUMETRIC_RELAXATION = "isovolumetric_relaxation"


class CurveKind(str, Enum):
    ESPVR = "espvr"
    EDPVR = "edpvr"


@dataclass(frozen=True)
class Loop:
    """Closed pressure-volume path.

    Each phase is an ``(n, 2)`` array of (volume, pressure) samples. The
    last sample of a phase is followed by the first sample of the next one,
    and the relaxation phase closes back onto the filling phase.
    """

    state: HemodynamicState
    phases: dict[LoopPhase, npt.NDArray[np.float64]]

    def phase(self, name: LoopPhase | str) -> npt.NDArray[np.float64]:
        return self.phases[LoopPhase(name)]

    @property
    def points(self) -> npt.NDArray[np.float64]:
        return np.concatenate([self.phases[p] for p in LoopPhase])

    @property
    def volumes(self) -> npt.NDArray[np.float64]:
        return self.points[:, 0]

    @property
    def pressures(self) -> npt.NDArray[np.float64]:
        return self.points[:, 1]

    @property
    def ejection_is_inverted(self) -> bool:
        """Whether the ejection arc sags below the end-systolic pressure.

        In pinned mode a weak ventricle can end ejection on a pressure its
        ESPVR does not reach, so the ESPVR clamp pulls the arc below the
        straight line instead of bulging above it.
        """
        return bool(np.any(self.phase(LoopPhase.EJECTION)[:, 1] < self.state.ESP - 1e-9))


def _segment(v: npt.NDArray[np.float64], p: npt.NDArray[np.float64]):
    return np.column_stack([v, p])


def filling_phase(state: HemodynamicState, alpha: float):
    v = np.linspace(state.ESV, state.EDV, FILLING_SAMPLES)
    p = np.minimum(curves.end_diastolic_pressure(v, alpha), FILLING_PRESSURE_CAP)
    return _segment(v, p)


def contraction_phase(state: HemodynamicState):
    v = np.full(CONTRACTION_SAMPLES, state.EDV)
    p = np.linspace(min(state.LVEDP, FILLING_PRESSURE_CAP), state.ESP, CONTRACTION_SAMPLES)
    return _segment(v, p)


def ejection_phase(state: HemodynamicState, contractility: float):
    t = np.linspace(0.0, 1.0, EJECTION_SAMPLES)
    v = state.EDV - (state.EDV - state.ESV) * t
    p = state.ESP + EJECTION_BOW * np.sin(np.pi * t)
    p = np.minimum(p, curves.end_systolic_pressure(v, contractility) + ESPVR_MARGIN)
    p = np.maximum(p, state.ESP - EJECTION_FLOOR_DROP)
    return _segment(v, p)


def relaxation_phase(state: HemodynamicState):
    v = np.full(RELAXATION_SAMPLES, state.ESV)
    p = np.linspace(state.ESP, min(state.ESVP0, RELAXATION_FLOOR_CAP), RELAXATION_SAMPLES)
    return _segment(v, p)


def build_loop(state: HemodynamicState, contractility: float, alpha: float) -> Loop:
    """Build the four phase loop for `state`.

    Parameters
    ----------
    state : HemodynamicState
        Corner values of the loop
    contractility : float
        Slope of the ESPVR bounding the ejection arc [mmHg/mL]
    alpha : float
        Compliance coefficient of the EDPVR followed during filling [1/mL]

    Returns
    -------
    Loop
        The closed path, phases in cycle order
    """
    loop = Loop(
        state=state,
        phases={
            LoopPhase.FILLING: filling_phase(state, alpha),
            LoopPhase.ISOVOLUMETRIC_CONTRACTION: contraction_phase(state),
            LoopPhase.EJECTION: ejection_phase(state, contractility),
            LoopPhase.ISOVOLUMETRIC_RELAXATION: relaxation_phase(state),
        }
    )
    if loop.ejection_is_inverted:
        logger.warning(
            f"Ejection arc drops below ESP={state.ESP:.1f} mmHg for Ees={contractility}"
        )
    return loop


def sample_boundary_curve(kind: CurveKind | str, parameter: float) -> npt.NDArray[np.float64]:
    """Sample a boundary curve as an open polyline.

    Parameters
    ----------
    kind : CurveKind | str
        Which curve to sample
    parameter : float
        Contractility for the ESPVR, compliance coefficient for the EDPVR

    Returns
    -------
    np.ndarray
        ``(n, 2)`` array of (volume, pressure). Sampling stops before the first
        pressure above :data:`PMAX` (or :data:`EDPVR_PRESSURE_CAP` for the EDPVR).
    """
    kind = CurveKind(kind)
    if kind is CurveKind.ESPVR:
        start, ceiling = curves.V0, PMAX
        func = lambda v: curves.end_systolic_pressure(v, parameter)
    else:
        start, ceiling = 0.0, min(PMAX, EDPVR_PRESSURE_CAP)
        func = lambda v: curves.end_diastolic_pressure(v, parameter)

    v = np.arange(start, VMAX + CURVE_STEP / 2, CURVE_STEP)
    p = func(v)
    above = np.flatnonzero(p > ceiling)
    n = above[0] if above.size > 0 else len(v)
    return _segment(v[:n], p[:n])


def boundary_curves(
    contractility: float,
    alpha: float,
    reference: PhysiologyParameters | None = None,
) -> dict[str, npt.NDArray[np.float64]]:
    """Polylines for the current curves and, optionally, a reference pair"""
    result = {
        "espvr": sample_boundary_curve(CurveKind.ESPVR, contractility),
        "edpvr": sample_boundary_curve(CurveKind.EDPVR, alpha),
    }
    if reference is not None:
        result["reference_espvr"] = sample_boundary_curve(
            CurveKind.ESPVR, reference.contractility
        )
        result["reference_edpvr"] = sample_boundary_curve(
            CurveKind.EDPVR, reference.compliance_alpha
        )
    return result
