from . import curves
from . import coupling
from . import display
from . import geometry
from . import log
from . import model
from . import readouts
from . import scenarios
from . import solver
from . import units
from .coupling import Control, Coupling, ComputationMode, Session, transition
from .curves import V0, A_ED, REFERENCE_ALPHA, end_diastolic_pressure, end_systolic_pressure
from .display import DisplayArea
from .geometry import CurveKind, Loop, LoopPhase, build_loop, sample_boundary_curve
from .model import PressureVolumeLoop
from .scenarios import SCENARIOS, Scenario, ScenarioStep, get_scenario
from .solver import (
    DegenerateStateError,
    HemodynamicState,
    PhysiologyParameters,
    baseline_state,
    effective_edv,
    solve,
    solve_direct,
    solve_pinned,
)

__all__ = [
    "curves",
    "coupling",
    "display",
    "geometry",
    "log",
    "model",
    "readouts",
    "scenarios",
    "solver",
    "units",
    "Control",
    "Coupling",
    "ComputationMode",
    "Session",
    "transition",
    "V0",
    "A_ED",
    "REFERENCE_ALPHA",
    "end_diastolic_pressure",
    "end_systolic_pressure",
    "DisplayArea",
    "CurveKind",
    "Loop",
    "LoopPhase",
    "build_loop",
    "sample_boundary_curve",
    "PressureVolumeLoop",
    "SCENARIOS",
    "Scenario",
    "ScenarioStep",
    "get_scenario",
    "DegenerateStateError",
    "HemodynamicState",
    "PhysiologyParameters",
    "baseline_state",
    "effective_edv",
    "solve",
    "solve_direct",
    "solve_pinned",
]
