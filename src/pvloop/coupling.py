"""Interactive exploration of the model.

A :class:`Session` holds what a front end needs between two user
interactions: the selected scenario, the teaching step, the slider values
and whether the sliders are solved coupled (pinned) or decoupled (direct).
Sessions are immutable; every interaction returns a new one.

Moving the arterial elastance control decouples the session for good,
since a floating afterload cannot be expressed with pinned pressures. Only
selecting a scenario couples it again.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from enum import Enum

from .scenarios import Scenario, ScenarioStep, get_scenario
from .solver import HemodynamicState, PhysiologyParameters, solve

logger = logging.getLogger(__name__)


class Control(str, Enum):
    CONTRACTILITY = "contractility"
    PRELOAD = "preload_volume"
    AFTERLOAD = "arterial_elastance"
    COMPLIANCE = "compliance_alpha"


class Coupling(str, Enum):
    COUPLED = "coupled"
    DECOUPLED = "decoupled"


class ComputationMode(str, Enum):
    SCENARIO = "scenario"
    MANUAL = "manual"


def transition(coupling: Coupling, control: Control) -> Coupling:
    """Coupling after `control` has been moved"""
    if Control(control) is Control.AFTERLOAD:
        return Coupling.DECOUPLED
    return coupling


@dataclass(frozen=True)
class Session:
    scenario_key: str = "normal"
    step: int = 0
    sliders: PhysiologyParameters | None = None
    mode: ComputationMode = ComputationMode.SCENARIO
    coupling: Coupling = Coupling.COUPLED

    def __post_init__(self):
        if self.sliders is None:
            object.__setattr__(self, "sliders", self.scenario.parameters)

    @property
    def scenario(self) -> Scenario:
        return get_scenario(self.scenario_key)

    @property
    def current_step(self) -> ScenarioStep | None:
        steps = self.scenario.steps
        if not steps:
            return None
        return steps[self.step]

    def select_scenario(self, key: str) -> "Session":
        scenario = get_scenario(key)
        logger.debug(f"Selected scenario {key!r}")
        return Session(scenario_key=scenario.key, sliders=scenario.parameters)

    def move(self, control: Control | str, value: float) -> "Session":
        """Set one slider and switch to manual mode"""
        control = Control(control)
        coupling = transition(self.coupling, control)
        if coupling is not self.coupling:
            logger.info("Arterial elastance moved, switching to direct solving")
        sliders = dataclasses.replace(self.sliders, **{control.value: value})
        return dataclasses.replace(
            self, sliders=sliders, mode=ComputationMode.MANUAL, coupling=coupling
        )

    def next_step(self) -> "Session":
        last = max(len(self.scenario) - 1, 0)
        return dataclasses.replace(self, step=min(self.step + 1, last))

    def previous_step(self) -> "Session":
        return dataclasses.replace(self, step=max(self.step - 1, 0))

    @property
    def pinned(self) -> bool:
        return self.mode is ComputationMode.MANUAL and self.coupling is Coupling.COUPLED

    @property
    def parameters(self) -> PhysiologyParameters:
        if self.mode is ComputationMode.SCENARIO:
            return self.scenario.parameters
        return self.sliders

    def state(self, strict: bool = False) -> HemodynamicState:
        return solve(self.parameters, pinned=self.pinned, strict=strict)
