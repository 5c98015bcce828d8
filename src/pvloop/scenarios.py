"""Library of teaching scenarios.

Each scenario is a fixed record: the four physiological parameters plus an
ordered list of teaching steps. Steps may name the loop phases or boundary
curves (see :class:`~pvloop.geometry.LoopPhase` and
:class:`~pvloop.geometry.CurveKind`) a renderer should emphasise while the
step is shown.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .solver import NORMAL_PARAMETERS, PhysiologyParameters


@dataclass(frozen=True)
class ScenarioStep:
    title: str
    text: str
    highlight: tuple[str, ...] = ()


@dataclass(frozen=True)
class Scenario:
    key: str
    name: str
    description: str
    parameters: PhysiologyParameters
    steps: tuple[ScenarioStep, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.steps)

    def __getitem__(self, idx: int) -> ScenarioStep:
        return self.steps[idx]


def _params(Ees=2.5, EDV=120.0, Ea=2.0, alpha=0.02) -> PhysiologyParameters:
    return PhysiologyParameters(
        contractility=Ees, preload_volume=EDV, arterial_elastance=Ea, compliance_alpha=alpha
    )


_SCENARIOS = (
    Scenario(
        key="normal",
        name="Normal",
        description="Healthy left ventricle at rest.",
        parameters=NORMAL_PARAMETERS,
        steps=(
            ScenarioStep(
                "Filling",
                "The ventricle fills along the EDPVR from ESV to EDV as the mitral valve is open.",
                ("filling", "edpvr"),
            ),
            ScenarioStep(
                "Isovolumetric contraction",
                "Both valves are closed; pressure rises at constant volume until the aortic "
                "valve opens.",
                ("isovolumetric_contraction",),
            ),
            ScenarioStep(
                "Ejection",
                "Blood is ejected until the loop meets the ESPVR at end-systole.",
                ("ejection", "espvr"),
            ),
            ScenarioStep(
                "Isovolumetric relaxation",
                "The aortic valve closes and pressure falls at constant volume.",
                ("isovolumetric_relaxation",),
            ),
        ),
    ),
    Scenario(
        key="increased_preload",
        name="Increased preload",
        description="More venous return stretches the ventricle to a larger EDV.",
        parameters=_params(EDV=150.0),
        steps=(
            ScenarioStep(
                "Wider loop",
                "A larger EDV moves the right edge of the loop outwards along the EDPVR.",
                ("filling", "edpvr"),
            ),
            ScenarioStep(
                "Frank-Starling",
                "With contractility and afterload unchanged, stroke volume increases and "
                "end-systolic pressure rises slightly.",
                ("ejection",),
            ),
        ),
    ),
    Scenario(
        key="decreased_preload",
        name="Decreased preload",
        description="Hypovolemia or venodilation lowers end-diastolic volume.",
        parameters=_params(EDV=90.0),
        steps=(
            ScenarioStep(
                "Narrower loop",
                "A smaller EDV shifts the right edge of the loop inwards; stroke volume falls.",
                ("filling", "isovolumetric_contraction"),
            ),
        ),
    ),
    Scenario(
        key="increased_afterload",
        name="Increased afterload",
        description="Vasoconstriction raises the effective arterial elastance.",
        parameters=_params(Ea=3.2),
        steps=(
            ScenarioStep(
                "Higher end-systolic pressure",
                "A steeper Ea line meets the ESPVR at a higher pressure and a larger ESV.",
                ("ejection", "espvr"),
            ),
            ScenarioStep(
                "Smaller stroke volume",
                "The ventricle ejects less blood against the higher load.",
                ("isovolumetric_relaxation",),
            ),
        ),
    ),
    Scenario(
        key="decreased_afterload",
        name="Decreased afterload",
        description="Vasodilation lowers the effective arterial elastance.",
        parameters=_params(Ea=1.3),
        steps=(
            ScenarioStep(
                "Lower end-systolic pressure",
                "A flatter Ea line meets the ESPVR at a lower pressure; ESV falls and stroke "
                "volume rises.",
                ("ejection", "espvr"),
            ),
        ),
    ),
    Scenario(
        key="increased_contractility",
        name="Increased contractility",
        description="Sympathetic stimulation or inotropes steepen the ESPVR.",
        parameters=_params(Ees=4.0),
        steps=(
            ScenarioStep(
                "Steeper ESPVR",
                "The ESPVR rotates upwards around V0.",
                ("espvr",),
            ),
            ScenarioStep(
                "More complete ejection",
                "End-systolic volume falls, so stroke volume and ejection fraction rise.",
                ("ejection", "isovolumetric_relaxation"),
            ),
        ),
    ),
    Scenario(
        key="decreased_contractility",
        name="Decreased contractility",
        description="Loss of inotropy flattens the ESPVR.",
        parameters=_params(Ees=1.4),
        steps=(
            ScenarioStep(
                "Flatter ESPVR",
                "The ESPVR rotates downwards; the loop ends at a larger ESV and lower pressure.",
                ("espvr", "ejection"),
            ),
        ),
    ),
    Scenario(
        key="diastolic_dysfunction",
        name="Diastolic dysfunction",
        description="A stiff, poorly compliant ventricle steepens the EDPVR.",
        parameters=_params(EDV=105.0, alpha=0.03),
        steps=(
            ScenarioStep(
                "Steeper EDPVR",
                "Filling pressure rises steeply with volume, so a smaller EDV already gives "
                "a high LVEDP.",
                ("edpvr", "filling"),
            ),
            ScenarioStep(
                "Preserved ejection fraction",
                "Contractility is normal; the loop is smaller but EF is maintained.",
                ("ejection",),
            ),
        ),
    ),
    Scenario(
        key="systolic_heart_failure",
        name="Systolic heart failure",
        description="Reduced contractility with compensatory dilation.",
        parameters=_params(Ees=1.0, EDV=180.0, Ea=2.2),
        steps=(
            ScenarioStep(
                "Depressed ESPVR",
                "Low contractility leaves a large end-systolic volume.",
                ("espvr",),
            ),
            ScenarioStep(
                "Dilated ventricle",
                "The ventricle compensates with a larger EDV at the cost of a higher LVEDP.",
                ("filling", "edpvr"),
            ),
            ScenarioStep(
                "Reduced ejection fraction",
                "Stroke volume is partly maintained but ejection fraction is low.",
                ("ejection",),
            ),
        ),
    ),
)

SCENARIOS: dict[str, Scenario] = {s.key: s for s in _SCENARIOS}


def get_scenario(key: str) -> Scenario:
    try:
        return SCENARIOS[key]
    except KeyError:
        raise KeyError(f"Unknown scenario {key!r}, available: {', '.join(SCENARIOS)}") from None
