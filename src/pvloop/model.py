from __future__ import annotations

import logging
from typing import Any

import numpy as np
import numpy.typing as npt
from rich.table import Table

from . import geometry
from . import log
from . import readouts as _readouts
from . import units
from .solver import HemodynamicState, PhysiologyParameters, solve

logger = logging.getLogger(__name__)

mL = units.mL
mmHg = units.mmHg


class PressureVolumeLoop:
    """Pressure-volume loop of the left ventricle

    Parameters
    ----------
    parameters : dict[str, Any] | None, optional
        Parameters used in the model, by default None which uses the default parameters.
        Values may be plain floats in working units (mL, mmHg) or pint quantities
        in any compatible unit.
    add_units : bool, optional
        Keep the units on :attr:`parameters`, by default False. The solver
        always works on the stripped magnitudes.
    pinned : bool, optional
        Hold end-systolic and end-diastolic pressures of `reference` fixed,
        by default False
    strict : bool, optional
        Raise :class:`~pvloop.solver.DegenerateStateError` for degenerate
        states, by default False
    reference : dict[str, Any] | None, optional
        Parameters of the reference state used for pinned solving, readout deltas
        and the reference boundary curves, by default the default parameters
    verbose : bool, optional
        Log additional information, by default False
    """

    def __init__(
        self,
        parameters: dict[str, Any] | None = None,
        add_units: bool = False,
        pinned: bool = False,
        strict: bool = False,
        reference: dict[str, Any] | None = None,
        verbose: bool = False,
    ):
        self.parameters = type(self).default_parameters()
        if parameters is not None:
            unknown = set(parameters) - set(self.parameters)
            if unknown:
                raise ValueError(f"Unknown parameters {sorted(unknown)}")
            self.parameters.update(parameters)

        self._verbose = verbose
        loglevel = logging.DEBUG if verbose else logging.INFO
        log.setup_logging(level=loglevel)

        table = log.dict_table(
            self.parameters, title=f"PV loop parameters ({type(self).__name__})"
        )
        logger.info(f"\n{log.log_table(table)}")

        self.physiology = PhysiologyParameters.from_dict(units.remove_units(self.parameters))
        if not add_units:
            self.parameters = units.remove_units(self.parameters)

        reference_parameters = type(self).default_parameters()
        if reference is not None:
            reference_parameters.update(reference)
        self.reference = PhysiologyParameters.from_dict(units.remove_units(reference_parameters))
        self.reference_state = solve(self.reference)

        self._pinned = pinned
        self._strict = strict

        self.state = solve(
            self.physiology,
            pinned=pinned,
            reference=self.reference_state,
            strict=strict,
        )
        self.loop = geometry.build_loop(
            self.state, self.physiology.contractility, self.physiology.compliance_alpha
        )

    @staticmethod
    def default_parameters() -> dict[str, Any]:
        return {
            "Ees": 2.5 * mmHg / mL,
            "EDV": 120.0 * mL,
            "Ea": 2.0 * mmHg / mL,
            "alpha": 0.02 / mL,
        }

    @property
    def pinned(self) -> bool:
        return self._pinned

    @property
    def volumes(self) -> dict[str, float]:
        return {"EDV": self.state.EDV, "ESV": self.state.ESV, "SV": self.state.SV}

    @property
    def pressures(self) -> dict[str, float]:
        return {"LVEDP": self.state.LVEDP, "ESP": self.state.ESP, "ESVP0": self.state.ESVP0}

    @property
    def history(self) -> dict[str, npt.NDArray[np.float64]]:
        """Loop samples as named arrays"""
        points = self.loop.points
        phase = np.concatenate(
            [np.full(len(v), p.value) for p, v in self.loop.phases.items()]
        )
        return {"V_LV": points[:, 0], "p_LV": points[:, 1], "phase": phase}

    def boundary_curves(self, with_reference: bool = False) -> dict[str, npt.NDArray[np.float64]]:
        return geometry.boundary_curves(
            self.physiology.contractility,
            self.physiology.compliance_alpha,
            reference=self.reference if with_reference else None,
        )

    def readouts(self, pressure_unit: str = "mmHg") -> list[_readouts.Readout]:
        return _readouts.readouts(self.state, self.reference_state, pressure_unit=pressure_unit)

    def solve_for(self, parameters: PhysiologyParameters) -> HemodynamicState:
        """Solve another parameter set with the settings of this model"""
        return solve(
            parameters,
            pinned=self._pinned,
            reference=self.reference_state,
            strict=self._strict,
        )

    def print_info(self):
        msg = []
        for attr, title in [
            (self.volumes, "Volumes"),
            (self.pressures, "Pressures"),
        ]:
            table = Table(title=title)
            row = []
            for k, v in attr.items():
                table.add_column(k)
                row.append(f"{v:.3f}")
            table.add_row(*row)
            msg.append(f"\n{log.log_table(table)}")
        msg.append(f"\n{log.log_table(_readouts.readout_table(self.readouts()))}")
        logger.info("".join(msg))
