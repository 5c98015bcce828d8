r"""Boundary curves of the left ventricular pressure-volume plane.

The end-systolic pressure-volume relation (ESPVR) is the line

.. math::
    P_{es}(V) = E_{es} (V - V_0)

and the end-diastolic pressure-volume relation (EDPVR) is the exponential

.. math::
    P_{ed}(V) = A_{ed} \left(e^{\alpha V} - 1\right)

Both functions accept floats or numpy arrays and are defined for any real
volume, including values outside the physiological range which are used
when drawing the curves.
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

#: Unstressed ventricular volume, x-intercept of the ESPVR [mL]
V0 = 10.0
#: Scale coefficient of the EDPVR [mmHg]
A_ED = 0.5
#: Compliance coefficient considered normal [1/mL]
REFERENCE_ALPHA = 0.02

ArrayLike = float | npt.NDArray[np.float64]


def end_systolic_pressure(volume: ArrayLike, contractility: float) -> ArrayLike:
    """Pressure on the ESPVR. Negative for volumes below :data:`V0`."""
    return contractility * (volume - V0)


def end_diastolic_pressure(volume: ArrayLike, alpha: float) -> ArrayLike:
    """Pressure on the EDPVR, zero at zero volume"""
    return A_ED * (np.exp(alpha * volume) - 1)


def end_diastolic_volume(pressure: ArrayLike, alpha: float) -> ArrayLike:
    """Inverse of :func:`end_diastolic_pressure`.

    Divides by `alpha`, so callers must guard against vanishing compliance
    coefficients.
    """
    return np.log(pressure / A_ED + 1) / alpha
