"""
Conversions between binding free energies and dissociation constants.

The dissociation constant follows from the standard binding free energy as

.. math::

    K_d = \\exp\\left(\\frac{\\Delta G \\cdot 1000}{R_{cal} T}\\right)

with :math:`\\Delta G` in kcal/mol, :math:`R_{cal}` the gas constant in
cal/(mol K) and :math:`T` in Kelvin. Concentrations are molar unless a
unit is given explicitly.
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np
from loguru import logger

from kdcalc.constants import (
    DEFAULT_TEMPERATURE,
    KCAL_TO_CAL,
    R_CAL,
    UNIT_ALIASES,
    UNIT_FACTORS,
    UNITS,
)
from kdcalc.exceptions import (
    InvalidConcentrationError,
    InvalidTemperatureError,
    UnknownUnitError,
)

__all__ = [
    "calc_k",
    "calc_dg",
    "normalize_unit",
    "convert_concentration",
    "to_molar",
    "format_kd",
]


def _check_temperature(temp: Any) -> float:
    try:
        value = float(temp)
    except (TypeError, ValueError) as exc:
        raise InvalidTemperatureError(
            f"Temperature must be a scalar in Kelvin, got {temp!r}."
        ) from exc
    if not math.isfinite(value) or value <= 0:
        raise InvalidTemperatureError(
            f"Temperature must be finite and > 0 K, got {temp!r}."
        )
    return value


def _as_float_array(value: Any, what: str) -> np.ndarray:
    try:
        return np.asarray(value, dtype=float)
    except OverflowError as exc:
        raise ValueError(f"{what} is too large to represent as a float: {value!r}.") from exc


def _unwrap(values: np.ndarray):
    # 0-d results go back to plain floats
    if values.ndim == 0:
        return float(values)
    return values


def calc_k(dg, temp: float = DEFAULT_TEMPERATURE):
    """
    Convert a binding free energy into a dissociation constant.

    Parameters
    ----------
    dg : float or array_like
        Standard free energy of binding (kcal/mol). Arrays are converted
        element-wise.
    temp : float, optional
        Temperature in Kelvin (default 298.15). Must be finite and > 0.

    Returns
    -------
    float or numpy.ndarray
        Dissociation constant in M. A ``float`` for scalar input, an array
        of the same shape otherwise. Values that overflow are returned as
        ``inf``.

    Raises
    ------
    InvalidTemperatureError
        If ``temp`` is not a finite positive scalar.
    ValueError
        If ``dg`` contains NaN or infinite values, or numbers too large to
        represent as a float.
    """
    temperature = _check_temperature(temp)
    values = _as_float_array(dg, "Free energy")
    if not np.all(np.isfinite(values)):
        raise ValueError(f"Free energy must be finite, got {dg!r}.")

    exponent = values * KCAL_TO_CAL / (R_CAL * temperature)
    with np.errstate(over="ignore"):
        kd = np.exp(exponent)

    if np.any(np.isinf(kd)):
        logger.warning(
            "Kd overflowed to infinity for dG = {} kcal/mol at T = {} K.",
            dg,
            temperature,
        )
    logger.debug("dG = {} kcal/mol, T = {} K -> Kd = {} M", dg, temperature, kd)
    return _unwrap(kd)


def calc_dg(kd, temp: float = DEFAULT_TEMPERATURE, unit: str = "M"):
    """
    Convert a dissociation constant back into a binding free energy.

    Inverse of :func:`calc_k`.

    Parameters
    ----------
    kd : float or array_like
        Dissociation constant, strictly positive.
    temp : float, optional
        Temperature in Kelvin (default 298.15).
    unit : str, optional
        Concentration unit of ``kd`` (default ``"M"``).

    Returns
    -------
    float or numpy.ndarray
        Free energy of binding in kcal/mol.

    Raises
    ------
    InvalidTemperatureError
        If ``temp`` is not a finite positive scalar.
    InvalidConcentrationError
        If any ``kd`` is not finite or not > 0.
    UnknownUnitError
        If ``unit`` is not supported.
    ValueError
        If ``kd`` is too large to represent as a float.
    """
    temperature = _check_temperature(temp)
    molar = _as_float_array(to_molar(kd, unit), "Kd")
    if not np.all(np.isfinite(molar)) or np.any(molar <= 0):
        raise InvalidConcentrationError(
            f"Kd must be finite and > 0, got {kd!r} {normalize_unit(unit)}."
        )

    dg = R_CAL * temperature * np.log(molar) / KCAL_TO_CAL
    logger.debug("Kd = {} M, T = {} K -> dG = {} kcal/mol", molar, temperature, dg)
    return _unwrap(dg)


def normalize_unit(unit: str) -> str:
    """Return the canonical spelling of a concentration unit (``"um"`` -> ``"uM"``)."""
    try:
        return UNIT_ALIASES[str(unit).strip().lower()]
    except KeyError:
        raise UnknownUnitError(
            f"Unknown concentration unit {unit!r}; expected one of {', '.join(UNITS)}."
        ) from None


def convert_concentration(kd, unit: str = "M"):
    """Express a molar concentration in ``unit``."""
    factor = UNIT_FACTORS[normalize_unit(unit)]
    return _unwrap(_as_float_array(kd, "Concentration") / factor)


def to_molar(value, unit: str = "M"):
    """Express a concentration given in ``unit`` in M."""
    factor = UNIT_FACTORS[normalize_unit(unit)]
    return _unwrap(_as_float_array(value, "Concentration") * factor)


def format_kd(kd: float, unit: str = "M") -> str:
    """
    Render a molar Kd as ``"Kd = <value> <unit>"``.

    The value is written in scientific notation with two decimals, e.g.
    ``format_kd(4.677e-8)`` gives ``"Kd = 4.68e-08 M"``.
    """
    canonical = normalize_unit(unit)
    return f"Kd = {convert_concentration(kd, canonical):.2e} {canonical}"
