"""Physical constants and unit tables used by the conversions."""

from __future__ import annotations

import scipy.constants

#: Molar gas constant in cal/(mol K).
R_CAL = scipy.constants.R / scipy.constants.calorie

KCAL_TO_CAL = 1000.0

#: Standard state temperature (K).
DEFAULT_TEMPERATURE = 298.15

#: Multiplier taking a concentration in the given unit to molar.
UNIT_FACTORS = {
    "M": 1.0,
    "mM": 1e-3,
    "uM": 1e-6,
    "nM": 1e-9,
    "pM": 1e-12,
}
UNITS = tuple(UNIT_FACTORS)

UNIT_ALIASES = {unit.lower(): unit for unit in UNITS}
UNIT_ALIASES.update({"µm": "uM", "μm": "uM"})
