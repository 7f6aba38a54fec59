"""Exceptions raised by kdcalc."""


class KdcalcError(Exception):
    """Base class for kdcalc errors."""


class InvalidTemperatureError(KdcalcError, ValueError):
    """Temperature is not a finite, strictly positive value in Kelvin."""


class InvalidConcentrationError(KdcalcError, ValueError):
    """Dissociation constant is not a finite, strictly positive concentration."""


class UnknownUnitError(KdcalcError, ValueError):
    """Concentration unit is not one of the supported units."""


class ConfigError(KdcalcError, ValueError):
    """Configuration file cannot be read or does not validate."""
