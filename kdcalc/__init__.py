"""Convert binding free energies into dissociation constants."""

from ._version import __version__

__author__ = """kdcalc developers"""
__version__ = __version__

from .log import configure_logger
from .config import ConversionConfig, dump_config, load_config
from .thermo import calc_dg, calc_k, convert_concentration, format_kd, to_molar

configure_logger("INFO")

__all__ = [
    "__version__",
    "calc_k",
    "calc_dg",
    "convert_concentration",
    "to_molar",
    "format_kd",
    "ConversionConfig",
    "load_config",
    "dump_config",
    "configure_logger",
]
