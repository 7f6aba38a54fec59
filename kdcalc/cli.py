"""Command-line entry points for kdcalc."""

from __future__ import annotations

from pathlib import Path

import click
from loguru import logger

from kdcalc import __version__
from kdcalc.config import ConversionConfig, load_config
from kdcalc.constants import DEFAULT_TEMPERATURE, UNITS
from kdcalc.exceptions import ConfigError, InvalidTemperatureError
from kdcalc.log import LOG_LEVELS, configure_logger
from kdcalc.thermo import calc_dg, calc_k, format_kd, normalize_unit

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


class UnitType(click.ParamType):
    """Concentration unit, accepting the same spellings as the config file."""

    name = "unit"

    def get_metavar(self, param, ctx=None) -> str:
        return "[" + "|".join(UNITS) + "]"

    def convert(self, value, param, ctx):
        try:
            return normalize_unit(value)
        except ValueError as exc:
            self.fail(str(exc), param, ctx)


def _conversion_options(func):
    """Attach the options shared by ``kdcalc`` and ``dgcalc``."""
    func = click.option(
        "--log-level",
        type=click.Choice(LOG_LEVELS, case_sensitive=False),
        default="INFO",
        show_default=True,
        help="Logging level (logs go to stderr).",
    )(func)
    func = click.option(
        "--config",
        "config_path",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        default=None,
        help="YAML file with default `temperature` and `unit`.",
    )(func)
    func = click.option(
        "-u",
        "--unit",
        type=UnitType(),
        default=None,
        help="Concentration unit for Kd [default: M].",
    )(func)
    func = click.option(
        "-T",
        "--temp",
        type=float,
        default=None,
        help=f"Temperature (K) [default: {DEFAULT_TEMPERATURE}].",
    )(func)
    return func


def _resolve_config(
    config_path: Path | None, temp: float | None, unit: str | None
) -> ConversionConfig:
    """Merge the optional config file with explicit command-line values."""
    if config_path is not None:
        try:
            cfg = load_config(config_path)
        except ConfigError as exc:
            raise click.ClickException(str(exc)) from exc
        logger.debug("Loaded defaults from {}: {}", config_path, cfg)
    else:
        cfg = ConversionConfig()

    overrides = {}
    if temp is not None:
        overrides["temperature"] = temp
    if unit is not None:
        overrides["unit"] = unit
    # overrides are validated by the conversion itself
    return cfg.model_copy(update=overrides)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__, prog_name="kdcalc")
@click.argument("neg_dg", type=float, metavar="NEG_DG")
@_conversion_options
def main(
    neg_dg: float,
    temp: float | None,
    unit: str | None,
    config_path: Path | None,
    log_level: str,
) -> None:
    """
    Convert a free energy of binding into a dissociation constant.

    NEG_DG is the negative of the standard free energy of binding in
    kcal/mol; a binding energy of -10 kcal/mol is entered as ``10``.
    """
    configure_logger(log_level)
    cfg = _resolve_config(config_path, temp, unit)

    try:
        kd = calc_k(-neg_dg, cfg.temperature)
    except InvalidTemperatureError as exc:
        raise click.BadParameter(str(exc), param_hint="'--temp'") from exc
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="'NEG_DG'") from exc

    click.echo(format_kd(kd, cfg.unit))


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__, prog_name="dgcalc")
@click.argument("kd", type=float, metavar="KD")
@_conversion_options
def dg_main(
    kd: float,
    temp: float | None,
    unit: str | None,
    config_path: Path | None,
    log_level: str,
) -> None:
    """
    Convert a dissociation constant into a free energy of binding.

    KD is read in the unit given by ``--unit`` (molar by default).
    """
    configure_logger(log_level)
    cfg = _resolve_config(config_path, temp, unit)

    try:
        dg = calc_dg(kd, cfg.temperature, unit=cfg.unit)
    except InvalidTemperatureError as exc:
        raise click.BadParameter(str(exc), param_hint="'--temp'") from exc
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="'KD'") from exc

    click.echo(f"dG = {dg:.2f} kcal/mol")


if __name__ == "__main__":
    main()  # pragma: no cover
