"""
Conversion defaults and helpers for loading and saving them as YAML.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Literal, Mapping, Sequence

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from kdcalc.constants import DEFAULT_TEMPERATURE
from kdcalc.exceptions import ConfigError
from kdcalc.thermo import normalize_unit

__all__ = [
    "ConversionConfig",
    "load_config",
    "dump_config",
    "expand_env_vars",
]


class ConversionConfig(BaseModel):
    """Defaults applied to a Kd / dG conversion."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    temperature: float = Field(
        DEFAULT_TEMPERATURE,
        gt=0,
        allow_inf_nan=False,
        description="Temperature in Kelvin.",
    )
    unit: Literal["M", "mM", "uM", "nM", "pM"] = Field(
        "M", description="Concentration unit used when printing or reading Kd."
    )

    @field_validator("unit", mode="before")
    @classmethod
    def _normalize_unit(cls, v):
        if isinstance(v, str):
            return normalize_unit(v)
        return v


def expand_env_vars(data: Any) -> Any:
    """
    Recursively expand ``~`` and environment variables in a YAML-derived structure.

    Parameters
    ----------
    data :
        Parsed YAML content to normalise.

    Returns
    -------
    Any
        Structure with string values expanded.
    """
    def _expand(value: Any) -> Any:
        if isinstance(value, str):
            return os.path.expandvars(os.path.expanduser(value))
        if isinstance(value, Mapping):
            return {k: _expand(v) for k, v in value.items()}
        if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
            return [_expand(v) for v in value]
        return value

    return _expand(data)


def load_config(path: Path | str) -> ConversionConfig:
    """
    Read a YAML file and return a validated :class:`ConversionConfig`.

    An empty file yields the defaults.

    Raises
    ------
    ConfigError
        If the file cannot be read or decoded as UTF-8, is not valid YAML,
        is not a mapping, or fails validation.
    """
    file_path = Path(path)
    try:
        raw = yaml.safe_load(file_path.read_text(encoding="utf-8")) or {}
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        raise ConfigError(f"Cannot read {file_path}: {exc}") from exc
    if not isinstance(raw, Mapping):
        raise ConfigError(
            f"Expected a mapping at the top level of {file_path}, got {type(raw).__name__}."
        )

    expanded: Dict[str, Any] = expand_env_vars(raw)
    try:
        return ConversionConfig.model_validate(expanded)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration in {file_path}: {exc}") from exc


def dump_config(cfg: ConversionConfig, path: Path | str) -> None:
    """Serialize a :class:`ConversionConfig` to YAML."""
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(
        yaml.safe_dump(cfg.model_dump(mode="python"), sort_keys=True)
    )
