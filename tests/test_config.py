from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from kdcalc.config import ConversionConfig, dump_config, expand_env_vars, load_config
from kdcalc.exceptions import ConfigError


def test_config_defaults():
    cfg = ConversionConfig()
    assert cfg.temperature == 298.15
    assert cfg.unit == "M"


def test_config_normalizes_unit():
    assert ConversionConfig(unit="um").unit == "uM"
    assert ConversionConfig(unit="µM").unit == "uM"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"temperature": 0},
        {"temperature": -10.0},
        {"temperature": float("inf")},
        {"unit": "kg"},
        {"pressure": 1.0},
    ],
)
def test_config_rejects_invalid_values(kwargs):
    with pytest.raises(ValidationError):
        ConversionConfig(**kwargs)


def test_config_is_frozen():
    cfg = ConversionConfig()
    with pytest.raises(ValidationError):
        cfg.temperature = 310.0


def test_load_config(tmp_path: Path):
    path = tmp_path / "kdcalc.yaml"
    path.write_text("temperature: 310.0\nunit: nm\n")
    cfg = load_config(path)
    assert cfg.temperature == 310.0
    assert cfg.unit == "nM"


def test_load_config_empty_file_gives_defaults(tmp_path: Path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config(path) == ConversionConfig()


def test_load_config_expands_env_vars(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("KDCALC_TEST_TEMP", "305")
    monkeypatch.setenv("KDCALC_TEST_UNIT", "pM")
    path = tmp_path / "env.yaml"
    path.write_text("temperature: ${KDCALC_TEST_TEMP}\nunit: $KDCALC_TEST_UNIT\n")
    cfg = load_config(path)
    assert cfg.temperature == 305.0
    assert cfg.unit == "pM"


@pytest.mark.parametrize(
    "text",
    [
        "temperature: -1\n",
        "unit: furlongs\n",
        "temp: 300\n",
        "- 300\n- nM\n",
        "temperature: [310\n",
    ],
)
def test_load_config_errors(tmp_path: Path, text: str):
    path = tmp_path / "bad.yaml"
    path.write_text(text)
    with pytest.raises(ConfigError):
        load_config(path)


def test_dump_config_round_trip(tmp_path: Path):
    cfg = ConversionConfig(temperature=310.0, unit="uM")
    path = tmp_path / "nested" / "out.yaml"
    dump_config(cfg, path)
    assert path.exists()
    assert "temperature: 310.0" in path.read_text()
    assert load_config(path) == cfg


def test_expand_env_vars_nested(monkeypatch):
    monkeypatch.setenv("KDCALC_X", "abc")
    data = {"a": "$KDCALC_X", "b": ["${KDCALC_X}", 1], "c": 2.5}
    assert expand_env_vars(data) == {"a": "abc", "b": ["abc", 1], "c": 2.5}


def test_load_config_rejects_undecodable_bytes(tmp_path: Path):
    path = tmp_path / "binary.yaml"
    path.write_bytes(b"temperature: 310\nunit: \xff\xfe\n")
    with pytest.raises(ConfigError, match="Cannot read"):
        load_config(path)


def test_load_config_wraps_os_errors(tmp_path: Path):
    # a directory cannot be read as a file
    with pytest.raises(ConfigError):
        load_config(tmp_path)
