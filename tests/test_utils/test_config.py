"""Tests for configuration system."""

import logging
from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from chromakey.core import KeyParameters
from chromakey.utils.config import (
    ChromaKeyConfig, KeyingConfig, OutputConfig, load_config, _apply_overrides
)


def test_default_config():
    """Defaults match the picker slider positions."""
    config = ChromaKeyConfig()

    assert config.keying.tolerance == 12
    assert config.keying.softness == 2
    assert config.keying.defringe == 40
    assert config.keying.softness_slider_max == 10
    assert config.output.fourcc == "mp4v"
    assert config.output.fps == 30.0
    assert config.preview.window_name == "Chroma Keying"
    assert config.preview.cancel_key == 27


def test_config_from_dict():
    config = ChromaKeyConfig(**{
        "keying": {"tolerance": 30, "defringe": 0},
        "preview": {"enabled": False},
    })

    assert config.keying.tolerance == 30
    assert config.keying.defringe == 0
    assert config.keying.softness == 2
    assert config.preview.enabled is False


@pytest.mark.parametrize("keying", [
    {"tolerance": 101},
    {"tolerance": -1},
    {"softness": -3},
    {"defringe": 150},
])
def test_keying_ranges(keying):
    with pytest.raises(ValidationError):
        KeyingConfig(**keying)


def test_fourcc_length():
    with pytest.raises(ValidationError):
        OutputConfig(fourcc="h264x")
    assert OutputConfig(fourcc="MJPG").fourcc == "MJPG"


def test_log_level_normalized():
    config = ChromaKeyConfig(logging={"level": "debug"})
    assert config.logging.level == "DEBUG"
    with pytest.raises(ValidationError):
        ChromaKeyConfig(logging={"level": "chatty"})


def test_to_parameters():
    params = KeyingConfig(tolerance=5, softness=0, defringe=7).to_parameters()
    assert params == KeyParameters(tolerance=5, softness=0, defringe=7)


def test_load_config_from_yaml(tmp_path):
    path = tmp_path / "custom.yaml"
    path.write_text(yaml.dump({
        "keying": {"tolerance": 25},
        "output": {"fourcc": "XVID", "fps": 24},
    }))

    config = load_config(path)

    assert config.keying.tolerance == 25
    assert config.output.fourcc == "XVID"
    assert config.output.fps == 24.0


def test_load_missing_file_uses_defaults(tmp_path):
    config = load_config(tmp_path / "nope.yaml")
    assert config == ChromaKeyConfig()


def test_load_empty_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config(path) == ChromaKeyConfig()


def test_config_overrides():
    config_dict = {"keying": {"tolerance": 10}}
    overrides = {
        "keying.tolerance": 50,
        "preview.enabled": False,
    }

    result = _apply_overrides(config_dict, overrides)

    assert result["keying"]["tolerance"] == 50
    assert result["preview"]["enabled"] is False


def test_load_config_with_overrides(tmp_path):
    path = tmp_path / "base.yaml"
    path.write_text(yaml.dump({"keying": {"tolerance": 25, "softness": 4}}))

    config = load_config(path, overrides={"keying.tolerance": 60})

    assert config.keying.tolerance == 60
    assert config.keying.softness == 4


def test_default_yaml_matches_model_defaults():
    repo_root = Path(__file__).parent.parent.parent
    default_path = repo_root / "config" / "default.yaml"

    if not default_path.exists():
        pytest.skip("default.yaml not found")

    assert load_config(default_path) == ChromaKeyConfig()


def test_setup_logging_file_handler(tmp_path):
    config = ChromaKeyConfig(logging={
        "level": "WARNING",
        "log_to_file": True,
        "log_directory": str(tmp_path / "logs"),
    })

    config.setup_logging()

    assert logging.getLogger().level == logging.WARNING
    assert (tmp_path / "logs" / "chromakey.log").exists()
