"""Configuration management for chromakey."""

import logging
from pathlib import Path
from typing import Optional, Dict, Any

import yaml
from pydantic import BaseModel, Field, field_validator

from chromakey.core import KeyParameters


logger = logging.getLogger(__name__)


class KeyingConfig(BaseModel):
    """Default keying parameters offered to the picker."""
    tolerance: int = Field(default=12, ge=0, le=100)
    softness: int = Field(default=2, ge=0)
    defringe: int = Field(default=40, ge=0, le=100)
    softness_slider_max: int = Field(default=10, ge=1)  # Softness trackbar range

    def to_parameters(self) -> KeyParameters:
        return KeyParameters(
            tolerance=self.tolerance,
            softness=self.softness,
            defringe=self.defringe,
        )


class OutputConfig(BaseModel):
    """Configuration for video output."""
    fourcc: str = "mp4v"
    fps: float = Field(default=30.0, gt=0)

    @field_validator("fourcc")
    @classmethod
    def validate_fourcc(cls, v: str) -> str:
        if len(v) != 4:
            raise ValueError(f"fourcc must be exactly 4 characters, got {v!r}")
        return v


class PreviewConfig(BaseModel):
    """Configuration for the preview window."""
    enabled: bool = True
    window_name: str = "Chroma Keying"
    frame_delay_ms: int = Field(default=10, ge=0)  # keystroke wait per video frame
    cancel_key: int = 27  # Escape


class LoggingConfig(BaseModel):
    """Configuration for logging."""
    level: str = "INFO"
    log_to_file: bool = False
    log_directory: str = "logs"
    max_log_size_mb: int = 10
    backup_count: int = 3

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(getattr(logging, level, None), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


class ChromaKeyConfig(BaseModel):
    """Root configuration for chromakey."""
    keying: KeyingConfig = Field(default_factory=KeyingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    preview: PreviewConfig = Field(default_factory=PreviewConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def setup_logging(self) -> None:
        """Configure logging based on config."""
        log_level = getattr(logging, self.logging.level)

        handlers = []
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

        # Console handler
        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

        # File handler
        if self.logging.log_to_file:
            log_dir = Path(self.logging.log_directory)
            log_dir.mkdir(exist_ok=True, parents=True)

            from logging.handlers import RotatingFileHandler
            file_handler = RotatingFileHandler(
                log_dir / "chromakey.log",
                maxBytes=self.logging.max_log_size_mb * 1024 * 1024,
                backupCount=self.logging.backup_count
            )
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            handlers.append(file_handler)

        logging.basicConfig(
            level=log_level,
            handlers=handlers,
            force=True
        )

        logger.debug(f"Logging configured: level={self.logging.level}")


def load_config(
    config_path: Optional[str | Path] = None,
    overrides: Optional[Dict[str, Any]] = None
) -> ChromaKeyConfig:
    """Load configuration from YAML file with optional overrides.

    Args:
        config_path: Path to YAML config file. If None, uses default.yaml
        overrides: Dictionary of config overrides (nested keys with dots)

    Returns:
        Validated ChromaKeyConfig instance

    Example:
        >>> config = load_config("config/default.yaml")
        >>> config = load_config(overrides={"keying.tolerance": 30})
    """
    if config_path is None:
        # Look for default.yaml in the config/ directory at the repo root
        repo_root = Path(__file__).parent.parent.parent.parent
        config_path = repo_root / "config" / "default.yaml"
    else:
        config_path = Path(config_path)

    config_dict = {}
    if config_path.exists():
        logger.info(f"Loading config from {config_path}")
        with open(config_path) as f:
            config_dict = yaml.safe_load(f) or {}
    else:
        logger.warning(f"Config file not found: {config_path}, using defaults")

    if overrides:
        config_dict = _apply_overrides(config_dict, overrides)

    return ChromaKeyConfig(**config_dict)


def _apply_overrides(
    config_dict: Dict[str, Any],
    overrides: Dict[str, Any]
) -> Dict[str, Any]:
    """Apply nested overrides to config dictionary.

    Example:
        overrides = {"keying.tolerance": 30}
        -> config_dict["keying"]["tolerance"] = 30
    """
    for key, value in overrides.items():
        keys = key.split(".")
        d = config_dict
        for k in keys[:-1]:
            d = d.setdefault(k, {})
        d[keys[-1]] = value
    return config_dict
