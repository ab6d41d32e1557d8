"""YAML configuration loader with validation."""
import codecs
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Any

import yaml

from lexorder.core.errors import ConfigError

OUTPUT_FORMATS = ("list", "plain", "json")


@dataclass
class Config:
    """lexorder configuration."""
    verbosity: int = 0
    json_logs: bool = False
    encoding: str = "utf-8"
    output_format: str = "list"

    def validate(self) -> None:
        if self.output_format not in OUTPUT_FORMATS:
            raise ConfigError(
                f"Unknown output_format {self.output_format!r}, expected one of {', '.join(OUTPUT_FORMATS)}"
            )
        if not isinstance(self.verbosity, int) or self.verbosity < 0:
            raise ConfigError(f"verbosity must be a non-negative integer, got {self.verbosity!r}")
        if not isinstance(self.json_logs, bool):
            raise ConfigError(f"json_logs must be true or false, got {self.json_logs!r}")
        if not isinstance(self.encoding, str):
            raise ConfigError(f"encoding must be a string, got {self.encoding!r}")
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise ConfigError(f"Unknown encoding {self.encoding!r}") from None


def load_config(path: Optional[str] = None) -> Config:
    """Load config from YAML file or return defaults.

    Args:
        path: Path to YAML config file. If None, returns default config.

    Returns:
        Config instance

    Raises:
        FileNotFoundError: If specified path doesn't exist
        yaml.YAMLError: If YAML is invalid
        ConfigError: If the document is not a mapping or holds bad values
    """
    if path is None:
        return Config()

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    return _parse_config(data)


def _parse_config(data: Dict[str, Any]) -> Config:
    """Parse config dict into Config dataclass."""
    config = Config(
        verbosity=data.get("verbosity", 0),
        json_logs=data.get("json_logs", False),
        encoding=data.get("encoding", "utf-8"),
        output_format=data.get("output_format", "list"),
    )
    config.validate()
    return config
