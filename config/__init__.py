"""Configuration loading utilities."""

from pathlib import Path
from typing import Any

import yaml

CONFIG_DIR = Path(__file__).parent


def load_yaml_config(filename: str) -> dict[str, Any]:
    """Load a YAML config file from the config/ directory."""
    config_path = CONFIG_DIR / filename
    with open(config_path) as f:
        return yaml.safe_load(f)


def load_text_config(filename: str) -> str:
    """Load a plain-text resource (e.g. the chatbot knowledge base) from config/."""
    return (CONFIG_DIR / filename).read_text(encoding="utf-8")
