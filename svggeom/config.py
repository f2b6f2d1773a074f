"""
Default settings for reading SVG shapes and for the command-line filter.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    # Points generated per curve or arc segment (endpoint included)
    "curve_samples": 100,

    # Clockwise exterior rings, counter-clockwise holes
    "normalize_orientation": True,

    # Used by the svg2geo command only
    "log_level": "INFO",
}


def resolve_config(config: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """
    Overlay `config` on DEFAULT_CONFIG.

    Args:
        config: Partial settings, or None for the defaults

    Returns:
        A new dictionary holding every setting
    """
    settings = dict(DEFAULT_CONFIG)
    if not config:
        return settings

    unknown = sorted(set(config) - set(DEFAULT_CONFIG))
    if unknown:
        raise KeyError(f"Unknown configuration keys: {', '.join(unknown)}")
    settings.update(config)

    if int(settings["curve_samples"]) < 1:
        raise ValueError(f"curve_samples must be positive, got {settings['curve_samples']!r}")
    settings["curve_samples"] = int(settings["curve_samples"])
    settings["normalize_orientation"] = bool(settings["normalize_orientation"])
    return settings


def load_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load configuration from a JSON file and merge it over the defaults.

    Args:
        config_path: Path to the configuration file

    Returns:
        Dictionary containing configuration
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config = json.load(f)
    except Exception as e:
        logger.error(f"Error loading configuration from {config_path}: {e}")
        raise

    if not isinstance(config, dict):
        raise ValueError(f"Configuration root must be a JSON object: {config_path}")
    return resolve_config(config)
