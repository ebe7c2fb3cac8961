import json
import os
from pathlib import Path

from core.logger import setup_logger

logger = setup_logger(__name__)

# Constants
MIN_ROMAN_VALUE = 1
MAX_ROMAN_VALUE = 3999

APP_TITLE = "Roman Numeral Calculator"
APP_CONFIG_PATH = Path("calculator_config.json")
STRICT_ENV_VAR = "ROMAN_CALC_STRICT"

# Dark theme palette
DARK_BG = "#1e1e1e"
DARK_PANEL = "#2b2b2b"
DARK_FG = "#e0e0e0"
ACCENT = "#3a7bd5"
RESULT_COLOR = "#4caf50"
ERROR_COLOR = "#f44336"

DEFAULT_CONFIG = {
    "theme": "dark",
    "strict_numerals": False,
    "window_geometry": "520x420",
    "min_window_size": [450, 300],
    "chart_start": 1,
    "chart_end": 100,
}


def _matches_default_type(key: str, value) -> bool:
    """True if value has the same shape as DEFAULT_CONFIG[key]; bool never passes for int."""
    default = DEFAULT_CONFIG[key]
    if type(value) is not type(default):
        return False
    if isinstance(default, list):
        return len(value) == len(default) and all(type(v) is int for v in value)
    return True


def load_app_config(config_path: Path = None) -> dict:
    """Loads the optional JSON config and merges it over DEFAULT_CONFIG."""
    config_path = Path(config_path) if config_path else APP_CONFIG_PATH
    config = dict(DEFAULT_CONFIG)

    if not config_path.exists():
        logger.debug(f"{config_path} not found. Using default settings.")
    else:
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                user_config = json.load(f)

            if not isinstance(user_config, dict):
                logger.warning(f"{config_path} does not contain a JSON object. Using default settings.")
                user_config = {}

            # Only known keys are merged
            for key, value in user_config.items():
                if key not in DEFAULT_CONFIG:
                    logger.warning(f"Ignoring unknown config key: {key}")
                elif not _matches_default_type(key, value):
                    logger.warning(f"Ignoring config key {key}: expected {type(DEFAULT_CONFIG[key]).__name__}, got {value!r}")
                else:
                    config[key] = value
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Error loading config {config_path}: {e}")

    if os.getenv(STRICT_ENV_VAR, "0") == "1":
        config["strict_numerals"] = True

    return config
