import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "config.json"

DEFAULT_CONFIG = {
    "output_dir": ".",
    "bar_width": 50,
    "bar_char": "#",
    "save_plot": False,
    "log_level": "WARNING",
}


def load_config(path=None):
    config = dict(DEFAULT_CONFIG)
    config_path = Path(path) if path is not None else Path(DEFAULT_CONFIG_FILE)

    if not config_path.exists():
        if path is not None:
            logger.warning("Config file %s not found, using defaults", config_path)
        return config

    try:
        with open(config_path, encoding="utf-8") as f:
            user_config = json.load(f)
    except (OSError, json.JSONDecodeError):
        logger.exception("Could not read config file %s, using defaults", config_path)
        return config

    if not isinstance(user_config, dict):
        logger.error("Config file %s must hold a JSON object, using defaults", config_path)
        return config

    for key, value in user_config.items():
        if key not in DEFAULT_CONFIG:
            logger.warning("Ignoring unknown config key %r", key)
            continue
        # exact type match: bool is an int subclass and must not pass as bar_width
        expected = type(DEFAULT_CONFIG[key])
        if type(value) is not expected:
            logger.warning(
                "Ignoring config key %r: expected %s, got %r", key, expected.__name__, value
            )
            continue
        config[key] = value

    return config


def get_paths(config):
    output = Path(config["output_dir"])
    output.mkdir(parents=True, exist_ok=True)
    return {"output": output}
