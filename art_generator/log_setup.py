# art_generator/log_setup.py

"""
Logging bootstrap for scripts and notebooks that drive the generator.
Library modules never configure logging themselves; they receive a logger.
"""
import json
import logging
import logging.config
from typing import Optional

from . import config as DEFAULTS


def setup_logging(config_path: Optional[str] = None, level: int = logging.INFO,
                  name: str = "ArtGenerator") -> logging.Logger:
    """
    Initializes the logging system and returns the named logger.

    With `config_path`, the JSON file is applied with logging.config.dictConfig.
    Otherwise a basic console configuration is used.
    """
    if config_path is not None:
        with open(config_path, 'r') as f:
            log_config = json.load(f)
        logging.config.dictConfig(log_config)
    else:
        logging.basicConfig(level=level, format=DEFAULTS.LOG_FORMAT)
    return logging.getLogger(name)
