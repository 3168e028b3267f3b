"""
Configuration for the classifier and its hosts.
"""

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class ClassifierConfig:
    """Settings for building a classifier and serving it."""

    command_prefixes: str = ":"  # each character is one prefix
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"


def load_config() -> ClassifierConfig:
    """
    Build a ClassifierConfig from PROMPTER_* environment variables.

    Missing or invalid values fall back to the defaults.
    """
    defaults = ClassifierConfig()

    prefixes = os.getenv("PROMPTER_COMMAND_PREFIXES", "").strip()
    if not prefixes:
        prefixes = defaults.command_prefixes

    port = defaults.port
    raw_port = os.getenv("PROMPTER_PORT")
    if raw_port:
        try:
            port = int(raw_port)
        except ValueError:
            logger.warning(f"Invalid PROMPTER_PORT '{raw_port}', using {defaults.port}")

    log_level = os.getenv("PROMPTER_LOG_LEVEL", defaults.log_level).upper()
    if log_level not in logging.getLevelNamesMapping():
        logger.warning(f"Unknown PROMPTER_LOG_LEVEL '{log_level}', using {defaults.log_level}")
        log_level = defaults.log_level

    return ClassifierConfig(
        command_prefixes=prefixes,
        host=os.getenv("PROMPTER_HOST", defaults.host),
        port=port,
        log_level=log_level,
    )
