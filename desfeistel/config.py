"""
Configuration

Default cipher parameters and the environment-driven settings used by
the command line front end.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .tables.des_tables import BLOCK_SIZE, KEY_SIZE, NUM_ROUNDS

# Default parameters for the cipher
DES_DEFAULT_PARAMS = {
    'block_size': BLOCK_SIZE,   # bytes
    'key_size': KEY_SIZE,       # bytes, longer keys are truncated
    'num_rounds': NUM_ROUNDS,
    'padding': 'pkcs7',
}

KEY_ENV_VAR = 'DESFEISTEL_KEY'
LOG_LEVEL_ENV_VAR = 'DESFEISTEL_LOG_LEVEL'
DEFAULT_LOG_LEVEL = 'INFO'

_LOG_LEVELS = ('CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG')


@dataclass
class CipherConfig:
    """Settings resolved from the environment."""
    key: Optional[str]
    log_level: str = DEFAULT_LOG_LEVEL


def validate_log_level(level: str) -> str:
    """
    Normalize a logging level name.

    Raises:
        ValueError: If the name is not a standard logging level
    """
    name = level.strip().upper()
    if name not in _LOG_LEVELS:
        raise ValueError(f"Unknown log level '{level}', expected one of {', '.join(_LOG_LEVELS)}")
    return name


def load_config(environ: Optional[Mapping[str, str]] = None) -> CipherConfig:
    """
    Read the configuration from environment variables.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        The resolved configuration
    """
    if environ is None:
        environ = os.environ

    key = environ.get(KEY_ENV_VAR) or None
    log_level = validate_log_level(environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL))
    return CipherConfig(key=key, log_level=log_level)


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Configure root logging for command line use."""
    logging.basicConfig(
        level=getattr(logging, validate_log_level(level)),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
