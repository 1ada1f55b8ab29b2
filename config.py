# config.py

"""Runtime configuration with environment overrides."""

import logging
import os
import secrets
from typing import Dict


class Config:
    """Global configuration.

    Attributes
    ----------
    SPEED_PRESETS:
        Seconds between auto-advanced steps for each named speed.
    default_speed:
        Preset a fresh driver starts with.
    array_size:
        Length of the random array a new sorting session starts with.
    hash_table_size:
        Bucket count of a new hash table.
    log_level:
        Name of the root logging level (``"INFO"``, ``"DEBUG"``, …).
    secret_key:
        Flask session signing key.  Random per process unless set.
    max_sessions:
        Drivers the Flask host keeps in memory; the least recently used
        session is dropped beyond this.
    host, port:
        Where the Flask host listens.
    """

    SPEED_PRESETS: Dict[str, float] = {
        "slow":   1.0,    # teaching mode
        "medium": 0.5,
        "fast":   0.15,
        "turbo":  0.05,
    }
    MIN_INTERVAL = 0.02

    default_speed   = "medium"
    array_size      = 50
    hash_table_size = 10
    log_level       = "INFO"
    secret_key      = secrets.token_hex(32)
    max_sessions    = 256
    host            = "127.0.0.1"
    port            = 5000


_ENV_PREFIX = "STEPPER_"

_CASTS = {
    "default_speed":   str,
    "array_size":      int,
    "hash_table_size": int,
    "log_level":       str,
    "secret_key":      str,
    "max_sessions":    int,
    "host":            str,
    "port":            int,
}


def load_config() -> type:
    """Override ``Config`` attributes from ``STEPPER_*`` environment variables."""
    for attr, cast in _CASTS.items():
        raw = os.environ.get(_ENV_PREFIX + attr.upper())
        if raw is None:
            continue
        try:
            setattr(Config, attr, cast(raw))
        except ValueError:
            logging.getLogger(__name__).warning(
                "Ignoring %s%s=%r: not a valid %s", _ENV_PREFIX, attr.upper(), raw, cast.__name__
            )
    if Config.default_speed not in Config.SPEED_PRESETS:
        Config.default_speed = "medium"
    return Config
