import os
from typing import Mapping, Optional


class ConfigError(Exception):
    pass


ENV_PREFIX = 'FIELDSCAN_'

DEFAULT_CONFIG = dict(
    MAX_STEPS=None,
    VERBOSE=0,
)

INT_KEYS = {'MAX_STEPS', 'VERBOSE'}


def create_config(environ: Optional[Mapping[str, str]] = None) -> dict:
    """Construct the configuration from defaults and FIELDSCAN_* environment variables"""
    if environ is None:
        environ = os.environ

    config = dict(DEFAULT_CONFIG)
    for key in DEFAULT_CONFIG:
        raw = environ.get(ENV_PREFIX + key)
        if raw is None or raw == '':
            continue
        if key in INT_KEYS:
            try:
                value = int(raw)
            except ValueError:
                raise ConfigError(ENV_PREFIX + key, raw) from None
            if value < 0:
                raise ConfigError(ENV_PREFIX + key, raw)
            config[key] = value
        else:
            config[key] = raw

    return config
