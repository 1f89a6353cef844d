"""Load the effective network table, applying environment overrides.

NETCONFIG_FILE points at a JSON table to use instead of the built-in
profiles. NETCONFIG_<NAME>_HOST, NETCONFIG_<NAME>_PORT and
NETCONFIG_<NAME>_NETWORK_ID override single fields of the profile NAME.
Values may also come from a .env file in the working directory.
"""
import dataclasses
import logging
import os
from typing import Mapping, Optional

from dotenv import load_dotenv

from . import store
from .config import DEFAULT_CONFIG, NetworkConfig, NetworkProfile
from .errors import InvalidProfileError

ENV_PREFIX = "NETCONFIG_"
CONFIG_FILE_VAR = ENV_PREFIX + "FILE"


def _env_key(name: str, field: str) -> str:
    return f"{ENV_PREFIX}{name.upper().replace('-', '_')}_{field.upper()}"


def _apply_overrides(profile: NetworkProfile, environ: Mapping) -> NetworkProfile:
    changes = {}

    host = environ.get(_env_key(profile.name, "host"))
    if host is not None:
        changes["host"] = host

    port = environ.get(_env_key(profile.name, "port"))
    if port is not None:
        try:
            changes["port"] = int(port)
        except ValueError:
            raise InvalidProfileError(
                f"{_env_key(profile.name, 'port')} must be an integer, got {port!r}"
            ) from None

    network_id = environ.get(_env_key(profile.name, "network_id"))
    if network_id is not None:
        changes["network_id"] = network_id

    if not changes:
        return profile

    logging.info(f'Overriding {sorted(changes)} for {profile.name} from environment')
    return dataclasses.replace(profile, **changes)


def load_config(environ: Optional[Mapping] = None) -> NetworkConfig:
    """Build the network table for this process.

    Args:
        environ: Variables to read overrides from (default: os.environ,
            after loading .env)

    Returns:
        NetworkConfig: A fresh read-only table

    Raises:
        InvalidProfileError: If the config file or an override is invalid
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    config_file = environ.get(CONFIG_FILE_VAR)
    base = store.load(config_file) if config_file else DEFAULT_CONFIG

    return NetworkConfig(_apply_overrides(profile, environ) for profile in base)
