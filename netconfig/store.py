import json
import logging
from pathlib import Path
from typing import Union

from .config import NetworkConfig
from .errors import InvalidProfileError


def _reject_duplicate_keys(pairs: list) -> dict:
    result = {}
    for key, value in pairs:
        if key in result:
            raise InvalidProfileError(f"Duplicate key in network config: {key!r}")
        result[key] = value
    return result


def dumps(config: NetworkConfig) -> str:
    """Serialize a network table to JSON in the {"networks": {...}} shape."""
    return json.dumps(config.to_dict(), indent=2, sort_keys=True) + "\n"


def loads(text: str) -> NetworkConfig:
    """Parse a network table from JSON text.

    Raises:
        InvalidProfileError: If the text is not valid JSON, repeats a key,
            or a record is invalid
    """
    try:
        data = json.loads(text, object_pairs_hook=_reject_duplicate_keys)
    except json.JSONDecodeError as e:
        raise InvalidProfileError(f"Network config is not valid JSON: {e}") from e
    return NetworkConfig.from_dict(data)


def save(config: NetworkConfig, path: Union[str, Path]) -> Path:
    path = Path(path)
    path.write_text(dumps(config), encoding="utf-8")
    logging.info(f'Saved {len(config)} network profiles to {path}')
    return path


def load(path: Union[str, Path]) -> NetworkConfig:
    """Read a network table from a UTF-8 JSON file.

    Raises:
        InvalidProfileError: If the file cannot be read or decoded, or its
            contents are invalid
    """
    path = Path(path)
    logging.info(f'Loading network profiles from {path}')
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InvalidProfileError(f"Cannot read network config {path}: {e}") from e
    return loads(text)
