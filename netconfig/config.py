import logging
import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional, Union

from .errors import InvalidProfileError, UnknownEnvironmentError

WILDCARD = "*"
MAX_PORT = 65535
RECORD_FIELDS = ("host", "port", "network_id")

MAX_NETWORK_ID = 2**64 - 1

# u64 ids fit in 20 digits; longer strings are rejected before int()
_DIGITS = re.compile(r"[0-9]{1,20}")
_CANONICAL = re.compile(r"0|[1-9][0-9]*")


@dataclass(frozen=True)
class NetworkId:
    """Either a specific numeric network id or the "match any" wildcard.

    Build one with NetworkId.specific(1), NetworkId.any() or
    NetworkId.parse("1") / NetworkId.parse("*").
    """
    value: Optional[int] = None

    def __post_init__(self):
        if self.value is None:
            return
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidProfileError(f"Network id must be an integer, got {self.value!r}")
        if not 0 <= self.value <= MAX_NETWORK_ID:
            raise InvalidProfileError(f"Network id {self.value} is outside 0-{MAX_NETWORK_ID}")

    @classmethod
    def specific(cls, value: int) -> "NetworkId":
        if value is None:
            raise InvalidProfileError("Network id must be an integer, got None")
        return cls(value)

    @classmethod
    def any(cls) -> "NetworkId":
        return cls(None)

    @classmethod
    def parse(cls, raw: Union["NetworkId", int, str]) -> "NetworkId":
        """Parse an int, a string of digits, or "*" into a NetworkId.

        Digit strings must be canonical (no leading zeros, "0" aside) so
        that str() gives back exactly the text that was parsed.

        Raises:
            InvalidProfileError: If raw is none of the accepted forms, or is
                outside the u64 range
        """
        if isinstance(raw, NetworkId):
            return raw
        if isinstance(raw, str):
            if raw == WILDCARD:
                return cls.any()
            if _DIGITS.fullmatch(raw) and _CANONICAL.fullmatch(raw):
                return cls(int(raw))
            raise InvalidProfileError(f'Network id must be digits or "{WILDCARD}", got {raw!r}')
        return cls.specific(raw)

    @property
    def is_any(self) -> bool:
        return self.value is None

    def accepts(self, reported: Union[int, str]) -> bool:
        """Check whether a node reporting this network id may be used."""
        if self.is_any:
            return True
        if isinstance(reported, bool):
            return False
        if isinstance(reported, int):
            return reported == self.value
        if isinstance(reported, str):
            reported = reported.strip()
            if _DIGITS.fullmatch(reported):
                return int(reported) == self.value
        return False

    def __str__(self) -> str:
        return WILDCARD if self.is_any else str(self.value)


@dataclass(frozen=True)
class NetworkProfile:
    name: str
    host: str
    port: int
    network_id: NetworkId

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise InvalidProfileError(f"Profile name must be a non-empty string, got {self.name!r}")
        if not isinstance(self.host, str) or not self.host:
            raise InvalidProfileError(f"Profile {self.name!r}: host must be a non-empty string")
        if isinstance(self.port, bool) or not isinstance(self.port, int):
            raise InvalidProfileError(f"Profile {self.name!r}: port must be an integer, got {self.port!r}")
        if not 0 <= self.port <= MAX_PORT:
            raise InvalidProfileError(f"Profile {self.name!r}: port {self.port} is outside 0-{MAX_PORT}")
        # frozen, so go through object.__setattr__ to store the parsed id
        object.__setattr__(self, "network_id", NetworkId.parse(self.network_id))

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}"

    def to_dict(self) -> dict:
        return {
            "host": self.host,
            "port": self.port,
            "network_id": str(self.network_id),
        }

    @classmethod
    def from_dict(cls, name: str, record: Mapping) -> "NetworkProfile":
        """Build a profile from its {host, port, network_id} record.

        Raises:
            InvalidProfileError: If the record has missing or unexpected keys,
                or a field violates an invariant
        """
        if not isinstance(record, Mapping):
            raise InvalidProfileError(f"Profile {name!r} must be a mapping, got {type(record).__name__}")
        missing = [key for key in RECORD_FIELDS if key not in record]
        extra = sorted(set(record) - set(RECORD_FIELDS))
        if missing or extra:
            raise InvalidProfileError(f"Profile {name!r}: missing keys {missing}, unexpected keys {extra}")
        return cls(name, record["host"], record["port"], record["network_id"])


class NetworkConfig:
    """Read-only table of network profiles keyed by environment name."""

    def __init__(self, profiles: Iterable[NetworkProfile]):
        table = {}
        for profile in profiles:
            if profile.name in table:
                raise InvalidProfileError(f"Duplicate environment name: {profile.name!r}")
            table[profile.name] = profile
        self._profiles = MappingProxyType(table)

    def lookup(self, name: str) -> NetworkProfile:
        """Return the profile for an environment name.

        Raises:
            UnknownEnvironmentError: If no profile has that name
        """
        try:
            profile = self._profiles[name]
        except KeyError:
            raise UnknownEnvironmentError(name, self._profiles) from None
        logging.debug(f'Resolved {name} -> {profile.url} (network_id {profile.network_id})')
        return profile

    def get(self, name: str, default=None):
        return self._profiles.get(name, default)

    def names(self) -> list:
        return sorted(self._profiles)

    def to_dict(self) -> dict:
        return {"networks": {name: profile.to_dict() for name, profile in self._profiles.items()}}

    @classmethod
    def from_dict(cls, data: Mapping) -> "NetworkConfig":
        if not isinstance(data, Mapping) or not isinstance(data.get("networks"), Mapping):
            raise InvalidProfileError('Network config must be a mapping with a "networks" mapping')
        return cls(NetworkProfile.from_dict(name, record) for name, record in data["networks"].items())

    def __contains__(self, name) -> bool:
        return name in self._profiles

    def __iter__(self) -> Iterator[NetworkProfile]:
        return iter(self._profiles.values())

    def __len__(self) -> int:
        return len(self._profiles)

    def __eq__(self, other) -> bool:
        if not isinstance(other, NetworkConfig):
            return NotImplemented
        return dict(self._profiles) == dict(other._profiles)

    __hash__ = None

    def __repr__(self) -> str:
        return f"NetworkConfig({list(self._profiles.values())!r})"


class Environment:
    MAIN = NetworkProfile("main", "localhost", 8645, NetworkId.specific(1))
    DEVELOPMENT = NetworkProfile("development", "localhost", 8645, NetworkId.any())


DEFAULT_CONFIG = NetworkConfig([Environment.MAIN, Environment.DEVELOPMENT])
