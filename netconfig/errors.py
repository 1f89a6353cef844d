class NetConfigError(Exception):
    """Base class for every error raised by netconfig."""


class UnknownEnvironmentError(NetConfigError, KeyError):
    """Raised when an environment name is not in the network table."""

    def __init__(self, name: str, available=()):
        self.name = name
        self.available = tuple(sorted(available))
        super().__init__(name)

    def __str__(self) -> str:
        known = ", ".join(self.available) or "none"
        return f"Unknown environment {self.name!r} (known: {known})"


class InvalidProfileError(NetConfigError, ValueError):
    """Raised when a profile or a persisted table violates an invariant."""


class NetworkMismatchError(NetConfigError):
    """Raised when a node reports a network id the profile does not accept."""
