from .config import DEFAULT_CONFIG, Environment, NetworkConfig, NetworkId, NetworkProfile
from .errors import InvalidProfileError, NetConfigError, NetworkMismatchError, UnknownEnvironmentError
from .provider import check_network_id, web3_for
from .settings import load_config
