import logging
from typing import Union

from web3 import Web3

from .config import NetworkProfile
from .errors import NetworkMismatchError


def web3_for(profile: NetworkProfile) -> Web3:
    """Build a Web3 instance for a profile. No request is made to the node."""
    logging.debug(f'Creating Web3 provider for {profile.name} at {profile.url}')
    return Web3(Web3.HTTPProvider(profile.url))


def check_network_id(profile: NetworkProfile, reported: Union[int, str]) -> NetworkProfile:
    """Make sure a node's reported network id is acceptable for a profile.

    Args:
        profile: The profile being connected to
        reported: The network id the node reported (e.g. from net_version)

    Returns:
        NetworkProfile: The same profile, when the id is accepted

    Raises:
        NetworkMismatchError: If the profile expects a different network id
    """
    if profile.network_id.accepts(reported):
        logging.debug(f'Network id {reported} accepted for {profile.name} (expects {profile.network_id})')
        return profile

    logging.warning(f'Network id mismatch for {profile.name}: expected {profile.network_id}, got {reported}')
    raise NetworkMismatchError(
        f"Node at {profile.url} reported network id {reported!r}, "
        f"profile {profile.name!r} expects {profile.network_id}"
    )
