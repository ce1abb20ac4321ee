from typing import List, Optional, Type

import requests

from socialauth.api.social.identity import NormalizedIdentity, TokenRequest
from socialauth.api.social.pinterest import Pinterest
from socialauth.api.social.social_network import SocialNetwork
from socialauth.app_config import ProviderConfig

social_networks_classes: List[Type[SocialNetwork]] = [Pinterest]


def build_network(
    name: str, config_source, http: Optional[requests.Session] = None
) -> SocialNetwork:
    """create the `name` network with credentials read from `config_source`"""
    for network in social_networks_classes:
        if network.network_name == name:
            config = ProviderConfig.from_mapping(config_source, name.upper())
            return network(config, http=http)
    raise ValueError(f"Unknown social network '{name}'")
