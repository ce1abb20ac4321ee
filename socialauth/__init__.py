from socialauth.api.social import Pinterest, SocialNetwork, build_network
from socialauth.app_config import Config, ProviderConfig
from socialauth.error_handling import (
    MalformedResponseError,
    ProviderError,
    RemoteAPIError,
)
