import abc
from typing import Any, Dict, Mapping, Optional

from socialauth.api.social.identity import NormalizedIdentity, TokenRequest
from socialauth.app_config import ProviderConfig
from socialauth.error_handling import MalformedResponseError


class SocialNetwork(abc.ABC):
    """Social network abstract class"""

    network_name: str

    @abc.abstractmethod
    def build_authorization_url(self, params: Mapping[str, str], state: str) -> str:
        """return auth url of provider for oauth"""

    @abc.abstractmethod
    def build_token_request(self, code: str) -> TokenRequest:
        """body for exchanging the code given in URL for an access token"""

    @abc.abstractmethod
    def fetch_user(self, access_token: str) -> Dict[str, Any]:
        """get raw user profile fields from provider"""

    @abc.abstractmethod
    def normalize(self, raw_profile: Mapping[str, Any]) -> NormalizedIdentity:
        """map raw profile fields to a NormalizedIdentity"""

    def user_from_token(self, access_token: str) -> NormalizedIdentity:
        return self.normalize(self.fetch_user(access_token))


def default_token_fields(config: ProviderConfig, code: str) -> Dict[str, str]:
    return {
        "grant_type": "authorization_code",
        "code": code,
        "client_id": config.client_id,
        "client_secret": config.client_secret,
        "redirect_uri": config.redirect_uri,
    }


def require_field(data: Any, *path: str, network: Optional[str] = None) -> Any:
    """walk `path` into nested mappings, raising MalformedResponseError
    when a key is missing or null"""
    value = data
    for depth, key in enumerate(path):
        if not isinstance(value, Mapping) or value.get(key) is None:
            dotted = ".".join(path[: depth + 1])
            raise MalformedResponseError(
                f"Missing field '{dotted}' in profile.", network=network
            )
        value = value[key]
    return value
