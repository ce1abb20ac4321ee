from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlencode

import requests
from loguru import logger

from socialauth.api.social.identity import NormalizedIdentity, TokenRequest
from socialauth.api.social.social_network import (
    SocialNetwork,
    default_token_fields,
    require_field,
)
from socialauth.app_config import ProviderConfig
from socialauth.consts import AUTHORIZATION_CODE, AVATAR_SIZE, SCOPE_SEPARATOR
from socialauth.error_handling import MalformedResponseError, RemoteAPIError


class Pinterest(SocialNetwork):
    network_name = "pinterest"
    authorization_url = "https://api.pinterest.com/oauth/"
    base_url = "https://api.pinterest.com/v1/"
    token_path = "oauth/token"
    profile_path = "me"
    scopes = ("read_public",)
    fields = ("id", "username", "url", "first_name", "last_name", "bio", "image")

    def __init__(
        self, config: ProviderConfig, http: Optional[requests.Session] = None
    ):
        self.config = config
        # without a session every call goes through requests.request;
        # an injected session is owned and closed by the host
        self.http = http or requests

    @property
    def token_url(self) -> str:
        query = urlencode({"grant_type": AUTHORIZATION_CODE})
        return f"{self.base_url}{self.token_path}?{query}"

    @property
    def profile_url(self) -> str:
        return f"{self.base_url}{self.profile_path}"

    def code_fields(self) -> Dict[str, str]:
        """default query of the authorization redirect, without the state"""
        return {
            "client_id": self.config.client_id,
            "redirect_uri": self.config.redirect_uri,
            "scope": SCOPE_SEPARATOR.join(self.scopes),
            "response_type": "code",
        }

    def build_authorization_url(self, params: Mapping[str, str], state: str) -> str:
        query = dict(params)
        query["state"] = state
        return f"{self.authorization_url}?{urlencode(query)}"

    def build_token_request(self, code: str) -> TokenRequest:
        fields = {
            **default_token_fields(self.config, code),
            "grant_type": AUTHORIZATION_CODE,
        }
        return TokenRequest(**fields)

    def access_token(self, code: str) -> str:
        token_request = self.build_token_request(code)
        logger.debug(f"exchanging code for {self.network_name} access token")
        body = self._call("POST", self.token_url, data=token_request.to_dict())
        access_token = body.get("access_token")
        if not access_token:
            raise MalformedResponseError(
                "No token received.", network=self.network_name
            )
        return access_token

    def fetch_user(self, access_token: str) -> Dict[str, Any]:
        if not access_token:
            raise ValueError("access_token is required")
        logger.debug(f"fetching {self.network_name} profile")
        body = self._call(
            "GET",
            self.profile_url,
            params={"access_token": access_token, "fields": ",".join(self.fields)},
        )
        data = body.get("data")
        if not isinstance(data, dict):
            raise MalformedResponseError(
                "Profile response has no data object.", network=self.network_name
            )
        return data

    def normalize(self, raw_profile: Mapping[str, Any]) -> NormalizedIdentity:
        def field(*path):
            return require_field(raw_profile, *path, network=self.network_name)

        # Pinterest never exposes the email or a full size avatar
        identity = NormalizedIdentity(
            provider_user_id=str(field("id")),
            nickname=field("username"),
            display_name=f"{field('first_name')} {field('last_name')}",
            avatar_url=field("image", AVATAR_SIZE, "url"),
            raw=dict(raw_profile),
            email=None,
            avatar_original_url=None,
        )
        logger.debug(f"{self.network_name} user is {identity.provider_user_id}")
        return identity

    def user(self, code: str) -> NormalizedIdentity:
        """everything the callback needs once the host has verified the state"""
        return self.user_from_token(self.access_token(code))

    def _call(self, method: str, url: str, **kwargs) -> Dict[str, Any]:
        try:
            response = self.http.request(method, url, **kwargs)
        except requests.RequestException as e:
            raise RemoteAPIError(
                f"Could not reach {self.network_name}.", network=self.network_name
            ) from e
        if not response.ok:
            logger.debug(f"{self.network_name} answered {response.status_code}")
            raise RemoteAPIError(
                f"{self.network_name} answered with status {response.status_code}.",
                status_code=response.status_code,
                network=self.network_name,
            )
        try:
            body = response.json()
        except ValueError as e:
            raise MalformedResponseError(
                "Response is not valid JSON.", network=self.network_name
            ) from e
        if not isinstance(body, dict):
            raise MalformedResponseError(
                "Response is not a JSON object.", network=self.network_name
            )
        return body
