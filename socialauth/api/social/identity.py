from typing import Any, Dict, NamedTuple, Optional


class TokenRequest(NamedTuple):
    """body of the code -> access token exchange"""

    grant_type: str
    code: str
    client_id: str
    client_secret: str
    redirect_uri: str

    def to_dict(self) -> Dict[str, str]:
        return dict(self._asdict())


class NormalizedIdentity(NamedTuple):
    """user identity in the same shape for every social network"""

    provider_user_id: str
    nickname: str
    display_name: str
    avatar_url: str
    raw: Dict[str, Any]
    email: Optional[str] = None
    avatar_original_url: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._asdict())
