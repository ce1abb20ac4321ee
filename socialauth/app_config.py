import os
from typing import NamedTuple


class Config(object):
    PINTEREST_CLIENT_ID = os.environ.get("PINTEREST_CLIENT_ID")
    PINTEREST_CLIENT_SECRET = os.environ.get("PINTEREST_CLIENT_SECRET")
    PINTEREST_REDIRECT_URI = os.environ.get("PINTEREST_REDIRECT_URI")

    def update(self, newdata):
        for key, value in newdata.items():
            setattr(self, key, value)

    def get(self, key, default=None):
        return getattr(self, key, default)


class ProviderConfig(NamedTuple):
    """Client credentials of a single social network"""

    client_id: str
    client_secret: str
    redirect_uri: str

    @classmethod
    def from_mapping(cls, source, prefix: str) -> "ProviderConfig":
        """read <PREFIX>_CLIENT_ID, <PREFIX>_CLIENT_SECRET and <PREFIX>_REDIRECT_URI
        from anything with a `get` - flask's app.config, a dict or a Config"""
        values = {}
        for field in cls._fields:
            key = f"{prefix}_{field}".upper()
            value = source.get(key)
            if not value:
                raise ValueError(f"{key} is not configured")
            values[field] = value
        return cls(**values)
