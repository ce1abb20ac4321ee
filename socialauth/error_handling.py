from typing import Optional

import werkzeug.exceptions
from loguru import logger

from socialauth.api.utils import jsonify_response


def init_app(app):
    app.register_error_handler(ProviderError, handle_provider_exception)


@jsonify_response
def handle_provider_exception(e):
    logger.warning(f"{e.network} provider error: {e.description}")
    return {"message": e.description}, e.code


class ProviderError(werkzeug.exceptions.HTTPException):
    """the social network could not be talked to, or answered nonsense"""

    def __init__(self, description, code=502, network: Optional[str] = None):
        super().__init__(description)
        self.code = code
        self.network = network


class RemoteAPIError(ProviderError):
    def __init__(
        self,
        description,
        status_code: Optional[int] = None,
        network: Optional[str] = None,
    ):
        super().__init__(description, network=network)
        self.status_code = status_code


class MalformedResponseError(ProviderError):
    pass
