import flask
import pytest
import requests
import responses as responses_module

from socialauth import error_handling
from socialauth.api.social import Pinterest, SocialNetwork, social_networks_classes
from socialauth.app_config import Config, ProviderConfig


@pytest.fixture
def config() -> ProviderConfig:
    return ProviderConfig(
        client_id="test",
        client_secret="VERY_SECRET",
        redirect_uri="https://app/callback",
    )


@pytest.fixture
def pinterest(config) -> Pinterest:
    return Pinterest(config, http=requests.Session())


@pytest.fixture
def fake_profile():
    return {
        "id": "42",
        "username": "alice",
        "first_name": "Alice",
        "last_name": "Smith",
        "bio": "pins all day",
        "url": "https://www.pinterest.com/alice/",
        "image": {"60x60": {"url": "https://img/60.png", "width": 60, "height": 60}},
    }


@pytest.fixture
def mock_pinterest_profile(responses, fake_profile):
    responses.add(
        responses.GET,
        "https://api.pinterest.com/v1/me",
        status=200,
        json={"data": fake_profile},
    )


@pytest.fixture
def mock_pinterest_token(responses):
    responses.add(
        responses.POST,
        "https://api.pinterest.com/v1/oauth/token",
        status=200,
        json={"access_token": "fake_token", "token_type": "bearer", "scope": []},
    )


@pytest.fixture
def app() -> flask.Flask:
    app = flask.Flask(__name__)
    config = Config()
    config.update(
        dict(
            TESTING=True,
            PINTEREST_CLIENT_ID="test",
            PINTEREST_CLIENT_SECRET="VERY_SECRET",
            PINTEREST_REDIRECT_URI="https://app/callback",
        )
    )
    app.config.from_object(config)
    error_handling.init_app(app)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def responses():
    with responses_module.RequestsMock() as rsps:
        yield rsps


@pytest.fixture(params=social_networks_classes)
def social_network(request, config) -> SocialNetwork:
    return request.param(config, http=requests.Session())
