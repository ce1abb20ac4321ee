import pytest

from socialauth.error_handling import (
    MalformedResponseError,
    ProviderError,
    RemoteAPIError,
)


@pytest.mark.parametrize(
    "error",
    (
        RemoteAPIError("pinterest answered with status 500.", status_code=500),
        MalformedResponseError("Response is not valid JSON."),
    ),
)
def test_provider_error_handler(app, client, error):
    @app.route("/broken")
    def broken():
        raise error

    resp = client.get("/broken")
    assert resp.status_code == 502
    assert resp.json == {"message": error.description}


def test_errors_are_provider_errors():
    assert issubclass(RemoteAPIError, ProviderError)
    assert issubclass(MalformedResponseError, ProviderError)
    error = RemoteAPIError("nope", status_code=401, network="pinterest")
    assert error.code == 502
    assert error.status_code == 401
    assert error.network == "pinterest"
