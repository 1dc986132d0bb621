import pytest

from rakuten_ws import errors


@pytest.mark.parametrize(
    "status, cls",
    [
        (400, errors.WrongParameter),
        (404, errors.NotFound),
        (429, errors.TooManyRequests),
        (500, errors.ServerError),
        (503, errors.ServiceUnavailable),
        (401, errors.ApiError),
        (200, errors.ApiError),
    ],
)
def test_for_status(status, cls):
    assert errors.ApiError.for_status(status) is cls


class TestApiError:
    def test_message_from_description(self):
        err = errors.NotFound(404, "not_found", "no such item")
        assert str(err) == "no such item"
        assert err.status_code == 404
        assert err.error == "not_found"
        assert err.description == "no such item"

    def test_message_from_error(self):
        assert str(errors.ApiError(400, "wrong_parameter")) == (
            "wrong_parameter"
        )

    def test_message_from_status(self):
        assert str(errors.ServerError(500)) == "HTTP 500"

    def test_hierarchy(self):
        assert issubclass(errors.ServiceUnavailable, errors.ApiError)
        assert issubclass(errors.ApiError, errors.Error)
        assert issubclass(errors.ConfigurationError, errors.Error)
        assert issubclass(errors.AccessorCollision, TypeError)
