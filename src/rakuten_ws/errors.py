"""Exceptions raised by the library"""

__all__ = [
    "Error",
    "AccessorCollision",
    "ConfigurationError",
    "ApiError",
    "WrongParameter",
    "NotFound",
    "TooManyRequests",
    "ServerError",
    "ServiceUnavailable",
]


class Error(Exception):
    """Base class for all errors raised by this library"""


class AccessorCollision(Error, TypeError):
    """Two declared attributes, or an attribute and an existing member
    of the resource class, map to the same accessor name"""


class ConfigurationError(Error):
    """The library is not configured well enough to send a request"""


class ApiError(Error):
    """An error response from the API

    Parameters
    ----------
    status_code: int
        the HTTP status code
    error: str or None
        the error code in the response body, e.g. ``wrong_parameter``
    description: str or None
        the human readable error description
    """

    status = None

    def __init__(self, status_code, error=None, description=None):
        super().__init__(description or error or "HTTP {}".format(status_code))
        self.status_code = status_code
        self.error = error
        self.description = description

    @staticmethod
    def for_status(status_code):
        """The exception class matching an HTTP status code

        Parameters
        ----------
        status_code: int
            the HTTP status code

        Returns
        -------
        ~typing.Type[ApiError]
            the most specific exception class,
            :class:`ApiError` itself for unknown codes.
        """
        for cls in ApiError.__subclasses__():
            if cls.status == status_code:
                return cls
        return ApiError


class WrongParameter(ApiError):
    status = 400


class NotFound(ApiError):
    status = 404


class TooManyRequests(ApiError):
    status = 429


class ServerError(ApiError):
    status = 500


class ServiceUnavailable(ApiError):
    status = 503
