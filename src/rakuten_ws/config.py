"""Credentials and request authentication"""
import logging
import os
from operator import attrgetter

from .errors import ConfigurationError

__all__ = ["Configuration"]

logger = logging.getLogger(__name__)

APPLICATION_ID_ENV = "RWS_APPLICATION_ID"
AFFILIATE_ID_ENV = "RWS_AFFILIATE_ID"


class Configuration(object):
    """Credentials for the API.

    Instances are immutable; use :meth:`replace` to derive new ones.

    Parameters
    ----------
    application_id: str or None
        The application ID issued by Rakuten.
        Required for every request.
    affiliate_id: str or None
        An optional affiliate ID, sent along with every request.
    """

    __slots__ = "_application_id", "_affiliate_id"
    __hash__ = None

    def __init__(self, application_id=None, affiliate_id=None):
        self._application_id = application_id
        self._affiliate_id = affiliate_id

    application_id = property(attrgetter("_application_id"))
    affiliate_id = property(attrgetter("_affiliate_id"))

    @classmethod
    def from_env(cls, environ=None):
        """Read the configuration from environment variables

        ``RWS_APPLICATION_ID`` and ``RWS_AFFILIATE_ID`` are used.

        Parameters
        ----------
        environ: ~typing.Mapping[str, str] or None
            the environment to read from. Defaults to :data:`os.environ`.
        """
        environ = os.environ if environ is None else environ
        return cls(
            application_id=environ.get(APPLICATION_ID_ENV) or None,
            affiliate_id=environ.get(AFFILIATE_ID_ENV) or None,
        )

    def _asdict(self):
        return {
            "application_id": self._application_id,
            "affiliate_id": self._affiliate_id,
        }

    def replace(self, **kwargs):
        """Create a copy with replaced fields

        Parameters
        ----------
        **kwargs
            fields and values to replace
        """
        return type(self)(**dict(self._asdict(), **kwargs))

    def authenticate(self, request):
        """Add the credentials to a :class:`~snug.http.Request`.

        Usable as the ``auth`` argument of :func:`snug.execute`.

        Raises
        ------
        ConfigurationError
            if no application ID is configured
        """
        if not self._application_id:
            raise ConfigurationError(
                "no application ID configured "
                "(set {} or pass application_id)".format(APPLICATION_ID_ENV)
            )
        params = {"applicationId": self._application_id}
        if self._affiliate_id:
            params["affiliateId"] = self._affiliate_id
        logger.debug("authenticating request to %s", request.url)
        return request.with_params(params)

    def __eq__(self, other):
        if isinstance(other, Configuration):
            return self._asdict() == other._asdict()
        return NotImplemented

    def __repr__(self):
        return "Configuration(application_id={!r}, affiliate_id={!r})".format(
            self._application_id, self._affiliate_id
        )
