"""Search queries and paginated results"""
import json
import logging
import types
from collections.abc import Mapping
from functools import singledispatch
from itertools import chain
from operator import attrgetter

import snug

from .errors import ApiError, ConfigurationError
from .naming import to_camel

__all__ = ["SearchResult", "SearchPage"]

logger = logging.getLogger(__name__)

_SORT_DIRECTIONS = {"asc": "+", "desc": "-"}


@singledispatch
def _dump_param(value):
    return str(value)


@_dump_param.register(bool)
def _dump_bool(value):
    return "1" if value else "0"


def _dump_params(options):
    """query parameters in wire format: camelCase keys, string values"""
    params = {"format": "json"}
    params.update(
        (to_camel(str(key)), _dump_param(value))
        for key, value in options.items()
        if value is not None
    )
    return params


def _parse_content(response):
    """decode the response body as JSON, raise on errors"""
    if response.status_code != 200:
        try:
            body = json.loads(response.content)
        except (TypeError, ValueError):
            body = None
        if not isinstance(body, Mapping):
            body = {}
        logger.warning(
            "API error %s: %s",
            response.status_code,
            body.get("error_description") or body.get("error"),
        )
        raise ApiError.for_status(response.status_code)(
            response.status_code,
            error=body.get("error"),
            description=body.get("error_description"),
        )
    return json.loads(response.content)


class SearchPage(snug.Pagelike):
    """One page of search results.

    Parameters
    ----------
    content: ~typing.List[Resource]
        The results on this page.
    next_query: SearchResult or None
        The query for the next page, if there is one.
    count: int or None
        The total number of results.
    page: int or None
        The number of this page, starting at 1.
    page_count: int or None
        The total number of pages.
    hits: int or None
        The number of results per page.
    """

    __slots__ = (
        "_content",
        "_next_query",
        "_count",
        "_page",
        "_page_count",
        "_hits",
    )

    def __init__(
        self,
        content,
        next_query=None,
        count=None,
        page=None,
        page_count=None,
        hits=None,
    ):
        self._content, self._next_query = content, next_query
        self._count, self._page = count, page
        self._page_count, self._hits = page_count, hits

    content = property(attrgetter("_content"))
    next_query = property(attrgetter("_next_query"))
    count = property(attrgetter("_count"))
    page = property(attrgetter("_page"))
    page_count = property(attrgetter("_page_count"))
    hits = property(attrgetter("_hits"))

    def has_next_page(self):
        return self._next_query is not None

    def __iter__(self):
        return iter(self._content)

    def __getitem__(self, index):
        return self._content[index]

    def __len__(self):
        return len(self._content)

    def __repr__(self):
        return "SearchPage(page={}/{}, {} results)".format(
            self._page, self._page_count, len(self._content)
        )


class SearchResult(snug.Query[SearchPage]):
    """A search query for a resource type,
    resolving to the requested :class:`SearchPage`.

    Search results are immutable and reusable.
    Use :meth:`page`, :meth:`order`, and :meth:`with_options`
    to derive new ones.

    Parameters
    ----------
    resource: ~typing.Type[Resource]
        The resource type to search for.
        Its :meth:`~Resource.endpoint` is queried
        and its :meth:`~Resource.parse_response` extracts the records.
    options: ~typing.Mapping[str, object]
        Search parameters. Keys are sent in camelCase,
        ``None`` values are left out.

    Example
    -------

    >>> query = Item.search(keyword="coffee").order(item_price="asc")
    >>> page = Item.registry.execute(query)
    >>> for item in query.all():
    ...     print(item.name)
    """

    __slots__ = "_resource", "_options"
    __hash__ = None

    def __init__(self, resource, options=None):
        self._resource = resource
        self._options = dict(options or {})

    resource = property(attrgetter("_resource"))

    @property
    def options(self):
        """read-only view of the search parameters"""
        return types.MappingProxyType(self._options)

    @property
    def request(self):
        """The request to send, without credentials

        Raises
        ------
        ConfigurationError
            if the resource type has no endpoint
        """
        endpoint = self._resource.endpoint()
        if endpoint is None:
            raise ConfigurationError(
                "no endpoint configured for {}".format(
                    self._resource.__name__
                )
            )
        return snug.GET(endpoint, params=_dump_params(self._options))

    def __iter__(self):
        request = self.request
        logger.debug("searching %s: %r", self._resource.__name__, request)
        response = yield request
        return self._load_page(_parse_content(response))

    def _load_page(self, body):
        resource = self._resource
        records = resource.parse_response(body)
        if isinstance(records, (Mapping, str, bytes)):
            raise ConfigurationError(
                "{}.parse_response returned {}, not a sequence of records "
                "(override parse_response to extract them)".format(
                    resource.__name__, type(records).__name__
                )
            )
        content = [resource(record) for record in records]
        meta = body if isinstance(body, Mapping) else {}
        page, page_count = meta.get("page"), meta.get("pageCount")
        if page and page_count and page < page_count:
            next_query = self.page(page + 1)
        else:
            next_query = None
        logger.debug(
            "loaded %d %s records (page %s of %s)",
            len(content),
            resource.__name__,
            page,
            page_count,
        )
        return SearchPage(
            content,
            next_query=next_query,
            count=meta.get("count"),
            page=page,
            page_count=page_count,
            hits=meta.get("hits"),
        )

    def with_options(self, **options):
        """A new search with added or replaced parameters"""
        return type(self)(self._resource, dict(self._options, **options))

    def page(self, number):
        """A new search for the given page number"""
        return self.with_options(page=number)

    def order(self, standard=None, **field):
        """A new search, sorted on one field.

        Example
        -------

        >>> Item.search(keyword="tea").order(item_price="desc")
        >>> Item.search(keyword="tea").order("standard")

        Raises
        ------
        ValueError
            unless sorted on ``"standard"`` or on exactly one field,
            in direction ``"asc"`` or ``"desc"``.
        """
        if standard == "standard" and not field:
            return self.with_options(sort="standard")
        if standard is not None or len(field) != 1:
            raise ValueError("order by 'standard' or by exactly one field")
        ((key, direction),) = field.items()
        try:
            prefix = _SORT_DIRECTIONS[str(direction).lower()]
        except KeyError:
            raise ValueError(
                "invalid sort direction {!r}, "
                "use 'asc' or 'desc'".format(direction)
            )
        return self.with_options(sort=prefix + to_camel(key))

    def _registry(self):
        registry = self._resource.registry
        if registry is None:
            raise ConfigurationError(
                "{} is not declared in a registry".format(
                    self._resource.__name__
                )
            )
        return registry

    def fetch(self):
        """Execute this search, returning the requested page

        Returns
        -------
        SearchPage
        """
        return self._registry().execute(self)

    def pages(self):
        """A query for all pages, starting from this one

        Returns
        -------
        ~snug.Query[~typing.Iterator[~typing.List[Resource]]]
        """
        return snug.paginated(self)

    def all(self, callback=None):
        """All results, starting from this search's page.
        Pages are fetched lazily, as results are consumed.

        Parameters
        ----------
        callback: ~typing.Callable[[Resource], None] or None
            If given, called with each result,
            and nothing is returned.

        Returns
        -------
        ~typing.Iterator[Resource] or None
            a lazy iterator of results, if no callback is given
        """
        pages = self._registry().execute(self.pages())
        results = chain.from_iterable(pages)
        if callback is None:
            return results
        for result in results:
            callback(result)

    def __eq__(self, other):
        if isinstance(other, SearchResult):
            return (self._resource, self._options) == (
                other._resource,
                other._options,
            )
        return NotImplemented

    def __repr__(self):
        return "SearchResult({}, {!r})".format(
            self._resource.__name__, self._options
        )
