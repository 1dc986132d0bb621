"""Declaration of API resource types and their attributes"""
import logging
import reprlib
import types

import snug

from . import naming
from .config import Configuration
from .errors import AccessorCollision
from .search import SearchResult

__all__ = ["Registry", "Resource", "Accessor"]

logger = logging.getLogger(__name__)


class Registry(object):
    """The resource types of an API, in order of declaration,
    together with the settings used to fetch them.

    Resource types are added to a registry automatically
    when they are declared:

    >>> ichiba = Registry()
    >>> class Item(Resource, registry=ichiba):
    ...     fields = ("itemName", "itemPrice")
    ...
    >>> list(ichiba)
    [<resource Item>]

    Parameters
    ----------
    config: Configuration or None
        The credentials to authenticate requests with.
        If not given, they are read from the environment.
    client
        The HTTP client used to execute queries.
        Its type must have been registered with :func:`snug.send`
        (or :func:`snug.send_async` for :meth:`execute_async`).
        If not given, snug's default client is used.
    """

    def __init__(self, config=None, client=None):
        self._resources = []
        self.config = Configuration.from_env() if config is None else config
        self.client = client

    @property
    def resources(self):
        """The declared resource types, in order of declaration

        Returns
        -------
        ~typing.Tuple[~typing.Type[Resource], ...]
        """
        return tuple(self._resources)

    def declare(self, resource):
        """Add a resource type to the registry.

        Called automatically when a :class:`Resource` subclass is defined.

        Raises
        ------
        ValueError
            if the resource type is already declared
        """
        if resource in self._resources:
            raise ValueError("{!r} is already declared".format(resource))
        self._resources.append(resource)
        logger.debug("declared %r", resource)

    def configure(self, **kwargs):
        """Replace configuration values,
        e.g. ``registry.configure(application_id='...')``"""
        self.config = self.config.replace(**kwargs)

    def _execute_kwargs(self):
        kwargs = {"auth": self.config.authenticate}
        if self.client is not None:
            kwargs["client"] = self.client
        return kwargs

    def execute(self, query):
        """Execute a query with this registry's credentials and client

        Parameters
        ----------
        query: ~snug.Query[T]
            the query to execute

        Returns
        -------
        T
            the query result
        """
        return snug.execute(query, **self._execute_kwargs())

    def execute_async(self, query):
        """Execute a query asynchronously,
        with this registry's credentials and client

        Returns
        -------
        ~typing.Awaitable[T]
            the query result
        """
        return snug.execute_async(query, **self._execute_kwargs())

    def __iter__(self):
        return iter(self._resources)

    def __len__(self):
        return len(self._resources)

    def __contains__(self, resource):
        return resource in self._resources

    def __getitem__(self, name):
        """Look up a declared resource type by class name"""
        for resource in self._resources:
            if resource.__name__ == name:
                return resource
        raise KeyError(name)

    def __repr__(self):
        return "<Registry: {}>".format(
            ", ".join(r.__name__ for r in self._resources) or "empty"
        )


def _is_set(value):
    return value == 1 and not isinstance(value, bool)


class Accessor(object):
    """A read-only attribute exposing one raw field of a resource.
    Implements python's descriptor protocol.

    Parameters
    ----------
    name: str
        the attribute name on the resource class
    raw_name: str
        the field name as returned by the API
    predicate: bool
        if true, the accessor returns whether the field equals ``1``
        instead of the field value
    """

    __slots__ = "name", "raw_name", "predicate"

    def __init__(self, name, raw_name, predicate=False):
        self.name, self.raw_name, self.predicate = name, raw_name, predicate

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        value = instance.get_attribute(self.raw_name)
        return _is_set(value) if self.predicate else value

    def __set__(self, instance, value):
        raise AttributeError("can't set attribute {!r}".format(self.name))

    def __repr__(self):
        return "<Accessor {0.name!r} -> {0.raw_name!r}{1}>".format(
            self, " (predicate)" if self.predicate else ""
        )


class ResourceMeta(type):
    def __repr__(self):
        return "<resource {}>".format(self.__name__)


class Resource(metaclass=ResourceMeta):
    """Base class for API resources.

    Subclasses declare the raw field names the API returns.
    Each field becomes a read-only attribute named after the field,
    converted to snake_case and stripped of the resource name prefix.
    Fields ending in ``Flag`` additionally get a boolean ``is_...``
    attribute.

    Example
    -------

    >>> class Item(Resource, registry=ichiba,
    ...            endpoint='https://app.rakuten.co.jp/...'):
    ...     fields = ("itemName", "itemPrice", "postageFlag")
    ...
    >>> item = Item({"itemName": "Widget", "postageFlag": 1})
    >>> item.name
    'Widget'
    >>> item.is_postage
    True

    Parameters
    ----------
    params: ~typing.Mapping[str, object]
        The raw record as returned by the API.
        Keys are converted to strings.
    """

    __slots__ = "_params"
    __hash__ = None

    registry = None
    fields = {}  # raw field name -> accessor names
    accessors = {}  # accessor name -> Accessor

    def __init_subclass__(
        cls,
        registry=None,
        abstract=False,
        resource_name=None,
        endpoint=None,
        **kwargs
    ):
        """Initialize a Resource subclass

        Parameters
        ----------
        registry: Registry or None
            The registry to declare the resource in.
            If not given, the registry of the superclass is used.
        abstract: bool
            Whether the class is only a base for other resources.
            Abstract resources need no registry, and are not declared.
        resource_name: str or None
            The prefix to strip from field names.
            Defaults to the lowercased class name.
        endpoint: str or None
            The URL of the resource's search endpoint
        """
        super().__init_subclass__(**kwargs)
        declared = cls.__dict__.get("fields", ())
        if isinstance(declared, str):
            declared = (declared,)

        cls.fields, cls.accessors = {}, {}
        for base in reversed(cls.__mro__[1:]):
            cls.fields.update(base.__dict__.get("fields", {}))
            cls.accessors.update(base.__dict__.get("accessors", {}))

        if registry is None:
            registry = cls.registry
        if registry is None and not abstract:
            raise TypeError(
                "subclassing ``Resource`` requires a registry, "
                "or abstract=True"
            )
        cls.registry = registry

        if resource_name is not None:
            cls.set_resource_name(resource_name)
        if endpoint is not None:
            cls.endpoint(endpoint)

        cls.attribute(*declared)

        if not abstract:
            registry.declare(cls)

    @classmethod
    def resource_name(cls):
        """The name stripped from the start of field names.
        Defaults to the lowercased class name."""
        try:
            return cls.__dict__["_resource_name"]
        except KeyError:
            cls._resource_name = cls.__name__.lower()
            return cls._resource_name

    @classmethod
    def set_resource_name(cls, name):
        """Override the resource name.
        Only affects attributes declared afterwards."""
        cls._resource_name = name

    @classmethod
    def endpoint(cls, url=None):
        """Get or set the resource's endpoint URL

        Parameters
        ----------
        url: str or None
            If given, the new endpoint URL

        Returns
        -------
        str or None
            the current endpoint URL.
            Not inherited: each resource type sets its own.
        """
        if url is not None:
            cls._endpoint = url
        return cls.__dict__.get("_endpoint")

    @staticmethod
    def parse_response(body):
        """Extract the raw records from a decoded response body.

        Override in subclasses, or use :meth:`set_parser`.
        By default, the body is returned as-is.

        Returns
        -------
        ~typing.Iterable[~typing.Mapping[str, object]]
            the raw records
        """
        return body

    @classmethod
    def set_parser(cls, func):
        """Set the function used as :meth:`parse_response`.
        Usable as a decorator."""
        cls.parse_response = staticmethod(func)
        return func

    @classmethod
    def attribute(cls, *raw_names):
        """Declare fields, creating an accessor for each.

        Raises
        ------
        AccessorCollision
            if an accessor name is already taken
        """
        resource_name = cls.resource_name()
        for raw_name in map(str, raw_names):
            if raw_name in cls.fields:
                continue
            name = naming.accessor_name(resource_name, raw_name)
            accessors = [Accessor(name, raw_name)]
            if raw_name.endswith("Flag"):
                accessors.append(
                    Accessor(
                        naming.predicate_name(resource_name, raw_name),
                        raw_name,
                        predicate=True,
                    )
                )
            for accessor in accessors:
                cls._check_available(accessor)
            for accessor in accessors:
                setattr(cls, accessor.name, accessor)
                cls.accessors[accessor.name] = accessor
            cls.fields[raw_name] = tuple(a.name for a in accessors)
            logger.debug(
                "%s.%s -> %s",
                cls.__name__,
                raw_name,
                ", ".join(cls.fields[raw_name]),
            )

    @classmethod
    def _check_available(cls, accessor):
        try:
            existing = cls.accessors[accessor.name]
        except KeyError:
            if hasattr(cls, accessor.name):
                raise AccessorCollision(
                    "field {!r} of {} would hide the {!r} member".format(
                        accessor.raw_name, cls.__name__, accessor.name
                    )
                )
        else:
            raise AccessorCollision(
                "fields {!r} and {!r} of {} both map to {!r}".format(
                    existing.raw_name,
                    accessor.raw_name,
                    cls.__name__,
                    accessor.name,
                )
            )

    @classmethod
    def search(cls, **options):
        """Create a search query for this resource.
        Nothing is sent until the query is executed.

        Parameters
        ----------
        **options
            search parameters, in snake_case or camelCase

        Returns
        -------
        SearchResult
            a lazy, reusable query for the first page of results
        """
        return SearchResult(cls, options)

    @classmethod
    def all(cls, callback=None, **options):
        """All search results, across all pages.

        Parameters
        ----------
        callback: ~typing.Callable[[Resource], None] or None
            If given, called with each result,
            and nothing is returned.
        **options
            search parameters

        Returns
        -------
        ~typing.Iterator[Resource] or None
            a lazy iterator of results, if no callback is given
        """
        return cls.search(**options).all(callback)

    def __init__(self, params=()):
        self._params = {str(key): value for key, value in dict(params).items()}

    params = property(
        lambda self: types.MappingProxyType(self._params),
        doc="read-only view of the raw record",
    )

    def get(self, key, default=None):
        """Look up a raw field by its exact name,
        falling back to its camelCase form.

        >>> item = Item({"itemCode": "abc"})
        >>> item.get("item_code")
        'abc'

        Note
        ----
        The fallback only goes from snake_case to camelCase.
        A field stored in snake_case is not found by its camelCase name.
        """
        key = str(key)
        for candidate in (key, naming.to_camel(key)):
            if candidate in self._params:
                return self._params[candidate]
        return default

    def get_attribute(self, name):
        """Look up a raw field by its exact name.
        Returns ``None`` if it is absent."""
        return self._params.get(str(name))

    def attributes(self):
        """The raw field names of this record

        Returns
        -------
        ~typing.List[str]
        """
        return list(self._params)

    def __eq__(self, other):
        """Whether every field of this record has the same value
        in ``other``. Fields only present in ``other`` are ignored,
        so the comparison is not symmetric.

        Raises
        ------
        TypeError
            if ``other`` is not a :class:`Resource`
        """
        if not isinstance(other, Resource):
            raise TypeError(
                "cannot compare {} with {}".format(
                    type(self).__name__, type(other).__name__
                )
            )
        return all(
            value == other._params.get(key)
            for key, value in self._params.items()
        )

    def __repr__(self):
        return "<{}: {}>".format(
            self.__class__.__name__, reprlib.repr(self._params)
        )
