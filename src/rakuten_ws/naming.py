"""Conversion between wire-format field names and python names"""
import re

__all__ = ["to_snake", "to_camel", "accessor_name", "predicate_name"]

_CASE_BOUNDARY = re.compile(r"([a-z]+)([A-Z])")
_UNDERSCORED = re.compile(r"([a-z])_([a-z])")
_FLAG_SUFFIX = re.compile(r"^(.+)_flag$")


def to_snake(token):
    """Convert a camelCase or PascalCase name to snake_case.

    Names which are already in snake_case are returned unchanged.

    Example
    -------

    >>> to_snake('itemName')
    'item_name'
    >>> to_snake('shopURL')
    'shop_url'
    """
    return _CASE_BOUNDARY.sub(r"\1_\2", token).lower()


def to_camel(token):
    """Convert a snake_case name to camelCase.

    Only underscores between two lowercase letters are removed,
    anything else passes through unchanged.

    Example
    -------

    >>> to_camel('item_code')
    'itemCode'
    """
    return _UNDERSCORED.sub(
        lambda match: match.group(1) + match.group(2).upper(), token
    )


def accessor_name(resource_name, raw_name):
    """The python attribute name under which a raw field is exposed.

    Parameters
    ----------
    resource_name: str
        the lowercase resource name, stripped when it prefixes the field
    raw_name: str
        the field name as returned by the API

    Returns
    -------
    str
        the snake_case accessor name

    Example
    -------

    >>> accessor_name('item', 'itemName')
    'name'
    >>> accessor_name('item', 'shopName')
    'shop_name'
    """
    name = to_snake(raw_name)
    prefix = resource_name + "_"
    if name.startswith(prefix) and len(name) > len(prefix):
        return name[len(prefix) :]
    return name


def predicate_name(resource_name, raw_name):
    """The name of the boolean accessor for a ``...Flag`` field.

    Example
    -------

    >>> predicate_name('item', 'itemAvailableFlag')
    'is_available'
    """
    name = _FLAG_SUFFIX.sub(r"\1", accessor_name(resource_name, raw_name))
    return "is_" + name
