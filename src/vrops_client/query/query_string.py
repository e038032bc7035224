"""
Query string construction.

Values are inserted verbatim unless ``encode=True`` is passed. Raw insertion
keeps the exact wire form callers supply, which means a value containing
``&``, ``=`` or ``#`` will split into extra parameters. Pass ``encode=True``
to percent-encode keys and values instead.
"""

from __future__ import annotations
from typing import Iterable, Optional
from urllib.parse import quote

from .params import KeyValuePair


def _render(pair: KeyValuePair, encode: bool) -> str:
    key, value = pair
    if encode:
        key = quote(key, safe="")
        value = quote(value, safe="")
    return f"{key}={value}"


def append_query(existing: Optional[str], pairs: Iterable[KeyValuePair], *, encode: bool = False) -> str:
    """
    Append pairs to a query string.

    The result starts with ``?``. The first pair after a bare ``?`` has no
    separator; every other pair is joined with ``&``. Successive calls
    compose: appending ``a`` then ``b`` equals appending ``a + b`` once.

    Args:
        existing: Current query string, possibly empty or None
        pairs: Pairs to append, in order
        encode: Percent-encode keys and values

    Returns:
        The extended query string
    """
    result = existing or "?"
    for pair in pairs:
        if result != "?":
            result += "&"
        result += _render(pair, encode)
    return result


def build_url(base: str, path: str, pairs: Iterable[KeyValuePair], *, encode: bool = False) -> str:
    """
    Join an origin, an endpoint path and the query built from ``pairs``.

    A query with no pairs is dropped entirely rather than leaving a bare
    ``?`` on the URL.
    """
    query = append_query("", pairs, encode=encode)
    url = base.rstrip("/") + "/" + path.lstrip("/")
    if query == "?":
        return url
    return url + query
