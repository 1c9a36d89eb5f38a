"""Request URL construction with repeated-key query encoding."""

from enum import Enum
from typing import Any, List, Mapping, Tuple, Union
from urllib.parse import quote, urlencode


def _query_value(value: Any) -> str:
    """Render a single query value the way Fortnite-API expects it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def query_pairs(params: Mapping[str, Any]) -> List[Tuple[str, str]]:
    """
    Flatten parameters into ``(key, value)`` pairs.

    Entries keep insertion order. A list or tuple value yields one pair per
    element, in element order, all sharing the same key.
    """
    pairs: List[Tuple[str, str]] = []
    for key, value in params.items():
        if isinstance(value, (list, tuple)):
            pairs.extend((key, _query_value(item)) for item in value)
        else:
            pairs.append((key, _query_value(value)))
    return pairs


def build_url(endpoint: Union[str, Enum], params: Mapping[str, Any]) -> str:
    """
    Build a request URL from an endpoint and query parameters.

    Args:
        endpoint: Endpoint URL, already path-substituted
        params: Query parameters; array values use repeated-key encoding

    Returns:
        ``endpoint`` unchanged when ``params`` is empty, otherwise
        ``endpoint?key=value&...`` with percent-encoded keys and values
    """
    url = endpoint.value if isinstance(endpoint, Enum) else endpoint
    if not params:
        return url
    return f"{url}?{urlencode(query_pairs(params), quote_via=quote)}"
