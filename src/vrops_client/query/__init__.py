"""Query string helpers for resource queries"""

from .params import KeyValuePair, RelationKind, ResourceFilter, collect_params, stringify
from .query_string import append_query, build_url

__all__ = [
    "KeyValuePair",
    "RelationKind",
    "ResourceFilter",
    "collect_params",
    "stringify",
    "append_query",
    "build_url",
]
