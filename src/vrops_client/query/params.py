"""
Filter collection for resource queries.

Turns an explicit set of named filters into an ordered list of key/value
pairs. A filter bound to a sequence contributes one pair per element, so the
same key can repeat; the API reads repeated keys as a logical OR.
"""

from __future__ import annotations
from enum import Enum
from typing import Any, Dict, List, Mapping, NamedTuple, Optional, Sequence, Union
from pydantic import BaseModel, Field, field_validator


Scalar = Union[str, int, float, bool, Enum]
FilterValue = Union[None, Scalar, Sequence[Scalar]]


class KeyValuePair(NamedTuple):
    """A single ``key=value`` query segment."""

    key: str
    value: str


class RelationKind(str, Enum):
    """Relation modifier accepted by ``includeRelated``."""

    PARENT = "PARENT"
    CHILD = "CHILD"


def stringify(value: Any) -> str:
    """Render a filter value as it appears on the wire."""
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if _is_sequence(value):
        return len(value) == 0
    return False


def collect_params(param_names: Sequence[str], bindings: Mapping[str, FilterValue]) -> List[KeyValuePair]:
    """
    Collect query pairs for the given filter names.

    Names are processed in the order given. Names missing from ``bindings``,
    bound to None or bound to an empty value contribute nothing. A sequence
    yields one pair per element, in element order.

    Args:
        param_names: Recognized filter names, in output order
        bindings: Current value for each name

    Returns:
        Ordered list of KeyValuePair
    """
    pairs: List[KeyValuePair] = []
    for name in param_names:
        value = bindings.get(name)
        if _is_empty(value):
            continue
        if _is_sequence(value):
            for element in value:
                if element is None:
                    continue
                pairs.append(KeyValuePair(name, stringify(element)))
        else:
            pairs.append(KeyValuePair(name, stringify(value)))
    return pairs


class ResourceFilter(BaseModel):
    """
    Filters accepted by the resource listing endpoint.

    Every filter except ``includeRelated`` may carry several values.
    """
    name: Optional[List[str]] = Field(default=None, description="Resource names")
    regex: Optional[List[str]] = Field(default=None, description="Regular expressions matched against resource names")
    resource_kind: Optional[List[str]] = Field(default=None, alias="resourceKind", description="Resource kind keys")
    adapter_kind: Optional[List[str]] = Field(default=None, alias="adapterKind", description="Adapter kind keys")
    include_related: Optional[RelationKind] = Field(
        default=None,
        alias="includeRelated",
        description="Also return identifiers of PARENT or CHILD relations"
    )
    resource_id: Optional[List[str]] = Field(default=None, alias="resourceId", description="Resource identifiers")

    model_config = {"populate_by_name": True}

    @field_validator("name", "regex", "resource_kind", "adapter_kind", "resource_id", mode="before")
    @classmethod
    def _render_values(cls, value):
        if value is None:
            return None
        if not _is_sequence(value):
            value = [value]
        return [stringify(element) for element in value if element is not None]

    @field_validator("include_related", mode="before")
    @classmethod
    def _normalize_relation(cls, value):
        if isinstance(value, str):
            return value.upper()
        return value

    @staticmethod
    def filter_names() -> List[str]:
        """Wire names of the filters, in query string order."""
        return ["name", "regex", "resourceKind", "adapterKind", "includeRelated", "resourceId"]

    def bindings(self) -> Dict[str, FilterValue]:
        """Explicit name-to-value mapping keyed by wire name."""
        return {
            "name": self.name,
            "regex": self.regex,
            "resourceKind": self.resource_kind,
            "adapterKind": self.adapter_kind,
            "includeRelated": self.include_related,
            "resourceId": self.resource_id,
        }

    def to_pairs(self) -> List[KeyValuePair]:
        """Collect the populated filters as query pairs."""
        return collect_params(self.filter_names(), self.bindings())
