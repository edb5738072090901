"""Materialization of raw API payloads and small request helpers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from supercast.context import RequestContext
from supercast.errors import InvalidRequestError
from supercast.registry import TypeRegistry, get_default_registry

if TYPE_CHECKING:
    from supercast.data_object import DataObject

TYPE_TAG_FIELD = "object"


def convert_to_supercast_object(
    value: Any,
    context: RequestContext | None = None,
    registry: TypeRegistry | None = None,
) -> Any:
    """Recursively turn a decoded JSON value into Supercast objects.

    Mappings become instances of the class registered for their ``object``
    tag, or a plain :class:`DataObject` when the tag is missing or unknown.
    Lists are rebuilt element by element in order; scalars pass through.
    """
    from supercast.data_object import DataObject

    if isinstance(value, (list, tuple)):
        return [convert_to_supercast_object(item, context, registry) for item in value]
    if isinstance(value, Mapping) and not isinstance(value, DataObject):
        registry = registry or get_default_registry()
        cls = registry.resolve(value.get(TYPE_TAG_FIELD), default=DataObject)
        return cls.construct_from(value, context, registry=registry)
    return value


def normalize_id(id: Any) -> tuple[Any, dict[str, Any]]:
    """Split ``{"id": ..., **params}`` into ``(id, params)``; scalars have no params."""
    if isinstance(id, Mapping):
        params = dict(id)
        return params.pop("id", None), params
    return id, {}


def normalize_context(context: Any) -> RequestContext:
    return RequestContext.coerce(context)


def quote_segment(value: Any) -> str:
    """Percent-encode ``value`` for use as a single URL path segment."""
    return quote(str(value), safe="")


def member_url(collection_url: str, id: Any, owner: str) -> str:
    """Return ``<collection_url>/<quoted id>`` for one member of a collection.

    Raises:
        InvalidRequestError: If ``id`` is missing or empty (``param`` is ``"id"``)
    """
    if id is None or id == "":
        raise InvalidRequestError(
            f"Could not determine which URL to request: {owner} has invalid ID: {id!r}",
            "id",
        )
    return f"{collection_url}/{quote_segment(id)}"


def encode_params(params: Mapping[str, Any]) -> dict[str, Any]:
    """Flatten nested query parameters into bracketed keys.

    ``{"filter": {"status": "published"}, "ids": [1, 2]}`` becomes
    ``{"filter[status]": "published", "ids[]": [1, 2]}``; ``requests`` repeats
    a key once per list element. Lists holding mappings or lists are indexed
    (``items[0][name]``).
    """
    flat: dict[str, Any] = {}
    for key, value in params.items():
        _flatten_param(str(key), value, flat)
    return flat


def _flatten_param(key: str, value: Any, out: dict[str, Any]) -> None:
    if isinstance(value, Mapping):
        for sub_key, sub_value in value.items():
            _flatten_param(f"{key}[{sub_key}]", sub_value, out)
    elif isinstance(value, (list, tuple)):
        if any(isinstance(item, (Mapping, list, tuple)) for item in value):
            for i, item in enumerate(value):
                _flatten_param(f"{key}[{i}]", item, out)
        else:
            out[f"{key}[]"] = list(value)
    else:
        out[key] = value
