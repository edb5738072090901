"""Generic field container every materialized object is built on."""

from __future__ import annotations

import json
from collections.abc import Iterator, Mapping
from typing import Any

from supercast import util
from supercast.context import RequestContext
from supercast.registry import TypeRegistry


class DataObject:
    """Ordered bag of fields decoded from an API response.

    Fields are reachable by item (``obj["title"]``) and attribute
    (``obj.title``) access. The request context the object was fetched with
    travels with it and with every object nested inside it.
    """

    OBJECT_NAME: str | None = None

    def __init__(self, id: Any = None, context: Any = None) -> None:
        self._values: dict[str, Any] = {}
        self._unsaved: set[str] = set()
        self._context = util.normalize_context(context)
        id, self._retrieve_params = util.normalize_id(id)
        if id is not None:
            self._values["id"] = id

    @classmethod
    def construct_from(
        cls,
        values: Mapping[str, Any],
        context: Any = None,
        registry: TypeRegistry | None = None,
    ) -> DataObject:
        """Build an instance of ``cls`` from a raw mapping."""
        instance = cls(values.get("id"), context=context)
        instance.refresh_from(values, context, registry=registry)
        return instance

    def refresh_from(
        self,
        values: Mapping[str, Any],
        context: Any = None,
        partial: bool = False,
        registry: TypeRegistry | None = None,
    ) -> None:
        """Replace this object's fields with ``values``, materializing nested data.

        With ``partial`` the fields missing from ``values`` are kept.
        """
        if context is not None:
            self._context = util.normalize_context(context)

        if not partial:
            self._values.clear()
        for key, value in values.items():
            self._values[key] = util.convert_to_supercast_object(value, self._context, registry)
        self._unsaved.clear()

    @property
    def request_context(self) -> RequestContext:
        return self._context

    # ------------------------------------------------------------------
    # Field access
    # ------------------------------------------------------------------
    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._values[name]
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__} object has no attribute {name!r}"
            ) from None

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith("_") or hasattr(type(self), name):
            super().__setattr__(name, value)
        else:
            self[name] = value

    def __delattr__(self, name: str) -> None:
        if name.startswith("_") or hasattr(type(self), name):
            super().__delattr__(name)
        else:
            del self[name]

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __setitem__(self, key: str, value: Any) -> None:
        if isinstance(value, str) and value == "":
            raise ValueError(
                f"You cannot set {key} to an empty string. "
                f"We interpret empty strings as None in requests. "
                f"You may set obj.{key} = None to delete the property"
            )
        self._values[key] = value
        self._unsaved.add(key)

    def __delitem__(self, key: str) -> None:
        del self._values[key]
        self._unsaved.discard(key)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[Any]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DataObject) or type(other) is not type(self):
            return NotImplemented
        return self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def keys(self):
        return self._values.keys()

    def values(self):
        return self._values.values()

    def items(self):
        return self._values.items()

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------
    def to_dict(self) -> dict[str, Any]:
        """Return the fields as plain dicts and lists, recursively."""
        return {key: _plain(value) for key, value in self._values.items()}

    def serialize_params(self) -> dict[str, Any]:
        """Return the fields assigned since the last refresh."""
        return {key: _plain(self._values[key]) for key in self._unsaved if key in self._values}

    def __repr__(self) -> str:
        ident = [type(self).__name__]
        tag = self._values.get("object")
        if isinstance(tag, str):
            ident.append(tag)
        if isinstance(self._values.get("id"), (str, int)):
            ident.append(f"id={self._values['id']}")
        return f"<{' '.join(ident)} at {hex(id(self))}> JSON: {self}"

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), sort_keys=True, indent=2, default=str)


def _plain(value: Any) -> Any:
    if isinstance(value, DataObject):
        return value.to_dict()
    if isinstance(value, list):
        return [_plain(item) for item in value]
    return value
