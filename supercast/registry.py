"""Registry mapping API type tags to the classes that materialize them."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from supercast.errors import UsageError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=type)


class TypeRegistry:
    """Resolves the ``object`` tag of an API payload to a concrete class.

    Resolution is a plain dict lookup. Unknown tags resolve to ``default`` so
    payloads of types this client does not know yet still materialize.

    Examples:
        >>> registry = TypeRegistry()
        >>> _ = registry.register(Episode)
        >>> registry.resolve("episode")
        <class 'supercast.resources.episode.Episode'>
    """

    def __init__(self, types: Mapping[str, type] | None = None) -> None:
        self._types: dict[str, type] = dict(types or {})

    def register(self, cls: T, tag: str | None = None) -> T:
        """Register ``cls`` under ``tag`` (defaults to ``cls.OBJECT_NAME``).

        Raises:
            UsageError: If no tag is available or the tag already maps to another class
        """
        tag = tag or getattr(cls, "OBJECT_NAME", None)
        if not tag:
            raise UsageError(f"{cls.__name__} does not declare an OBJECT_NAME to register under")

        existing = self._types.get(tag)
        if existing is not None and existing is not cls:
            raise UsageError(
                f"Type tag '{tag}' is already registered to {existing.__name__}, "
                f"cannot register {cls.__name__}"
            )

        self._types[tag] = cls
        logger.debug(f"Registered type tag '{tag}' -> {cls.__name__}")
        return cls

    def resolve(self, tag: Any, default: type | None = None) -> type | None:
        if not isinstance(tag, str):
            return default
        return self._types.get(tag, default)

    def list_tags(self) -> list[str]:
        return list(self._types)

    def __contains__(self, tag: object) -> bool:
        return tag in self._types


_default_registry: TypeRegistry | None = None


def get_default_registry() -> TypeRegistry:
    """Get the process-wide registry that resource classes register into."""
    global _default_registry
    if _default_registry is None:
        _default_registry = TypeRegistry()
    return _default_registry


def register(cls: T) -> T:
    """Class decorator adding ``cls`` to the default registry by its ``OBJECT_NAME``."""
    return get_default_registry().register(cls)
