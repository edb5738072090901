"""Request context carried by every materialized object."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from supercast.errors import UsageError


@dataclass(frozen=True)
class RequestContext:
    """Credentials and request options attached to fetched objects.

    Objects built from a response keep the context they were fetched with so
    that follow-up calls (``refresh``, ``next_page``, ...) reuse the same
    API key and base URL.
    """

    api_key: str | None = None
    api_base: str | None = None
    headers: Mapping[str, str] = field(default_factory=dict)

    def merge(self, other: RequestContext | None) -> RequestContext:
        """Return a new context where values set on ``other`` win."""
        if other is None:
            return self
        return RequestContext(
            api_key=other.api_key or self.api_key,
            api_base=other.api_base or self.api_base,
            headers={**self.headers, **other.headers},
        )

    @classmethod
    def coerce(cls, value: Any) -> RequestContext:
        """Build a context from ``None``, an API key string, a mapping or a context."""
        if value is None:
            return cls()
        if isinstance(value, RequestContext):
            return value
        if isinstance(value, str):
            return cls(api_key=value)
        if isinstance(value, Mapping):
            unknown = set(value) - {"api_key", "api_base", "headers"}
            if unknown:
                raise UsageError(f"Unknown request options: {', '.join(sorted(unknown))}")
            return cls(
                api_key=value.get("api_key"),
                api_base=value.get("api_base"),
                headers=dict(value.get("headers") or {}),
            )
        raise UsageError(
            f"Request context must be a string API key or a mapping, got {type(value).__name__}"
        )
