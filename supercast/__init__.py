"""Python client for the Supercast API.

This package provides:
- A registry resolving API ``object`` tags to resource classes
- Recursive materialization of API responses into typed objects
- Paginated lists with page-by-page and auto-paging iteration
- A thin HTTP requestor with retries and API-key auth from environment/.env
"""

from supercast.api_requestor import APIRequestor, get_default_requestor, set_default_requestor
from supercast.context import RequestContext
from supercast.data_list import DataList
from supercast.data_object import DataObject
from supercast.errors import (
    APIConnectionError,
    APIError,
    AuthenticationError,
    InvalidRequestError,
    PermissionDeniedError,
    RateLimitError,
    RequestError,
    SupercastError,
    UsageError,
)
from supercast.registry import TypeRegistry, get_default_registry, register
from supercast.resource import CustomMethod, Resource, custom_method
from supercast.resources import Channel, Creator, Episode, Invite, Subscriber
from supercast.util import convert_to_supercast_object

__version__ = "0.1.0"

__all__ = [
    # Core
    "DataObject",
    "DataList",
    "Resource",
    "CustomMethod",
    "custom_method",
    "convert_to_supercast_object",
    "RequestContext",
    # Registry
    "TypeRegistry",
    "get_default_registry",
    "register",
    # Transport
    "APIRequestor",
    "get_default_requestor",
    "set_default_requestor",
    # Resources
    "Channel",
    "Creator",
    "Episode",
    "Invite",
    "Subscriber",
    # Errors
    "SupercastError",
    "UsageError",
    "RequestError",
    "APIError",
    "APIConnectionError",
    "AuthenticationError",
    "PermissionDeniedError",
    "RateLimitError",
    "InvalidRequestError",
]
