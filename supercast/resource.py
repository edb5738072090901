"""Base class for addressable API resources."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from functools import partial
from typing import Any, ClassVar, TypeVar

from supercast import util
from supercast.api_requestor import HTTP_VERBS
from supercast.data_object import DataObject
from supercast.errors import UsageError
from supercast.operations import Request

R = TypeVar("R", bound=type)


@dataclass(frozen=True)
class CustomMethod:
    """A non-CRUD action exposed as ``Resource.<name>(id, params, context)``.

    Instances live both in the owning class' ``_custom_methods`` table and as
    class attributes, where attribute access returns a bound invoker.
    """

    name: str
    http_verb: str
    http_path: str

    def __get__(self, instance: Any, owner: type[Resource]) -> Callable[..., Any]:
        return partial(owner.call_custom_method, self.name)


def custom_method(name: str, http_verb: str, http_path: str | None = None) -> Callable[[R], R]:
    """Class decorator registering a custom API action on a resource class.

    For example::

        @custom_method("suspend", http_verb="post")
        class Subscriber(Resource): ...

    makes ``Subscriber.suspend(id)`` send ``POST /subscribers/<id>/suspend``.

    Raises:
        UsageError: If ``http_verb`` is not one of get, patch, post or delete
    """
    verb = http_verb.lower() if isinstance(http_verb, str) else http_verb
    if verb not in HTTP_VERBS:
        raise UsageError(
            f"Invalid http_verb value: {http_verb!r}. Should be one of "
            "'get', 'patch', 'post' or 'delete'."
        )
    method = CustomMethod(name=name, http_verb=verb, http_path=http_path or name)

    def decorator(cls: R) -> R:
        cls._custom_methods = {**cls._custom_methods, name: method}
        setattr(cls, name, method)
        return cls

    return decorator


class Resource(Request, DataObject):
    """A remote object addressable at ``/<object_name>s/<id>``.

    Subclasses set ``OBJECT_NAME`` to the API type tag and register themselves
    with :func:`supercast.registry.register`.
    """

    _custom_methods: ClassVar[dict[str, CustomMethod]] = {}

    @classmethod
    def class_name(cls) -> str:
        return cls.__name__

    @classmethod
    def object_name(cls) -> str | None:
        return cls.OBJECT_NAME

    @classmethod
    def class_url(cls) -> str:
        if cls is Resource or not cls.OBJECT_NAME:
            raise UsageError(
                "Resource is an abstract class. You should perform actions "
                "on its subclasses (Episode, Creator, etc.)"
            )
        return f"/{cls.OBJECT_NAME.lower()}s"

    def resource_url(self) -> str:
        return util.member_url(self.class_url(), self.get("id"), f"{type(self).__name__} instance")

    @classmethod
    def retrieve(cls, id: Any, context: Any = None) -> Resource:
        """Fetch the resource ``id``; ``id`` may be ``{"id": ..., **params}``."""
        instance = cls(id, context=context)
        instance.refresh()
        return instance

    def refresh(self) -> Resource:
        """Reload this instance's fields from the API in place."""
        resp, ctx = self.request("get", self.resource_url(), self._retrieve_params)
        self.refresh_from(resp, ctx)
        return self

    @classmethod
    def call_custom_method(
        cls,
        name: str,
        id: Any,
        params: Mapping[str, Any] | None = None,
        context: Any = None,
    ) -> Any:
        """Invoke the custom method ``name`` registered with :func:`custom_method`."""
        try:
            method = cls._custom_methods[name]
        except KeyError:
            raise UsageError(f"{cls.__name__} has no custom method {name!r}") from None

        member = util.member_url(cls.class_url(), id, cls.__name__)
        url = f"{member}/{util.quote_segment(method.http_path)}"
        resp, ctx = cls._static_request(method.http_verb, url, params, context)
        return util.convert_to_supercast_object(resp, ctx)
