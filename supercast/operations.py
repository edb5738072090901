"""Request plumbing and CRUD mixins shared by resources and lists."""

from __future__ import annotations

from collections.abc import Mapping
from functools import partial
from typing import Any

from supercast import util
from supercast.api_requestor import get_default_requestor
from supercast.context import RequestContext


def execute_request(
    verb: str,
    url: str,
    params: Mapping[str, Any] | None = None,
    context: Any = None,
) -> tuple[Any, RequestContext]:
    """Send one request through the default requestor."""
    return get_default_requestor().execute(verb, url, params or {}, util.normalize_context(context))


class Request:
    """Gives a class ``request`` helpers that honour the object's own context."""

    @classmethod
    def _static_request(
        cls,
        verb: str,
        url: str,
        params: Mapping[str, Any] | None = None,
        context: Any = None,
    ) -> tuple[Any, RequestContext]:
        return execute_request(verb, url, params, context)

    def request(
        self,
        verb: str,
        url: str,
        params: Mapping[str, Any] | None = None,
        context: Any = None,
    ) -> tuple[Any, RequestContext]:
        merged = self._context.merge(util.normalize_context(context))
        return execute_request(verb, url, params, merged)


class ListableResource(Request):
    @classmethod
    def list(cls, params: Mapping[str, Any] | None = None, context: Any = None):
        """Fetch one page of the collection; the result remembers ``params`` as filters."""
        from supercast.data_list import DataList

        params = dict(params or {})
        url = cls.class_url()
        resp, ctx = cls._static_request("get", url, params, context)
        return DataList.from_response(resp, ctx, params, url)


class CreatableResource(Request):
    @classmethod
    def create(cls, params: Mapping[str, Any] | None = None, context: Any = None):
        resp, ctx = cls._static_request("post", cls.class_url(), params, context)
        return util.convert_to_supercast_object(resp, ctx)


class UpdatableResource(Request):
    @classmethod
    def update(cls, id: Any, params: Mapping[str, Any] | None = None, context: Any = None):
        url = util.member_url(cls.class_url(), id, cls.__name__)
        resp, ctx = cls._static_request("patch", url, params, context)
        return util.convert_to_supercast_object(resp, ctx)

    def save(self, context: Any = None):
        """PATCH the fields assigned since the last refresh and reload from the reply."""
        params = self.serialize_params()
        resp, ctx = self.request("patch", self.resource_url(), params, context)
        self.refresh_from(resp, ctx)
        return self


class _ClassOrInstanceMethod:
    """Binds ``class_impl`` when looked up on the class and ``instance_impl`` on an instance."""

    def __init__(self, class_impl, instance_impl):
        self.class_impl = class_impl
        self.instance_impl = instance_impl

    def __get__(self, obj, owner):
        if obj is None:
            return partial(self.class_impl, owner)
        return partial(self.instance_impl, obj)


class DeletableResource(Request):
    def _delete_by_id(cls, id: Any, params: Mapping[str, Any] | None = None, context: Any = None):
        url = util.member_url(cls.class_url(), id, cls.__name__)
        resp, ctx = cls._static_request("delete", url, params, context)
        return util.convert_to_supercast_object(resp, ctx)

    def _delete_self(self, params: Mapping[str, Any] | None = None, context: Any = None):
        resp, ctx = self.request("delete", self.resource_url(), params, context)
        self.refresh_from(resp, ctx)
        return self

    # Episode.delete(42) and episode.delete() both work.
    delete = _ClassOrInstanceMethod(_delete_by_id, _delete_self)
