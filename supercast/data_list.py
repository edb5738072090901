"""One page of a paginated API collection."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any

from supercast import util
from supercast.data_object import DataObject
from supercast.errors import UsageError
from supercast.operations import Request
from supercast.registry import register

logger = logging.getLogger(__name__)


@register
class DataList(Request, DataObject):
    """A fetched page: ``data`` items plus ``page``, ``per_page``, ``total`` and ``url``.

    ``filters`` holds the query parameters the page was requested with (minus
    ``page``) so that ``next_page`` and ``previous_page`` replay them. Every
    fetch returns a new ``DataList``; an existing page is never modified.

    Iterating a ``DataList`` walks the current page only; use
    :meth:`auto_paging_iter` to walk every page.
    """

    OBJECT_NAME = "list"

    def __init__(self, id: Any = None, context: Any = None) -> None:
        super().__init__(id, context)
        self._filters: dict[str, Any] = {}

    @property
    def filters(self) -> dict[str, Any]:
        return self._filters

    @filters.setter
    def filters(self, value: Mapping[str, Any]) -> None:
        self._filters = {k: v for k, v in value.items() if k != "page"}

    @property
    def data(self) -> tuple[Any, ...]:
        return tuple(self._values.get("data") or ())

    @classmethod
    def empty_list(cls, context: Any = None) -> DataList:
        """Return a list with no items and no pagination fields.

        This is what paging past either end yields, matching the API's own
        response for a page beyond the last.
        """
        return DataList.construct_from({"data": []}, context)

    @classmethod
    def from_response(
        cls,
        payload: Mapping[str, Any],
        context: Any,
        params: Mapping[str, Any],
        url: str,
    ) -> DataList:
        """Materialize a list response and attach the filters it was fetched with."""
        values = dict(payload)
        values.setdefault("url", url)
        page = DataList.construct_from(values, context)
        page.filters = params
        return page

    def __getitem__(self, key: str) -> Any:
        if not isinstance(key, str):
            raise UsageError(
                f"You tried to access the {key!r} index, but DataList types only "
                "support string keys. (HINT: List calls return an object with a "
                "'data' (which is the data array). You likely want to call "
                f".data[{key!r}])"
            )
        return super().__getitem__(key)

    def __setitem__(self, key: str, value: Any) -> None:
        raise UsageError(f"DataList pages are read-only; cannot set {key!r}.")

    def __delitem__(self, key: str) -> None:
        raise UsageError(f"DataList pages are read-only; cannot delete {key!r}.")

    def __iter__(self) -> Iterator[Any]:
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def is_empty(self) -> bool:
        return not self.data

    @property
    def empty(self) -> bool:
        return self.is_empty()

    def auto_paging_iter(self) -> Iterator[Any]:
        """Yield every item of this page and the pages after it.

        The next page is fetched only once the current one is exhausted, and
        iteration stops at the first empty page. Stopping early issues no
        further requests.
        """
        page = self
        while True:
            yield from page
            page = page.next_page()
            if page.is_empty():
                break

    def _page_size(self) -> Any:
        per_page = self.get("per_page")
        return per_page if per_page is not None else self.get("page_size")

    def has_next_page(self) -> bool:
        page, per_page, total = self.get("page"), self._page_size(), self.get("total")
        if page is None or per_page is None or total is None:
            return False
        try:
            return page * per_page < total
        except TypeError:
            return False

    def has_previous_page(self) -> bool:
        page = self.get("page")
        try:
            return page is not None and page > 1
        except TypeError:
            return False

    def next_page(self, params: Mapping[str, Any] | None = None, context: Any = None) -> DataList:
        """Fetch the page after this one, or return an empty list past the last page."""
        if not self.has_next_page():
            return self.empty_list(self._context.merge(util.normalize_context(context)))

        params = {**self.filters, "page": self["page"] + 1, **(params or {})}
        return self.list(params, context)

    def previous_page(
        self, params: Mapping[str, Any] | None = None, context: Any = None
    ) -> DataList:
        """Fetch the page before this one, or return an empty list on the first page."""
        if not self.has_previous_page():
            return self.empty_list(self._context.merge(util.normalize_context(context)))

        params = {**self.filters, "page": self["page"] - 1, **(params or {})}
        return self.list(params, context)

    def list(self, params: Mapping[str, Any] | None = None, context: Any = None) -> DataList:
        """Fetch a page of this collection with ``params`` as query parameters."""
        params = dict(params or {})
        url = self.resource_url()
        logger.debug(f"Fetching list page {params.get('page', 1)} from {url}")
        resp, ctx = self.request("get", url, params, context)
        return DataList.from_response(resp, ctx, params, url)

    def retrieve(self, id: Any, context: Any = None) -> Any:
        """Fetch a single member of this collection by id."""
        id, retrieve_params = util.normalize_id(id)
        url = util.member_url(self.resource_url(), id, "List member")
        resp, ctx = self.request("get", url, retrieve_params, context)
        return util.convert_to_supercast_object(resp, ctx)

    def create(self, params: Mapping[str, Any] | None = None, context: Any = None) -> Any:
        """Create a new member of this collection."""
        resp, ctx = self.request("post", self.resource_url(), params, context)
        return util.convert_to_supercast_object(resp, ctx)

    def resource_url(self) -> str:
        url = self.get("url")
        if not url:
            raise UsageError("List object does not contain a 'url' field.")
        return url
