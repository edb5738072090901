"""HTTP transport: one blocking call per ``execute``."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from supercast import util
from supercast.auth import build_auth_headers, load_api_key
from supercast.context import RequestContext
from supercast.errors import (
    APIConnectionError,
    APIError,
    AuthenticationError,
    InvalidRequestError,
    PermissionDeniedError,
    RateLimitError,
    RequestError,
    UsageError,
)
from supercast.utils.config import ClientSettings, load_settings

logger = logging.getLogger(__name__)

HTTP_VERBS = ("get", "patch", "post", "delete")


def _session_with_retries(total: int = 3, backoff: float = 0.5) -> requests.Session:
    sess = requests.Session()
    retries = Retry(
        total=total,
        read=total,
        connect=total,
        backoff_factor=backoff,
        status_forcelist=(429, 500, 502, 503, 504),
        allowed_methods=("GET", "DELETE"),
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retries)
    sess.mount("http://", adapter)
    sess.mount("https://", adapter)
    return sess


class APIRequestor:
    """Performs Supercast API calls and turns failures into ``RequestError``.

    Holds a retrying ``requests.Session`` and the connection settings. It keeps
    no state about the objects it fetches.
    """

    def __init__(
        self,
        settings: ClientSettings | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.settings = settings or load_settings()
        self.session = session or _session_with_retries(
            self.settings.max_retries, self.settings.backoff
        )
        self._api_key: str | None = None

    @property
    def api_key(self) -> str:
        """The fallback API key for contexts that carry none, read from the environment once."""
        if self._api_key is None:
            self._api_key = load_api_key()
        return self._api_key

    def build_url(self, path: str, context: RequestContext) -> str:
        """Return the absolute URL for an API path such as ``/episodes/12``."""
        if path.startswith(("http://", "https://")):
            return path
        base = (context.api_base or self.settings.api_base).rstrip("/")
        prefix = f"/api/{self.settings.api_version}"
        if path.startswith(prefix + "/") or path == prefix:
            return f"{base}{path}"
        return f"{base}{prefix}{path}"

    def execute(
        self,
        verb: str,
        url: str,
        params: Mapping[str, Any] | None = None,
        context: RequestContext | None = None,
    ) -> tuple[Any, RequestContext]:
        """Issue one request and return ``(decoded JSON body, context used)``.

        GET and DELETE send ``params`` as the query string, with nested mappings
        and lists flattened into bracketed keys; PATCH and POST send them as a
        JSON body.
        """
        if verb not in HTTP_VERBS:
            raise UsageError(f"Invalid http verb {verb!r}. Should be one of {', '.join(HTTP_VERBS)}")

        context = context or RequestContext()
        api_key = context.api_key or self.api_key
        headers = {
            **build_auth_headers(api_key),
            "Accept": "application/json",
            **context.headers,
        }
        full_url = self.build_url(url, context)
        params = dict(params or {})

        logger.debug(f"Request {verb.upper()} {full_url} params={params}")
        try:
            if verb in ("get", "delete"):
                res = self.session.request(
                    verb.upper(),
                    full_url,
                    params=util.encode_params(params),
                    headers=headers,
                    timeout=self.settings.timeout,
                )
            else:
                res = self.session.request(
                    verb.upper(), full_url, json=params, headers=headers, timeout=self.settings.timeout
                )
        except requests.exceptions.RequestException as e:
            raise APIConnectionError(f"Could not connect to Supercast at {full_url}: {e}") from e

        payload = self._interpret_response(res)
        return payload, context.merge(RequestContext(api_key=api_key))

    def _interpret_response(self, res: requests.Response) -> Any:
        if res.status_code == 204:
            return {}
        try:
            payload = res.json()
        except ValueError:
            payload = None
            if 200 <= res.status_code < 300:
                raise APIError(
                    f"Invalid response body from API: {res.text!r}",
                    http_body=res.text,
                    http_status=res.status_code,
                ) from None

        if not 200 <= res.status_code < 300:
            error = _error_from_response(res.status_code, res.text, payload)
            logger.warning(f"API error {res.status_code}: {error.message}")
            raise error
        return payload


def _error_from_response(status: int, body: str, payload: Any) -> RequestError:
    message: str | None = None
    code: str | None = None
    param: str | None = None

    if isinstance(payload, Mapping):
        error = payload.get("error")
        if isinstance(error, Mapping):
            message = error.get("message")
            code = error.get("code")
            param = error.get("param")
        elif isinstance(error, str):
            message = error
        message = message or payload.get("message")
        code = code or payload.get("code")
        param = param or payload.get("param")

    message = message or f"Unexpected API response (status {status})"
    kwargs = {"http_body": body, "http_status": status, "json_body": payload, "code": code}

    if status in (400, 404, 422):
        return InvalidRequestError(message, param, **kwargs)
    if status == 401:
        return AuthenticationError(message, **kwargs)
    if status == 403:
        return PermissionDeniedError(message, **kwargs)
    if status == 429:
        return RateLimitError(message, **kwargs)
    return APIError(message, **kwargs)


_default_requestor: APIRequestor | None = None


def get_default_requestor() -> APIRequestor:
    """Get the process-wide requestor, creating it from settings on first use."""
    global _default_requestor
    if _default_requestor is None:
        _default_requestor = APIRequestor()
    return _default_requestor


def set_default_requestor(requestor: APIRequestor | None) -> None:
    """Replace the process-wide requestor (``None`` resets it)."""
    global _default_requestor
    _default_requestor = requestor
