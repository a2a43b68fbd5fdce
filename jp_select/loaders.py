"""Async option loaders backed by the portal REST API."""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Sequence
from urllib import error, parse, request

from jp_common.errors import ConfigurationError, OptionLoadError, ResponseShapeError
from jp_select.models import Option
from jp_select.normalize import (
    DEFAULT_LIST_KEYS,
    Err,
    RecordMapper,
    normalize_response,
    records_to_options,
    user_to_option,
)

logger = logging.getLogger(__name__)


def _validate_http_url(url: str) -> str:
    parsed = parse.urlparse(url)
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        raise ConfigurationError(f"Option source must be an http(s) URL, got: {url}", context={"url": url})
    return url


@dataclass
class JsonListFetcher:
    """GET a JSON document and return its record list."""

    url: str
    token: str | None = None
    timeout_seconds: float = 10.0
    list_keys: Sequence[str] = field(default=DEFAULT_LIST_KEYS)

    def __post_init__(self) -> None:
        self.url = _validate_http_url(self.url)

    def fetch(self) -> list[Any]:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        req = request.Request(self.url, headers=headers, method="GET")
        try:
            with request.urlopen(req, timeout=self.timeout_seconds) as resp:  # nosec B310
                body = resp.read().decode("utf-8")
        except error.HTTPError as exc:
            if exc.code == 401:
                raise OptionLoadError(
                    "Session expired. Please login again.",
                    context={"url": self.url, "status": exc.code},
                    cause=exc,
                ) from exc
            raise OptionLoadError(
                f"API error: {exc.code}",
                context={"url": self.url, "status": exc.code},
                cause=exc,
            ) from exc
        except error.URLError as exc:
            raise OptionLoadError(
                f"API request failed: {exc.reason}",
                context={"url": self.url},
                cause=exc,
            ) from exc

        try:
            payload = json.loads(body) if body else None
        except json.JSONDecodeError as exc:
            raise ResponseShapeError(
                "API returned invalid JSON", context={"url": self.url}, cause=exc
            ) from exc

        result = normalize_response(payload, self.list_keys)
        if isinstance(result, Err):
            raise ResponseShapeError(result.reason, context={"url": self.url})
        return result.value


def http_loader(
    url: str,
    *,
    token: str | None = None,
    mapper: RecordMapper = user_to_option,
    list_keys: Sequence[str] = DEFAULT_LIST_KEYS,
    timeout_seconds: float = 10.0,
):
    """Build an async loader for :class:`SearchableSelect` from a list endpoint.

    The blocking request runs in a worker thread. Any failure is raised and
    becomes the widget's unavailable state.
    """
    fetcher = JsonListFetcher(
        url=url,
        token=token,
        timeout_seconds=timeout_seconds,
        list_keys=list_keys,
    )

    async def _load() -> list[Option]:
        try:
            records = await asyncio.to_thread(fetcher.fetch)
        except ResponseShapeError as exc:
            raise OptionLoadError(str(exc), context=exc.context, cause=exc) from exc
        options = records_to_options(records, mapper)
        logger.debug("Fetched %d records, %d usable options from %s", len(records), len(options), url)
        return options

    return _load
