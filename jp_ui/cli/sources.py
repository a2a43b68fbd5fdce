"""Option loaders for the CLI: JSON files and portal URLs."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any, Mapping

from jp_common.errors import OptionLoadError, wrap_error
from jp_select.loaders import http_loader
from jp_select.models import Option
from jp_select.normalize import Err, coerce_option, normalize_response, records_to_options, user_to_option


def record_to_option(record: Mapping[str, Any]) -> Option | None:
    """Accept ``{id, label}`` records as well as portal user records."""
    return coerce_option(record) or user_to_option(record)


def file_loader(path: Path):
    async def _load() -> list[Option]:
        try:
            text = await asyncio.to_thread(path.read_text, encoding="utf-8")
        except OSError as exc:
            raise OptionLoadError(
                f"Cannot read {path}: {exc.strerror or exc}",
                context={"path": path},
                cause=exc,
            ) from exc
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as exc:
            raise OptionLoadError(
                f"{path} is not valid JSON", context={"path": path}, cause=exc
            ) from exc
        result = normalize_response(payload)
        if isinstance(result, Err):
            raise wrap_error(OptionLoadError, result.reason, context={"path": path})
        return records_to_options(result.value, record_to_option)

    return _load


def build_loader(source: str, *, token: str | None = None, timeout_seconds: float = 10.0):
    """Pick the loader for ``source``: http(s) URLs hit the API, anything else is a file."""
    if source.startswith(("http://", "https://")):
        return http_loader(
            source,
            token=token,
            mapper=record_to_option,
            timeout_seconds=timeout_seconds,
        )
    return file_loader(Path(source).expanduser())
