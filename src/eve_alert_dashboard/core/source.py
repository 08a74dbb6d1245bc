"""Raw text acquisition for EVE logs.

A source is either an http(s) URL or a local path (plain text or .gz).
Every transport failure surfaces as `SourceUnavailable`.
"""

from __future__ import annotations

import gzip
from contextlib import asynccontextmanager
from pathlib import Path

import aiofiles
import httpx
from aiofiles.threadpool import wrap

from .settings import DEFAULT_HTTP_TIMEOUT

TEXT_ENCODING = "utf-8"
TEXT_ERRORS = "replace"


class DashboardError(Exception):
    """Base class for dashboard errors."""


class SourceUnavailable(DashboardError):
    """The raw log text could not be obtained."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"{source}: {reason}")
        self.source = source
        self.reason = reason


def is_url(source: str | Path) -> bool:
    return isinstance(source, str) and source.lower().startswith(("http://", "https://"))


@asynccontextmanager
async def _open_text(path: Path):
    """Open a log file for async text reading (plain or gzip)."""
    if path.suffix.lower() == ".gz":
        f = gzip.open(path, mode="rt", encoding=TEXT_ENCODING, errors=TEXT_ERRORS)
        af = wrap(f)
        try:
            yield af
        finally:
            await af.close()
    else:
        async with aiofiles.open(path, encoding=TEXT_ENCODING, errors=TEXT_ERRORS) as f:
            yield f


async def read_file_text(path: str | Path) -> str:
    p = Path(path)
    try:
        if not p.is_file():
            raise SourceUnavailable(str(p), "file not found")
        async with _open_text(p) as f:
            return await f.read()
    except (OSError, EOFError) as e:
        # gzip reports truncated archives as EOFError.
        raise SourceUnavailable(str(p), str(e) or type(e).__name__) from e


async def fetch_url_text(
    url: str,
    *,
    timeout: float = DEFAULT_HTTP_TIMEOUT,
    client: httpx.AsyncClient | None = None,
) -> str:
    """GET a URL and return its body; non-2xx responses are failures."""

    async def _get(c: httpx.AsyncClient) -> str:
        resp = await c.get(url)
        resp.raise_for_status()
        return resp.text

    try:
        if client is not None:
            return await _get(client)
        async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as c:
            return await _get(c)
    except httpx.HTTPStatusError as e:
        raise SourceUnavailable(url, f"HTTP {e.response.status_code}") from e
    except (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError) as e:
        raise SourceUnavailable(url, str(e) or type(e).__name__) from e


async def fetch_raw_text(
    source: str | Path,
    *,
    timeout: float | None = None,
    client: httpx.AsyncClient | None = None,
) -> str:
    """Return the full text of an EVE log or raise SourceUnavailable."""
    if is_url(source):
        return await fetch_url_text(
            str(source),
            timeout=DEFAULT_HTTP_TIMEOUT if timeout is None else timeout,
            client=client,
        )
    return await read_file_text(source)
