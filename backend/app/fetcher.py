from __future__ import annotations

from urllib.parse import urlparse

import httpx

from .config import FETCH_MAX_BYTES, FETCH_TIMEOUT_S
from .logging_utils import get_logger

log = get_logger(__name__)


class FetchError(RuntimeError):
    pass


_HEADERS = {
    "user-agent": "cv-render-gateway/0.1 (+https://github.com/RubenCiveira)",
    "accept": "text/plain,text/markdown;q=0.9,*/*;q=0.1",
}


def _is_http_url(url: str) -> bool:
    try:
        u = urlparse(url)
    except Exception:
        return False
    return u.scheme in ("http", "https") and bool(u.netloc)


async def _read_limited(resp: httpx.Response, max_bytes: int) -> tuple[bytes, bool]:
    if max_bytes <= 0:
        raise FetchError("max_bytes must be > 0")
    buf = bytearray()
    truncated = False
    async for chunk in resp.aiter_bytes():
        if not chunk:
            continue
        remaining = max_bytes - len(buf)
        if remaining <= 0:
            truncated = True
            break
        if len(chunk) > remaining:
            buf.extend(chunk[:remaining])
            truncated = True
            break
        buf.extend(chunk)
    return bytes(buf), truncated


async def fetch_markdown(
    url: str,
    *,
    timeout_s: float = FETCH_TIMEOUT_S,
    max_bytes: int = FETCH_MAX_BYTES,
    transport: httpx.AsyncBaseTransport | None = None,
) -> str:
    """Download a raw text document and return it decoded.

    Any non-2xx status, timeout or transport failure raises FetchError. There is
    no retry: a failed fetch fails the request that triggered it.
    """
    if not isinstance(url, str) or not url.strip() or not _is_http_url(url):
        raise FetchError("url must be a valid http/https URL")

    async with httpx.AsyncClient(
        follow_redirects=True,
        timeout=httpx.Timeout(timeout_s),
        transport=transport,
    ) as client:
        try:
            async with client.stream("GET", url, headers=_HEADERS) as resp:
                status = int(resp.status_code)
                if status < 200 or status >= 300:
                    body, _ = await _read_limited(resp, 2_000)
                    msg = body.decode("utf-8", errors="replace").strip()
                    raise FetchError(f"Fetch failed ({status}) for {url}: {msg[:400]}")

                data, truncated = await _read_limited(resp, max_bytes=max_bytes)
                if truncated:
                    raise FetchError(f"Document at {url} exceeds {max_bytes} bytes")
                encoding = resp.encoding or "utf-8"
        except (httpx.TimeoutException, httpx.HTTPError) as e:
            raise FetchError(f"Fetch failed: {type(e).__name__}: {e}") from e

    log.debug("Fetched %s (%d bytes)", url, len(data))
    return data.decode(encoding, errors="replace")
