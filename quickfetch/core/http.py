# quickfetch/core/http.py
from __future__ import annotations

from typing import Any

import httpx

from ..core.logging import get_logger
from ..core.settings import SETTINGS

log = get_logger(__name__)

DEFAULT_LIMITS = httpx.Limits(max_keepalive_connections=10, max_connections=20)


class ExternalServiceError(RuntimeError):
    def __init__(
        self,
        *,
        service: str,
        url: str,
        status: int | None = None,
        body_preview: str | None = None,
        detail: str | None = None,
    ) -> None:
        msg = f"{service} request failed status={status} url={url}"
        if detail:
            msg += f" detail={detail}"
        super().__init__(msg)
        self.service = service
        self.url = url
        self.status = status
        self.body_preview = body_preview
        self.detail = detail


def default_headers() -> dict[str, str]:
    return {"User-Agent": str(SETTINGS["http_user_agent"])}


def default_timeout() -> httpx.Timeout:
    return httpx.Timeout(float(SETTINGS["http_timeout_sec"]))


# a single shared async client (closed on app shutdown)
_async_client: httpx.AsyncClient | None = None


async def get_client() -> httpx.AsyncClient:
    global _async_client
    if _async_client is None:
        _async_client = httpx.AsyncClient(
            timeout=default_timeout(),
            limits=DEFAULT_LIMITS,
            follow_redirects=True,
        )
    return _async_client


async def close_client() -> None:
    global _async_client
    if _async_client is not None:
        await _async_client.aclose()
        _async_client = None


async def arequest_json(
    *,
    method: str,
    url: str,
    service: str,
    client: httpx.AsyncClient | None = None,
    headers: dict[str, str] | None = None,
    params: dict[str, Any] | None = None,
    json_body: Any = None,
    timeout: httpx.Timeout | None = None,
) -> Any:
    """Make an async request that:
    - sends the current User-Agent setting,
    - raises for non-2xx,
    - returns parsed JSON (any top-level type),
    - logs structured events,
    - throws ExternalServiceError on failure, including an unparseable body.
    """
    client = client or await get_client()
    try:
        resp = await client.request(
            method.upper(),
            url,
            headers={**default_headers(), **(headers or {})},
            params=params,
            json=json_body,
            timeout=timeout or default_timeout(),
        )
        resp.raise_for_status()
    except httpx.HTTPStatusError as e:
        body_preview = (e.response.text or "")[:400]
        log.warning(
            "http_status_error service=%s url=%s status=%s", service, url, e.response.status_code
        )
        raise ExternalServiceError(
            service=service,
            url=url,
            status=e.response.status_code,
            body_preview=body_preview,
            detail=str(e),
        ) from e

    except httpx.TimeoutException as e:
        log.warning("http_timeout service=%s url=%s", service, url)
        raise ExternalServiceError(service=service, url=url, detail="timeout") from e

    except httpx.RequestError as e:
        log.error("http_request_error service=%s url=%s detail=%s", service, url, e)
        raise ExternalServiceError(service=service, url=url, detail=str(e)) from e

    try:
        return resp.json()
    except ValueError as e:
        # body was not JSON
        log.warning("http_invalid_json service=%s url=%s", service, url)
        raise ExternalServiceError(
            service=service, url=url, status=resp.status_code, body_preview=resp.text[:400], detail="invalid json"
        ) from e
