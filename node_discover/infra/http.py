from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

import aiohttp
from loguru import logger

# ─── Errors ──────────────────────────────────────────────────────────


@dataclass(slots=True, unsafe_hash=True)
class HttpError(Exception):
    status: int
    body: str

    def __post_init__(self) -> None:
        Exception.__init__(self, self.status, self.body)

    def __str__(self) -> str:
        return f"HTTP {self.status}: {self.body}"


# ─── Response ────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class Response[T]:
    status: int
    data: T
    headers: dict[str, str]


# ─── Auth ────────────────────────────────────────────────────────────


@runtime_checkable
class Auth(Protocol):
    def headers(self) -> dict[str, str]: ...


class BearerAuth:
    def __init__(self, token: str) -> None:
        self._token = token

    def headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._token}",
            "Accept": "application/json",
        }

    def __repr__(self) -> str:
        return "BearerAuth(token=***)"


# ─── Client ──────────────────────────────────────────────────────────


class HttpClient:
    """Async JSON client over a single aiohttp session.

    Use as an async context manager so the session is closed with the
    request that opened it. Without ``timeout`` the session keeps aiohttp's
    default timeout.
    """

    def __init__(
        self,
        base_url: str,
        auth: Auth | None = None,
        *,
        timeout: aiohttp.ClientTimeout | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._auth = auth
        self._timeout = timeout
        self._session: aiohttp.ClientSession | None = None
        self._log = logger.bind(component="http")

    def _url(self, path: str) -> str:
        return f"{self._base_url}{path}"

    def _ensure_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            if self._timeout is None:
                self._session = aiohttp.ClientSession()
            else:
                self._session = aiohttp.ClientSession(timeout=self._timeout)
        return self._session

    def _build_headers(self) -> dict[str, str]:
        return self._auth.headers() if self._auth else {}

    async def _send(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
    ) -> tuple[int, Any, dict[str, str]]:
        session = self._ensure_session()
        self._log.debug("{method} {path} {params}", method=method, path=path, params=params or {})

        try:
            async with session.request(
                method, self._url(path), headers=self._build_headers(), params=params
            ) as resp:
                return await self._parse(resp)
        except aiohttp.ClientResponseError as e:
            raise HttpError(status=e.status, body=e.message) from e
        except TimeoutError as e:
            self._log.warning("{method} {path} timed out", method=method, path=path)
            raise HttpError(status=0, body=f"Request timed out: {method} {path}") from e
        except aiohttp.ClientError as e:
            raise HttpError(status=0, body=str(e)) from e

    async def _parse(self, resp: aiohttp.ClientResponse) -> tuple[int, Any, dict[str, str]]:
        if resp.status >= 400:
            body = await resp.text()
            self._log.warning(
                "HTTP {status} from {url}: {body}",
                status=resp.status, url=str(resp.url), body=body[:500],
            )
            raise HttpError(status=resp.status, body=body)
        body = await resp.read()
        data = await resp.json() if body else None
        return resp.status, data, dict(resp.headers)

    async def get[T](
        self,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        response_type: type[T],
    ) -> Response[T]:
        _ = response_type
        status, data, headers = await self._send("GET", path, params=params)
        return Response(status=status, data=data, headers=headers)

    # ─── Lifecycle ───────────────────────────────────────────────────

    async def close(self) -> None:
        if self._session and not self._session.closed:
            self._log.debug("Closing HTTP session")
            await self._session.close()

    async def __aenter__(self) -> HttpClient:
        self._ensure_session()
        return self

    async def __aexit__(self, *_: Any) -> None:
        await self.close()
