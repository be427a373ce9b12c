"""Async HTTP transport for the Discord REST API.

Wraps a lazily created ``httpx.AsyncClient`` and returns a Result for every
call: responses are parsed into typed models through pydantic TypeAdapters,
failures become RestError values. Local rate limit buckets are consulted
before each request, 429 responses are retried once after ``Retry-After``,
and timeouts/network errors/5xx responses are retried with backoff.
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import contextmanager
from functools import lru_cache
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Iterator

import httpx
import orjson
from pydantic import TypeAdapter, ValidationError

from cordkit.foundation import Err, ErrorCode, Ok, RestError, Result
from cordkit.foundation.config import RestSettings

from .auth import BearerAuth, BotAuth, auth_from_settings
from .backoff import Backoff, ExponentialBackoff
from .ratelimit import RateLimiter
from .request import HttpMethod, RestRequest, RestRequestBuilder

if TYPE_CHECKING:
    from types import TracebackType

logger = logging.getLogger("cordkit.rest.http")

Configure = Callable[[RestRequestBuilder], object]

DEFAULT_RETRY_AFTER = 1.0


@lru_cache(maxsize=512)
def _adapter(type_: Any) -> TypeAdapter[Any]:
    return TypeAdapter(type_)


def _retry_after(response: httpx.Response) -> float:
    raw = response.headers.get("Retry-After")
    if raw is not None:
        try:
            return float(raw)
        except ValueError:
            pass
    try:
        body = response.json()
    except ValueError:
        return DEFAULT_RETRY_AFTER
    if isinstance(body, dict) and isinstance(body.get("retry_after"), (int, float)):
        return float(body["retry_after"])
    return DEFAULT_RETRY_AFTER


def error_from_response(response: httpx.Response) -> RestError:
    """Parse Discord's JSON error body, falling back to the bare HTTP status."""
    body: Any = None
    if response.content:
        try:
            body = orjson.loads(response.content)
        except orjson.JSONDecodeError:
            body = None
    retry_after = _retry_after(response) if response.status_code == 429 else None
    return RestError.from_response(
        response.status_code,
        response.reason_phrase,
        body if isinstance(body, dict) else None,
        retry_after=retry_after,
    )


class RestHttpClient:
    """Result-returning Discord HTTP client.

    Args:
        settings: Transport configuration (base URL, timeout, retries)
        auth: Token strategy; defaults to the token in ``settings``
        transport: Custom httpx transport (``httpx.MockTransport`` in tests)
        rate_limiter: Shared limiter; one is created when omitted
        backoff: Delay strategy for transient failures
        sleep: Awaitable sleep, injectable for tests

    Example:
        >>> async with RestHttpClient(RestSettings(token="...")) as http:
        ...     result = await http.get("users/@me", User)
    """

    def __init__(
        self,
        settings: RestSettings | None = None,
        *,
        auth: BotAuth | BearerAuth | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        rate_limiter: RateLimiter | None = None,
        backoff: Backoff | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self.settings = settings or RestSettings()
        self.auth = auth if auth is not None else auth_from_settings(self.settings)
        self.rate_limiter = rate_limiter or RateLimiter()
        self.backoff = backoff or ExponentialBackoff(
            base=self.settings.retry_base_delay, max_delay=self.settings.retry_max_delay,
        )
        self._transport = transport
        self._sleep = sleep
        self._client: httpx.AsyncClient | None = None
        self._customizations: list[Configure] = []

    # ─────────────────────────────────────────────────────────────────
    # Lifecycle
    # ─────────────────────────────────────────────────────────────────

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the httpx async client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.settings.base_url,
                timeout=self.settings.timeout,
                transport=self._transport,
                headers={"User-Agent": self.settings.user_agent},
            )
        return self._client

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> RestHttpClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    @contextmanager
    def customize(self, configure: Configure) -> Iterator[None]:
        """Apply ``configure`` to every request built inside the block.

        Example:
            >>> with http.customize(lambda b: b.add_header("X-Debug", "1")):
            ...     await api.get_channel(channel_id)
        """
        self._customizations.append(configure)
        try:
            yield
        finally:
            self._customizations.remove(configure)

    # ─────────────────────────────────────────────────────────────────
    # Verbs
    # ─────────────────────────────────────────────────────────────────

    async def get(self, endpoint: str, type_: Any = None, *, configure: Configure | None = None, allow_null: bool = False) -> Result[Any, RestError]:
        return await self.request("GET", endpoint, type_, configure=configure, allow_null=allow_null)

    async def post(self, endpoint: str, type_: Any = None, *, configure: Configure | None = None, allow_null: bool = False) -> Result[Any, RestError]:
        return await self.request("POST", endpoint, type_, configure=configure, allow_null=allow_null)

    async def patch(self, endpoint: str, type_: Any = None, *, configure: Configure | None = None, allow_null: bool = False) -> Result[Any, RestError]:
        return await self.request("PATCH", endpoint, type_, configure=configure, allow_null=allow_null)

    async def put(self, endpoint: str, type_: Any = None, *, configure: Configure | None = None, allow_null: bool = False) -> Result[Any, RestError]:
        return await self.request("PUT", endpoint, type_, configure=configure, allow_null=allow_null)

    async def delete(self, endpoint: str, type_: Any = None, *, configure: Configure | None = None, allow_null: bool = False) -> Result[Any, RestError]:
        return await self.request("DELETE", endpoint, type_, configure=configure, allow_null=allow_null)

    async def get_content(self, endpoint: str, *, configure: Configure | None = None) -> Result[bytes, RestError]:
        """GET returning the raw response body (images, widget PNGs)."""
        response = await self._send(self._build("GET", endpoint, configure))
        if response.is_err():
            return response  # type: ignore[return-value]
        raw = response.unwrap()
        if raw.is_success:
            return Ok(raw.content)
        return Err(error_from_response(raw))

    async def request(
        self,
        method: HttpMethod,
        endpoint: str,
        type_: Any = None,
        *,
        configure: Configure | None = None,
        allow_null: bool = False,
    ) -> Result[Any, RestError]:
        """Send a request and unpack the response into ``type_`` (or None when no type is given)."""
        response = await self._send(self._build(method, endpoint, configure))
        return response.flat_map(lambda r: self._unpack(r, type_, allow_null))

    # ─────────────────────────────────────────────────────────────────
    # Internals
    # ─────────────────────────────────────────────────────────────────

    def _build(self, method: HttpMethod, endpoint: str, configure: Configure | None) -> RestRequest:
        builder = RestRequestBuilder(endpoint, method)
        if configure is not None:
            configure(builder)
        for customization in self._customizations:
            customization(builder)
        return builder.build()

    async def _send(self, request: RestRequest) -> Result[httpx.Response, RestError]:
        """Send with local rate limiting, one 429 retry and backoff for transient failures."""
        kwargs = request.to_httpx()
        if request.authorize and self.auth is not None:
            self.auth.apply(kwargs["headers"])

        rate_limit_retried = False
        attempt = 0
        while True:
            permit = await self.rate_limiter.acquire(request.endpoint)
            if permit.is_err():
                error = permit.unwrap_err()
                if rate_limit_retried:
                    return Err(error)
                rate_limit_retried = True
                await self._sleep(error.retry_after or DEFAULT_RETRY_AFTER)
                continue

            try:
                response = await self._get_client().request(**kwargs)
            except httpx.TimeoutException:
                error = RestError(
                    message=f"{request.method} {request.endpoint} timed out after {self.settings.timeout}s",
                    code=ErrorCode.TIMEOUT,
                )
            except httpx.NetworkError as e:
                error = RestError(message=f"Network error: {e}", code=ErrorCode.NETWORK_ERROR)
            except httpx.HTTPError as e:
                return Err(RestError.from_exception(e, f"{request.method} {request.endpoint}"))
            else:
                self.rate_limiter.update(request.endpoint, response.headers)
                if response.status_code == 429 and not rate_limit_retried:
                    rate_limit_retried = True
                    delay = _retry_after(response)
                    logger.warning(f"429 on {request.method} {request.endpoint}; retrying in {delay:.2f}s")
                    await self._sleep(delay)
                    continue
                if response.status_code < 500 or attempt >= self.settings.max_retries:
                    return Ok(response)
                error = error_from_response(response)

            if attempt >= self.settings.max_retries:
                return Err(error)
            delay = self.backoff.delay(attempt)
            attempt += 1
            logger.warning(f"{error.code.value} on {request.method} {request.endpoint}; attempt {attempt} in {delay:.2f}s")
            await self._sleep(delay)

    def _unpack(self, response: httpx.Response, type_: Any, allow_null: bool) -> Result[Any, RestError]:
        if not response.is_success:
            return Err(error_from_response(response))
        if type_ is None:
            return Ok(None)
        content = response.content
        if not content or content.strip() == b"null":
            if allow_null:
                return Ok(None)
            return Err(RestError(
                message="Response content was empty but a value was expected",
                code=ErrorCode.PARSE_ERROR,
                status_code=response.status_code,
            ))
        try:
            return Ok(_adapter(type_).validate_json(content))
        except ValidationError as e:
            logger.debug(f"Failed to parse {type_!r} from {response.request.url}: {e}")
            return Err(RestError(
                message=f"Could not parse response as {getattr(type_, '__name__', type_)}: {e.error_count()} error(s)",
                code=ErrorCode.PARSE_ERROR,
                status_code=response.status_code,
                details=str(e),
            ))
