# sdk/orchestrator.py
import asyncio
from typing import Callable, Optional

import httpx
from loguru import logger

from .config import ClientConfig
from .models import ErrorKind, Failure, ParsedResult, Success
from .resolver import ResponseResolver, timeout_failure
from .state import ViewState, load_failed, load_succeeded, loading_started


class FetchOrchestrator:
    """
    Fetches the product list and owns the ViewState.

    One request is current at a time. Starting a new fetch (or a retry)
    supersedes the one in flight: when the older response lands it is
    dropped and fetch() returns None for it.
    """

    def __init__(
        self,
        endpoint: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        on_change: Optional[Callable[[ViewState], None]] = None,
        preview_chars: Optional[int] = None,
    ):
        self.endpoint = endpoint or ClientConfig.PRODUCTS_ENDPOINT
        self.timeout = timeout if timeout is not None else ClientConfig.REQUEST_TIMEOUT_SECONDS
        self.preview_chars = preview_chars if preview_chars is not None else ClientConfig.BODY_PREVIEW_CHARS
        self._transport = transport
        self._on_change = on_change
        self._resolver = ResponseResolver(self.preview_chars)
        self._generation = 0
        self._state = ViewState()

    @property
    def state(self) -> ViewState:
        return self._state

    def _apply(self, new_state: ViewState):
        self._state = new_state
        if self._on_change is not None:
            self._on_change(new_state)

    async def fetch(self) -> Optional[ParsedResult]:
        self._generation += 1
        generation = self._generation
        self._apply(loading_started(self._state))

        result = await self._request()

        if generation != self._generation:
            logger.debug("Discarding superseded response (request #{}, current #{})", generation, self._generation)
            return None

        if isinstance(result, Success):
            logger.info("Loaded {} products (reported {}, skipped {})", len(result.items), result.count, result.skipped)
            self._apply(load_succeeded(self._state, result))
        else:
            logger.warning("Product fetch failed: {} - {}", result.kind.value, result.message)
            self._apply(load_failed(self._state, result))
        return result

    async def retry(self) -> Optional[ParsedResult]:
        logger.info("Retrying product fetch")
        return await self.fetch()

    async def _request(self) -> ParsedResult:
        logger.debug("GET {} (timeout {}s)", self.endpoint, self.timeout)
        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=self.timeout) as client:
                response = await asyncio.wait_for(client.get(self.endpoint), timeout=self.timeout)
        except (asyncio.TimeoutError, httpx.TimeoutException):
            return timeout_failure()
        except httpx.TransportError as e:
            return Failure(kind=ErrorKind.NETWORK_UNREACHABLE, message=str(e) or type(e).__name__)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            # undecodable body, bad URL and the like: answered, but unusable
            return Failure(kind=ErrorKind.HTTP_ERROR, message=str(e) or type(e).__name__)

        body = response.text
        logger.debug("HTTP {} body: {}", response.status_code, body[:self.preview_chars])
        return self._resolver.resolve(body, response.status_code)
