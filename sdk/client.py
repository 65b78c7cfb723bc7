# sdk/client.py
import requests
from typing import Optional
from loguru import logger

from .config import ClientConfig
from .models import ErrorKind, Failure, ParsedResult
from .resolver import ResponseResolver, timeout_failure


class CatalogClient:
    """Blocking client for scripts; the interactive UI uses FetchOrchestrator."""

    def __init__(self, endpoint: Optional[str] = None, timeout: Optional[float] = None):
        self.endpoint = endpoint or ClientConfig.PRODUCTS_ENDPOINT
        self.health_endpoint = (
            ClientConfig.HEALTH_ENDPOINT if endpoint is None
            else ClientConfig.health_endpoint_for(endpoint)
        )
        self.timeout = timeout if timeout is not None else ClientConfig.REQUEST_TIMEOUT_SECONDS
        self.session = requests.Session()
        self._resolver = ResponseResolver(ClientConfig.BODY_PREVIEW_CHARS)

    def list_products(self) -> ParsedResult:
        try:
            r = self.session.get(self.endpoint, timeout=self.timeout)
        except requests.exceptions.Timeout:
            logger.warning("GET {} timed out after {}s", self.endpoint, self.timeout)
            return timeout_failure()
        except requests.exceptions.ConnectionError as e:
            logger.warning("GET {} failed: {}", self.endpoint, e)
            return Failure(kind=ErrorKind.NETWORK_UNREACHABLE, message=str(e))
        except requests.exceptions.RequestException as e:
            logger.warning("GET {} failed: {}", self.endpoint, e)
            return Failure(kind=ErrorKind.HTTP_ERROR, message=str(e) or type(e).__name__)

        logger.debug("HTTP {} body: {}", r.status_code, r.text[:ClientConfig.BODY_PREVIEW_CHARS])
        return self._resolver.resolve(r.text, r.status_code)

    # Health is informational only
    def health(self) -> dict:
        r = self.session.get(self.health_endpoint, timeout=self.timeout)
        r.raise_for_status()
        return r.json()
