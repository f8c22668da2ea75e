"""HTTP executor — sends compiled requests to the UniFi Network Integration API."""
import logging
from types import TracebackType
from typing import Optional, Type

import httpx

from .config import Settings
from .exceptions import ToolValidationError, UnifiNetworkError
from .tools.compiler import CompiledRequest

logger = logging.getLogger(__name__)


class UnifiClient:
    """Thin async wrapper over httpx holding the base URL and API key.

    One request per call. No retries, and no timeout beyond httpx's default.
    """

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings
        self._client = httpx.AsyncClient(
            base_url=settings.api_root,
            headers={
                "Accept": "application/json",
                "X-API-KEY": settings.api_key,
            },
            verify=settings.verify_ssl,
            transport=transport,
        )

    async def __aenter__(self) -> "UnifiClient":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def send(self, request: CompiledRequest) -> httpx.Response:
        """Issue one request and return the raw response, whatever its status.

        Raises UnifiNetworkError when no response arrives at all, and
        ToolValidationError when the target cannot be made into a URL.
        """
        kwargs = {}
        if request.body is not None:
            kwargs["json"] = request.body
            kwargs["headers"] = {"Content-Type": "application/json"}

        logger.debug(f"UniFi request: {request}")
        try:
            resp = await self._client.request(request.method, request.target, **kwargs)
        except httpx.InvalidURL as e:
            logger.warning(f"Rejected request target {request.target!r}: {e}")
            raise ToolValidationError(f"Invalid request URL: {e}") from e
        except httpx.RequestError as e:
            detail = str(e) or e.__class__.__name__
            logger.error(f"UniFi request failed: {request.method} {request.path}: {detail}")
            raise UnifiNetworkError(f"Could not reach UniFi API: {detail}") from e

        logger.debug(f"UniFi response: {resp.status_code} ({len(resp.content)} bytes)")
        return resp
