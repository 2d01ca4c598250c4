"""Resilient Transform Client - wraps httpx.AsyncClient with retry, backoff, and error mapping.

Invariants:
    - Transient errors (connection failures, 5xx): max_retries retries with exponential backoff
    - Client errors (other non-2xx): immediate failure, no retry
    - Timeouts: immediate failure as TransformTimeoutError (504)
    - Bodies that are not {"processed_message": <str>}: TransformServiceError(malformed_response)
    - Callers only ever see processed text or a TransformServiceError

Design Decisions:
    - Wrapper over raw client: isolates retry logic from the create pipeline (ADR: single responsibility)
    - ±25% jitter on backoff: prevents synchronized retries against a recovering processor
    - Transport injectable: tests swap in httpx.MockTransport, no sockets opened
"""

import asyncio
import logging
import random
import time

import httpx
from pydantic import ValidationError

from message_board.core.domain_types import TransformFailure
from message_board.core.errors import (
    ErrorContext, TransformServiceError, TransformTimeoutError,
)
from message_board.schemas.transform import TransformRequest, TransformResponse

logger = logging.getLogger(__name__)


class ResilientTransformClient:
    """Calls the Transform Service and returns processed text."""

    def __init__(
        self,
        url: str,
        timeout_seconds: float = 10.0,
        max_retries: int = 2,
        base_delay_ms: int = 200,
        max_delay_ms: int = 2_000,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.url = url
        self.timeout_seconds = timeout_seconds
        self.max_retries = max_retries
        self.base_delay_ms = base_delay_ms
        self.max_delay_ms = max_delay_ms
        self.client = httpx.AsyncClient(
            timeout=timeout_seconds, transport=transport,
        )

    async def process(self, raw: str) -> str:
        """Send raw text, return the service's processed_message."""
        payload = TransformRequest(message=raw).model_dump()
        for attempt in range(self.max_retries + 1):
            context = ErrorContext(upstream_url=self.url, attempts=attempt + 1)
            started = time.perf_counter()
            try:
                response = await self.client.post(self.url, json=payload)
            except httpx.TimeoutException:
                raise TransformTimeoutError(self.timeout_seconds, context)
            except httpx.TransportError as e:
                await self._handle_transient_error(
                    str(e) or type(e).__name__,
                    TransformFailure.CONNECTION_ERROR, attempt, context,
                )
                continue

            context.upstream_status = response.status_code
            if response.status_code >= 500:
                await self._handle_transient_error(
                    f"HTTP {response.status_code}",
                    TransformFailure.BAD_STATUS, attempt, context,
                )
                continue
            if not response.is_success:
                raise TransformServiceError(
                    f"HTTP {response.status_code}",
                    TransformFailure.BAD_STATUS, context,
                )

            processed = self._parse(response, context)
            logger.info(
                "Transform service success",
                extra={
                    "attempt": attempt + 1,
                    "upstream_status": response.status_code,
                    "duration_ms": round((time.perf_counter() - started) * 1000, 1),
                },
            )
            return processed

        # Unreachable: the final attempt either returns or raises
        raise TransformServiceError(
            "retries exhausted", TransformFailure.CONNECTION_ERROR,
        )

    async def close(self) -> None:
        await self.client.aclose()

    def _parse(self, response: httpx.Response, context: ErrorContext) -> str:
        """Extract processed_message or raise malformed_response."""
        try:
            return TransformResponse.model_validate_json(
                response.content,
            ).processed_message
        except ValidationError as e:
            context.debug_info = {"errors": e.errors(include_url=False)}
            raise TransformServiceError(
                "response body is not {processed_message: string}",
                TransformFailure.MALFORMED_RESPONSE, context,
            )

    async def _handle_transient_error(
        self,
        detail: str,
        failure: TransformFailure,
        attempt: int,
        context: ErrorContext,
    ) -> None:
        """Sleep before the next attempt, or raise once retries are spent."""
        if attempt >= self.max_retries:
            raise TransformServiceError(
                f"{detail} after {attempt + 1} attempt(s)", failure, context,
            )
        delay = self._backoff(attempt)
        logger.warning(
            f"Transform service transient error, retry after {delay}ms: {detail}",
            extra={"attempt": attempt + 1, "upstream_status": context.upstream_status},
        )
        await asyncio.sleep(delay / 1000)

    def _backoff(self, attempt: int) -> int:
        """Exponential backoff with ±25% jitter."""
        delay = min(self.max_delay_ms, (2 ** attempt) * self.base_delay_ms)
        return int(delay * random.uniform(0.75, 1.25))  # nosec B311


# Singleton (initialized on startup)
transform_client: ResilientTransformClient | None = None


def init_transform_client(url: str, **kwargs) -> ResilientTransformClient:
    global transform_client
    transform_client = ResilientTransformClient(url, **kwargs)
    return transform_client


async def close_transform_client() -> None:
    global transform_client
    if transform_client is not None:
        await transform_client.close()
        transform_client = None


def get_transform_client() -> ResilientTransformClient:
    """FastAPI dependency for the Transform Service client."""
    if not transform_client:
        raise RuntimeError("Transform client not initialized")
    return transform_client
