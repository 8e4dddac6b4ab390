"""
Shop API client.

Single GET per call, no retries: the caller decides whether to try again.
"""

import logging
from typing import Any, Optional

import httpx


logger = logging.getLogger(__name__)


class ShopApiError(Exception):
    """Base exception for shop API errors."""
    pass


class UpstreamStatusError(ShopApiError):
    """Shop API answered with a non-2xx status."""
    
    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"API returned HTTP {status_code}")


class UpstreamTimeoutError(ShopApiError, TimeoutError):
    """Shop API did not answer within the timeout."""
    pass


class TransportError(ShopApiError):
    """Connection-level failure (DNS, refused, reset, TLS...)."""
    pass


class DecodeError(ShopApiError):
    """Shop API body is not valid JSON."""
    pass


class ShopClient:
    """
    Async shop API client.
    
    Usage:
        async with ShopClient(url) as client:
            payload = await client.fetch_shop()
    """
    
    def __init__(
        self,
        api_url: str,
        user_agent: str = "FortniteShopRSS/1.0",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize shop client.
        
        Args:
            api_url: Shop endpoint URL
            user_agent: User-Agent header sent with every request
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests)
        """
        self.api_url = api_url
        self.user_agent = user_agent
        self.timeout = timeout
        
        self.client = httpx.AsyncClient(
            timeout=timeout,
            headers={"User-Agent": user_agent},
            transport=transport
        )
    
    @classmethod
    def from_settings(cls, settings, transport: Optional[httpx.AsyncBaseTransport] = None) -> "ShopClient":
        return cls(
            api_url=settings.shop_api_url,
            user_agent=settings.user_agent,
            timeout=settings.request_timeout,
            transport=transport
        )
    
    async def fetch_shop(self) -> Any:
        """
        Fetch the current shop payload.
        
        Returns:
            Parsed JSON body (snapshot nested under 'data')
        
        Raises:
            UpstreamStatusError: Non-2xx response
            UpstreamTimeoutError: No response within the timeout
            TransportError: Connection-level failure
            DecodeError: Body is not valid JSON
        """
        logger.info(f"Fetching shop from {self.api_url}")
        
        try:
            response = await self.client.get(self.api_url)
        except httpx.TimeoutException as e:
            logger.warning(f"Timeout fetching {self.api_url}: {e}")
            raise UpstreamTimeoutError(f"Request timed out after {self.timeout:g}s") from e
        except httpx.RequestError as e:
            logger.warning(f"Request error fetching {self.api_url}: {e}")
            raise TransportError(f"Request error: {e}") from e
        
        if not 200 <= response.status_code < 300:
            logger.warning(f"Shop API returned HTTP {response.status_code}: {response.text[:200]}")
            raise UpstreamStatusError(response.status_code)
        
        try:
            payload = response.json()
        except ValueError as e:
            logger.warning(f"Invalid JSON from {self.api_url}: {e}")
            raise DecodeError(f"Invalid JSON in shop response: {e}") from e
        
        logger.debug(f"Fetched shop payload ({len(response.content)} bytes)")
        return payload
    
    async def close(self):
        """Close HTTP client."""
        await self.client.aclose()
    
    async def __aenter__(self):
        return self
    
    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
