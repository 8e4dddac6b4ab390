"""
Dependency injection for FastAPI.
"""

from typing import AsyncIterator

from shoprss.config import get_settings
from shoprss.core.feed.models import FeedConfig
from shoprss.core.shop_client import ShopClient


async def get_shop_client() -> AsyncIterator[ShopClient]:
    """Shop client for one request, closed afterwards."""
    client = ShopClient.from_settings(get_settings())
    try:
        yield client
    finally:
        await client.close()


def get_feed_config() -> FeedConfig:
    """Feed config from application settings."""
    return FeedConfig.from_settings(get_settings())
