"""
Feed generation service - fetch the shop, then build the feed.
"""

import logging
from typing import Optional

from shoprss.core.shop_client import ShopClient
from .models import FeedConfig
from .builder import build_rss


logger = logging.getLogger(__name__)


async def generate_feed(
    client: ShopClient,
    config: Optional[FeedConfig] = None,
    self_url: Optional[str] = None
) -> str:
    """
    Fetch the current shop and render it as RSS.
    
    Fetch and build errors are not caught here; presenting them is up to
    the caller (CLI or HTTP route).
    
    Args:
        client: ShopClient instance
        config: FeedConfig with channel metadata
        self_url: URL the feed is served from (server mode)
    
    Returns:
        XML document string
    """
    logger.info("Starting feed generation")
    payload = await client.fetch_shop()
    xml_string = build_rss(payload, config, self_url=self_url)
    logger.info(f"Feed generated ({len(xml_string.encode('utf-8'))} bytes)")
    return xml_string
