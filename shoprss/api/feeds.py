"""
Feed API endpoints.
"""

import logging
from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse, Response

from shoprss.core.feed.models import FeedConfig
from shoprss.core.feed.service import generate_feed
from shoprss.core.shop_client import ShopClient
from shoprss.deps import get_feed_config, get_shop_client

router = APIRouter(tags=["Feeds"])

logger = logging.getLogger(__name__)

RSS_MEDIA_TYPE = "application/rss+xml; charset=utf-8"
FEED_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@router.api_route("/{path:path}", methods=FEED_METHODS, response_class=Response)
async def get_feed(
    request: Request,
    client: ShopClient = Depends(get_shop_client),
    config: FeedConfig = Depends(get_feed_config)
):
    """
    Fetch the shop and return it as RSS.
    
    Every request, whatever its method or path, does its own upstream
    fetch. Any failure is reported as 502 with the error message as plain
    text.
    """
    try:
        xml_string = await generate_feed(client, config, self_url=str(request.url))
    except Exception as e:
        logger.error(f"Feed generation failed for {request.url.path}: {e}")
        return PlainTextResponse(str(e), status_code=502)
    
    return Response(content=xml_string.encode("utf-8"), media_type=RSS_MEDIA_TYPE)
