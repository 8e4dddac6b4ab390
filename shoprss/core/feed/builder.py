"""
Build the RSS feed from a shop snapshot.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from shoprss.core.utils import parse_iso_datetime
from shoprss.schemas.shop import ShopSnapshot
from .extractors import to_feed_item
from .models import FeedConfig, FeedItem
from .xml_writer import write_feed_xml


logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def snapshot_feed_items(snapshot: ShopSnapshot, config: FeedConfig) -> List[FeedItem]:
    """
    Convert snapshot entries to feed items.
    
    The first entry seen for an offerId wins; later entries with the same id
    are dropped (a missing id counts as ''). The id is claimed before the
    entry is checked for display names.
    """
    seen: Dict[str, None] = {}
    feed_items: List[FeedItem] = []
    
    for entry in snapshot.entries:
        offer_id = entry.offer_id or ''
        if offer_id in seen:
            logger.debug(f"Skipping duplicate offer {offer_id!r}")
            continue
        seen[offer_id] = None
        
        feed_item = to_feed_item(entry, snapshot.date, config)
        if feed_item is None:
            logger.debug(f"Skipping offer {offer_id!r}: no items or tracks")
            continue
        feed_items.append(feed_item)
    
    return feed_items


def build_rss(
    payload: Any,
    config: Optional[FeedConfig] = None,
    now: Optional[Callable[[], datetime]] = None,
    self_url: Optional[str] = None
) -> str:
    """
    Render a shop payload as an RSS 2.0 document.
    
    Args:
        payload: Raw API payload ({"data": {...}}) or a ShopSnapshot
        config: FeedConfig, defaults to FeedConfig()
        now: Clock used when the snapshot date is missing or unparseable
        self_url: Optional URL the feed is served from
    
    Returns:
        XML document string
    
    Raises:
        MalformedSnapshotError: If the payload is not shaped like a snapshot
    """
    config = config or FeedConfig()
    snapshot = ShopSnapshot.from_payload(payload)
    
    feed_date = parse_iso_datetime(snapshot.date)
    if feed_date is None:
        logger.warning(f"Shop date {snapshot.date!r} missing or unparseable, using current time")
        feed_date = (now or _utcnow)()
    
    feed_items = snapshot_feed_items(snapshot, config)
    logger.info(f"Built {len(feed_items)} feed items from {len(snapshot.entries)} shop entries")
    
    return write_feed_xml(
        feed_items,
        config,
        feed_date,
        image_url=snapshot.vbuck_icon,
        self_url=self_url
    )
