"""
Feed data models.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class FeedConfig:
    """Channel-level feed metadata."""
    title: str = 'Fortnite Item Shop'
    link: str = 'https://fortnite-api.com'
    description_prefix: str = 'Fortnite Battle Royale Item Shop'
    language: str = 'en-us'
    generator: str = 'FortniteShopRSS/1.0'
    default_image_url: str = 'https://fortnite-api.com/images/vbuck.png'
    image_width: int = 256  # width of the <img> embedded in item descriptions
    
    @classmethod
    def from_settings(cls, settings) -> "FeedConfig":
        """Build feed config from application Settings."""
        return cls(
            title=settings.feed_title,
            link=settings.feed_link,
            description_prefix=settings.feed_description_prefix,
            language=settings.feed_language,
            generator=settings.user_agent,
            default_image_url=settings.default_vbuck_icon,
            image_width=settings.image_width,
        )


@dataclass
class FeedItem:
    """Normalized projection of one shop entry, rendered as one <item>."""
    guid: str  # raw offerId, '' if absent
    title: str = ''
    description: str = ''  # HTML fragment, escaped again when written as XML text
    pub_date: Optional[datetime] = None
    category: Optional[str] = None
    image_url: Optional[str] = None
