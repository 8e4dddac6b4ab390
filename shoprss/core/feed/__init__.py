"""
Feed generation core module.
"""

from .models import FeedItem, FeedConfig
from .builder import build_rss
from .xml_writer import write_feed_xml
from .service import generate_feed

__all__ = [
    'FeedItem',
    'FeedConfig',
    'build_rss',
    'write_feed_xml',
    'generate_feed'
]
