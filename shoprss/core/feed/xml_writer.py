"""
XML Writer for the RSS 2.0 shop feed.
"""

import logging
import xml.etree.ElementTree as ET
from datetime import datetime
from xml.dom import minidom
from typing import List, Optional

from shoprss.core.utils import escape_xml, format_long_date, format_rfc2822, strip_invalid_xml_chars
from .models import FeedItem, FeedConfig


ATOM_NS = 'http://www.w3.org/2005/Atom'

logger = logging.getLogger(__name__)


class _EntityText(minidom.Text):
    """Text node written with all five XML entities, quotes and apostrophes included."""
    __slots__ = ()
    
    def writexml(self, writer, indent="", addindent="", newl=""):
        writer.write(f"{indent}{escape_xml(self.data)}{newl}")


def _escape_text_nodes(dom: minidom.Document, node: minidom.Node) -> None:
    for child in list(node.childNodes):
        if child.nodeType == minidom.Node.TEXT_NODE:
            text = _EntityText()
            text.data = child.data
            text.ownerDocument = dom
            node.replaceChild(text, child)
        else:
            _escape_text_nodes(dom, child)


def write_feed_xml(
    items: List[FeedItem],
    config: FeedConfig,
    feed_date: datetime,
    image_url: Optional[str] = None,
    self_url: Optional[str] = None
) -> str:
    """
    Generate the RSS 2.0 document for a list of feed items.
    
    Items carry raw text. Characters XML cannot hold are dropped, and every
    text node is written with the five reserved characters as entities
    (descriptions are HTML fragments and end up escaped as XML text).
    
    Args:
        items: List of FeedItem objects, in output order
        config: FeedConfig with channel metadata
        feed_date: Shop date, used for the channel description and lastBuildDate
        image_url: Channel image URL (defaults to config.default_image_url)
        self_url: URL the feed is served from, emitted as atom:link rel="self"
    
    Returns:
        UTF-8 XML document string with prolog
    """
    text = strip_invalid_xml_chars
    ET.register_namespace('atom', ATOM_NS)
    
    rss = ET.Element('rss', {'version': '2.0'})
    if not self_url:
        # Declared explicitly; ElementTree only emits it when an atom element is present
        rss.set('xmlns:atom', ATOM_NS)
    
    channel_elem = ET.SubElement(rss, 'channel')
    ET.SubElement(channel_elem, 'title').text = text(config.title)
    ET.SubElement(channel_elem, 'link').text = text(config.link)
    ET.SubElement(channel_elem, 'description').text = text(
        f"{config.description_prefix} — {format_long_date(feed_date)}"
    )
    ET.SubElement(channel_elem, 'language').text = text(config.language)
    ET.SubElement(channel_elem, 'lastBuildDate').text = format_rfc2822(feed_date)
    ET.SubElement(channel_elem, 'generator').text = text(config.generator)
    if self_url:
        ET.SubElement(channel_elem, f'{{{ATOM_NS}}}link', {
            'href': text(self_url),
            'rel': 'self',
            'type': 'application/rss+xml',
        })
    
    image_elem = ET.SubElement(channel_elem, 'image')
    ET.SubElement(image_elem, 'url').text = text(image_url or config.default_image_url)
    ET.SubElement(image_elem, 'title').text = text(config.title)
    ET.SubElement(image_elem, 'link').text = text(config.link)
    
    for item in items:
        item_elem = ET.SubElement(channel_elem, 'item')
        ET.SubElement(item_elem, 'title').text = text(item.title)
        ET.SubElement(item_elem, 'description').text = text(item.description)
        ET.SubElement(item_elem, 'guid', {'isPermaLink': 'false'}).text = text(item.guid)
        
        if item.pub_date is not None:
            ET.SubElement(item_elem, 'pubDate').text = format_rfc2822(item.pub_date)
        
        if item.category:
            ET.SubElement(item_elem, 'category').text = text(item.category)
        
        # Length is unknown, the image is never downloaded
        if item.image_url:
            ET.SubElement(item_elem, 'enclosure', {
                'url': text(item.image_url),
                'type': 'image/png',
                'length': '0',
            })
    
    xml_string = ET.tostring(rss, encoding='unicode', method='xml')
    
    # Parse with minidom for pretty printing
    dom = minidom.parseString(xml_string)
    _escape_text_nodes(dom, dom.documentElement)
    pretty_xml_str = dom.toprettyxml(indent='  ', encoding='utf-8').decode('utf-8')
    
    logger.debug(f"Wrote RSS document with {len(items)} items ({len(pretty_xml_str)} chars)")
    return pretty_xml_str
