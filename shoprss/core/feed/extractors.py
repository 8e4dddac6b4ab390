"""
Field extraction for shop entries.

Each helper reads one display attribute from a ShopEntry. Missing or
malformed data is never an error: helpers fall back to a placeholder or
return None so the field is omitted from the feed.
"""

from typing import List, Optional

from shoprss.core.utils import escape_xml, format_long_date, format_number, parse_iso_datetime
from shoprss.schemas.shop import ShopEntry
from .models import FeedConfig, FeedItem


UNKNOWN_TRACK = 'Unknown Track'
IMAGE_KEYS = ('featured', 'icon', 'small_icon')


def item_names(entry: ShopEntry) -> List[str]:
    """Cosmetic names (in order) followed by track titles."""
    names = [item.name for item in entry.br_items if item.name]
    names.extend(track.title or UNKNOWN_TRACK for track in entry.tracks)
    return names


def first_image(entry: ShopEntry) -> Optional[str]:
    """
    Pick the display image for an entry.
    
    Search order: render images, then each cosmetic's featured/icon/smallIcon,
    then the bundle image. First hit wins.
    """
    if entry.new_display_asset:
        for render in entry.new_display_asset.render_images:
            if render.image:
                return render.image
    
    for item in entry.br_items:
        if not item.images:
            continue
        for key in IMAGE_KEYS:
            url = getattr(item.images, key)
            if url:
                return url
    
    if entry.bundle and entry.bundle.image:
        return entry.bundle.image
    return None


def item_type(entry: ShopEntry) -> str:
    if entry.bundle is not None:
        return 'Bundle'
    if entry.tracks:
        return 'Jam Track'
    for item in entry.br_items:
        if item.type and item.type.display_value:
            return item.type.display_value
    return 'Item'


def item_rarity(entry: ShopEntry) -> Optional[str]:
    for item in entry.br_items:
        if item.rarity and item.rarity.display_value:
            return item.rarity.display_value
    return None


def price_text(entry: ShopEntry) -> str:
    """'1,600 V-Bucks (was 2,000)' when discounted, else '2,000 V-Bucks'."""
    regular = entry.regular_price
    final = entry.final_price
    if regular != final and regular > 0:
        return f"{format_number(final)} V-Bucks (was {format_number(regular)})"
    return f"{format_number(final)} V-Bucks"


def layout_category(entry: ShopEntry) -> Optional[str]:
    if not entry.layout:
        return None
    return entry.layout.name or entry.layout.category or None


def build_description(
    entry: ShopEntry,
    type_: str,
    rarity: Optional[str],
    price: str,
    category: Optional[str],
    image_url: Optional[str],
    image_width: int = 256
) -> str:
    """Build the HTML description fragment. All entry text is XML-escaped."""
    parts = [f"<strong>{escape_xml(type_)}</strong>"]
    if rarity:
        parts.append(f" — {escape_xml(rarity)}")
    parts.append(f"<br/>Price: {escape_xml(price)}")
    if category:
        parts.append(f"<br/>Section: {escape_xml(category)}")
    
    out_date = parse_iso_datetime(entry.out_date)
    if out_date:
        parts.append(f"<br/>Leaves shop: {format_long_date(out_date)}")
    
    if entry.banner and entry.banner.value:
        parts.append(f"<br/>🏷️ {escape_xml(entry.banner.value)}")
    
    for item in entry.br_items:
        if item.description:
            parts.append(f"<br/><em>{escape_xml(item.name)}</em>: {escape_xml(item.description)}")
    
    for track in entry.tracks:
        parts.append(f"<br/>🎵 <em>{escape_xml(track.title)}</em> by {escape_xml(track.artist)}")
    
    if image_url:
        parts.append(f'<br/><img src="{escape_xml(image_url)}" width="{image_width}" />')
    
    return ''.join(parts)


def to_feed_item(
    entry: ShopEntry,
    shop_date: Optional[str],
    config: FeedConfig
) -> Optional[FeedItem]:
    """
    Convert a shop entry to a FeedItem.
    
    Args:
        entry: Shop entry
        shop_date: Snapshot date string, used when the entry has no inDate
        config: FeedConfig (image width)
    
    Returns:
        FeedItem, or None if the entry has nothing to display
    """
    names = item_names(entry)
    if not names:
        return None
    
    price = price_text(entry)
    category = layout_category(entry)
    image_url = first_image(entry)
    description = build_description(
        entry,
        item_type(entry),
        item_rarity(entry),
        price,
        category,
        image_url,
        image_width=config.image_width
    )
    
    return FeedItem(
        guid=entry.offer_id or '',
        title=f"{', '.join(names)} — {price}",
        description=description,
        pub_date=parse_iso_datetime(entry.in_date or shop_date),
        category=category,
        image_url=image_url,
    )
