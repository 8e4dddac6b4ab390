"""
Shop snapshot schemas.

Mirrors the ``data`` object returned by the shop endpoint. Upstream data is
loosely structured, so every optional field is lenient: a value that fails
validation is treated as absent instead of rejecting the whole snapshot.
Only the top-level shape (a mapping whose ``entries`` is a list) is enforced.
"""

from collections.abc import Mapping
from typing import Annotated, Any, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError, WrapValidator, field_validator
from pydantic.alias_generators import to_camel


T = TypeVar("T")


class MalformedSnapshotError(ValueError):
    """Raised when a shop payload cannot be read as a snapshot."""
    pass


def _absent_on_error(value: Any, handler) -> Any:
    try:
        return handler(value)
    except ValidationError:
        return None


def _zero_on_error(value: Any, handler) -> int:
    try:
        return handler(value)
    except ValidationError:
        return 0


def _valid_elements(value: Any, handler) -> list:
    if not isinstance(value, (list, tuple)):
        return []
    return [v for v in handler(list(value)) if v is not None]


# Optional value, absent when invalid
Lenient = Annotated[Optional[T], WrapValidator(_absent_on_error)]
# List keeping only the elements that validate
LenientList = Annotated[List[Lenient[T]], WrapValidator(_valid_elements)]
Price = Annotated[int, WrapValidator(_zero_on_error)]


class _ShopModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
        frozen=True,
    )


class RenderImage(_ShopModel):
    image: Lenient[str] = None


class DisplayAsset(_ShopModel):
    render_images: LenientList[RenderImage] = []


class ItemImages(_ShopModel):
    featured: Lenient[str] = None
    icon: Lenient[str] = None
    small_icon: Lenient[str] = None


class DisplayValue(_ShopModel):
    display_value: Lenient[str] = None


class BrItem(_ShopModel):
    """Battle royale cosmetic attached to an offer."""
    name: Lenient[str] = None
    description: Lenient[str] = None
    images: Lenient[ItemImages] = None
    type: Lenient[DisplayValue] = None
    rarity: Lenient[DisplayValue] = None


class Track(_ShopModel):
    """Jam track attached to an offer."""
    title: Lenient[str] = None
    artist: Lenient[str] = None


class Bundle(_ShopModel):
    image: Lenient[str] = None


class Layout(_ShopModel):
    name: Lenient[str] = None
    category: Lenient[str] = None


class Banner(_ShopModel):
    value: Lenient[str] = None


class ShopEntry(_ShopModel):
    """One storefront offer."""
    offer_id: Lenient[str] = None
    br_items: LenientList[BrItem] = []
    tracks: LenientList[Track] = []
    bundle: Lenient[Bundle] = None
    new_display_asset: Lenient[DisplayAsset] = None
    regular_price: Price = 0
    final_price: Price = 0
    layout: Lenient[Layout] = None
    in_date: Lenient[str] = None
    out_date: Lenient[str] = None
    banner: Lenient[Banner] = None


class ShopSnapshot(_ShopModel):
    """Current state of the item shop."""
    date: Lenient[str] = None
    vbuck_icon: Lenient[str] = None
    entries: List[Lenient[ShopEntry]] = []
    
    @field_validator("entries", mode="before")
    @classmethod
    def default_entries(cls, value: Any) -> Any:
        return [] if value is None else value
    
    @field_validator("entries", mode="after")
    @classmethod
    def drop_invalid_entries(cls, value: list) -> list:
        return [entry for entry in value if entry is not None]
    
    @classmethod
    def from_payload(cls, payload: Any) -> "ShopSnapshot":
        """
        Read a snapshot from the raw API payload.
        
        Args:
            payload: Parsed JSON body (the snapshot is nested under ``data``)
                or an existing ShopSnapshot.
        
        Returns:
            ShopSnapshot
        
        Raises:
            MalformedSnapshotError: If the payload, its ``data`` object or
                its ``entries`` list has the wrong type.
        """
        if isinstance(payload, cls):
            return payload
        if not isinstance(payload, Mapping):
            raise MalformedSnapshotError(
                f"Shop payload must be a JSON object, got {type(payload).__name__}"
            )
        
        data = payload.get("data")
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise MalformedSnapshotError(
                f"Shop payload 'data' must be a JSON object, got {type(data).__name__}"
            )
        
        try:
            return cls.model_validate(dict(data))
        except ValidationError as e:
            raise MalformedSnapshotError(f"Shop payload 'entries' is not a list: {e}") from e
