"""Catalog items: lodgings, voyages and attractions as a tagged union."""

from dataclasses import dataclass, field
from typing import ClassVar

LODGING = "lodging"
VOYAGE = "voyage"
ATTRACTION = "attraction"

# Order matters: cross-kind rankings break ties in this order.
KINDS: tuple[str, ...] = (LODGING, VOYAGE, ATTRACTION)


@dataclass(frozen=True)
class Price:
    amount: float
    currency: str = "USD"
    period: str | None = None  # "night" | "person" | "trip" | None


@dataclass(frozen=True)
class Location:
    city: str
    country: str = ""


@dataclass
class Lodging:
    """A hotel, resort or guesthouse."""

    id: str
    name: str
    location: Location | None = None
    price: Price | None = None
    amenities: list[str] = field(default_factory=list)
    highlights: list[str] = field(default_factory=list)
    rating: float | None = None
    reviews: int = 0
    stars: int | None = None
    description: str = ""

    kind: ClassVar[str] = LODGING


@dataclass
class Voyage:
    """A cruise. Voyages expose a departure port instead of a location."""

    id: str
    name: str
    departure_port: str | None = None
    duration: int = 0  # days
    price: Price | None = None
    destinations: list[str] = field(default_factory=list)
    amenities: list[str] = field(default_factory=list)
    highlights: list[str] = field(default_factory=list)
    rating: float | None = None
    reviews: int = 0
    cruise_line: str = ""
    ship_name: str = ""
    capacity: int | None = None
    description: str = ""

    kind: ClassVar[str] = VOYAGE


@dataclass
class Attraction:
    """A sight or activity. Priced by entry fee, typed by `category`."""

    id: str
    name: str
    location: Location | None = None
    category: str = ""  # "historical" | "nature" | "beach" | ...
    entry_fee: Price | None = None
    highlights: list[str] = field(default_factory=list)
    rating: float | None = None
    reviews: int = 0
    description: str = ""

    kind: ClassVar[str] = ATTRACTION


CatalogItem = Lodging | Voyage | Attraction


def _unknown(item: object) -> TypeError:
    return TypeError(f"Unknown catalog item type: {type(item).__name__}")


def item_kind(item: CatalogItem) -> str:
    match item:
        case Lodging() | Voyage() | Attraction():
            return item.kind
        case _:
            raise _unknown(item)


def item_price(item: CatalogItem) -> Price | None:
    """Nightly/fare price for lodgings and voyages, entry fee for attractions."""
    match item:
        case Lodging(price=price) | Voyage(price=price):
            return price
        case Attraction(entry_fee=fee):
            return fee
        case _:
            raise _unknown(item)


def item_location(item: CatalogItem) -> str | None:
    """City for lodgings and attractions, departure port for voyages."""
    match item:
        case Lodging(location=loc) | Attraction(location=loc):
            return loc.city if loc and loc.city else None
        case Voyage(departure_port=port):
            return port or None
        case _:
            raise _unknown(item)


def item_features(item: CatalogItem) -> list[str]:
    """Amenities for lodgings and voyages, highlights for attractions."""
    match item:
        case Lodging(amenities=amenities) | Voyage(amenities=amenities):
            return list(amenities)
        case Attraction(highlights=highlights):
            return list(highlights)
        case _:
            raise _unknown(item)


def item_rating(item: CatalogItem) -> float | None:
    match item:
        case Lodging(rating=rating) | Voyage(rating=rating) | Attraction(rating=rating):
            return rating
        case _:
            raise _unknown(item)
