from pydantic import BaseModel

from tripwase.models import Attraction, Catalog, FavoriteSet, Location, Lodging, Price, Voyage


class PriceSchema(BaseModel):
    amount: float
    currency: str = "USD"
    period: str | None = None

    def to_domain(self) -> Price:
        return Price(amount=self.amount, currency=self.currency, period=self.period)


class LocationSchema(BaseModel):
    city: str
    country: str = ""

    def to_domain(self) -> Location:
        return Location(city=self.city, country=self.country)


class LodgingSchema(BaseModel):
    id: str
    name: str
    location: LocationSchema | None = None
    price: PriceSchema | None = None
    amenities: list[str] = []
    highlights: list[str] = []
    rating: float | None = None
    reviews: int = 0
    stars: int | None = None
    description: str = ""

    def to_domain(self) -> Lodging:
        return Lodging(
            **self.model_dump(exclude={"location", "price"}),
            location=self.location.to_domain() if self.location else None,
            price=self.price.to_domain() if self.price else None,
        )


class VoyageSchema(BaseModel):
    id: str
    name: str
    departure_port: str | None = None
    duration: int = 0
    price: PriceSchema | None = None
    destinations: list[str] = []
    amenities: list[str] = []
    highlights: list[str] = []
    rating: float | None = None
    reviews: int = 0
    cruise_line: str = ""
    ship_name: str = ""
    capacity: int | None = None
    description: str = ""

    def to_domain(self) -> Voyage:
        return Voyage(
            **self.model_dump(exclude={"price"}),
            price=self.price.to_domain() if self.price else None,
        )


class AttractionSchema(BaseModel):
    id: str
    name: str
    location: LocationSchema | None = None
    category: str = ""
    entry_fee: PriceSchema | None = None
    highlights: list[str] = []
    rating: float | None = None
    reviews: int = 0
    description: str = ""

    def to_domain(self) -> Attraction:
        return Attraction(
            **self.model_dump(exclude={"location", "entry_fee"}),
            location=self.location.to_domain() if self.location else None,
            entry_fee=self.entry_fee.to_domain() if self.entry_fee else None,
        )


class CatalogSchema(BaseModel):
    lodgings: list[LodgingSchema] = []
    voyages: list[VoyageSchema] = []
    attractions: list[AttractionSchema] = []

    def to_domain(self) -> Catalog:
        return Catalog(
            lodgings=[i.to_domain() for i in self.lodgings],
            voyages=[i.to_domain() for i in self.voyages],
            attractions=[i.to_domain() for i in self.attractions],
        )

    def to_favorites(self) -> FavoriteSet:
        return FavoriteSet(
            lodgings=[i.to_domain() for i in self.lodgings],
            voyages=[i.to_domain() for i in self.voyages],
            attractions=[i.to_domain() for i in self.attractions],
        )
