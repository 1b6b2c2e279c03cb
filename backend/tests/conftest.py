import pytest

from tripwase.models import (
    Attraction,
    Catalog,
    FavoriteSet,
    Location,
    Lodging,
    Price,
    Voyage,
)


def make_lodging(id, city="Lisbon", amount=120.0, amenities=None, rating=4.0, **kw):
    return Lodging(
        id=id,
        name=f"Hotel {id}",
        location=Location(city=city, country="PT") if city else None,
        price=Price(amount=amount, period="night") if amount is not None else None,
        amenities=amenities or [],
        rating=rating,
        **kw,
    )


def make_voyage(id, port="Miami", amount=900.0, duration=7, amenities=None, rating=4.0, **kw):
    return Voyage(
        id=id,
        name=f"Cruise {id}",
        departure_port=port,
        duration=duration,
        price=Price(amount=amount, period="person") if amount is not None else None,
        amenities=amenities or [],
        rating=rating,
        **kw,
    )


def make_attraction(id, city="Lisbon", category="historical", amount=15.0, highlights=None, rating=4.0, **kw):
    return Attraction(
        id=id,
        name=f"Sight {id}",
        location=Location(city=city, country="PT") if city else None,
        category=category,
        entry_fee=Price(amount=amount) if amount is not None else None,
        highlights=highlights or [],
        rating=rating,
        **kw,
    )


@pytest.fixture
def favorites() -> FavoriteSet:
    return FavoriteSet(
        lodgings=[
            make_lodging("h1", city="Lisbon", amount=100, amenities=["Pool", "WiFi"]),
            make_lodging("h2", city="Porto", amount=300, amenities=["Spa"]),
        ],
        voyages=[
            make_voyage("c1", port="Miami", amount=900, amenities=["Casino"]),
        ],
        attractions=[
            make_attraction("a1", city="Sintra", category="historical", amount=20,
                            highlights=["Guided tour"]),
        ],
    )


@pytest.fixture
def catalog(favorites) -> Catalog:
    return Catalog(
        lodgings=favorites.lodgings + [
            make_lodging("h3", city="Lisbon", amount=150, amenities=["Pool", "Gym"], rating=4.6),
            make_lodging("h4", city="Madrid", amount=2000, rating=3.9),
            make_lodging("h5", city="Porto", amount=250, amenities=["WiFi"], rating=4.2),
        ],
        voyages=favorites.voyages + [
            make_voyage("c2", port="Miami", amount=800, duration=7, amenities=["Casino"], rating=4.8),
            make_voyage("c3", port="Seattle", amount=5000, duration=14, rating=4.0),
        ],
        attractions=favorites.attractions + [
            make_attraction("a2", city="Lisbon", category="historical", amount=25,
                            highlights=["Comfort seating", "Adventure trail"], rating=4.7),
            make_attraction("a3", city="Berlin", category="nightlife", amount=0, rating=3.5),
        ],
    )
