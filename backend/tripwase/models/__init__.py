from tripwase.models.catalog import (
    ATTRACTION,
    KINDS,
    LODGING,
    VOYAGE,
    Attraction,
    CatalogItem,
    Location,
    Lodging,
    Price,
    Voyage,
    item_features,
    item_kind,
    item_location,
    item_price,
    item_rating,
)
from tripwase.models.favorites import Catalog, FavoriteSet
