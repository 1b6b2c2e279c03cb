"""Favorite sets and catalogs: items grouped by kind."""

from dataclasses import dataclass, field

from tripwase.models.catalog import (
    ATTRACTION,
    KINDS,
    LODGING,
    VOYAGE,
    Attraction,
    CatalogItem,
    Lodging,
    Voyage,
    item_kind,
)


@dataclass
class Catalog:
    """Read-only universe of recommendable items, per kind."""

    lodgings: list[Lodging] = field(default_factory=list)
    voyages: list[Voyage] = field(default_factory=list)
    attractions: list[Attraction] = field(default_factory=list)

    def items(self, kind: str) -> list[CatalogItem]:
        if kind == LODGING:
            return self.lodgings
        if kind == VOYAGE:
            return self.voyages
        if kind == ATTRACTION:
            return self.attractions
        raise ValueError(f"Unknown catalog kind: {kind}")

    def all_items(self) -> list[CatalogItem]:
        return [item for kind in KINDS for item in self.items(kind)]

    def find(self, kind: str, item_id: str) -> CatalogItem | None:
        return next((i for i in self.items(kind) if i.id == item_id), None)

    @property
    def total(self) -> int:
        return sum(len(self.items(kind)) for kind in KINDS)


@dataclass
class FavoriteSet(Catalog):
    """A traveler's saved items. Ids are unique within each kind.

    Duplicates passed at construction are dropped (first occurrence wins);
    `add` of an existing id replaces the entry and moves it to the end.
    """

    def __post_init__(self) -> None:
        self.lodgings = _dedup(self.lodgings)
        self.voyages = _dedup(self.voyages)
        self.attractions = _dedup(self.attractions)

    def ids(self, kind: str) -> set[str]:
        return {i.id for i in self.items(kind)}

    def is_favorite(self, kind: str, item_id: str) -> bool:
        return item_id in self.ids(kind)

    def add(self, item: CatalogItem) -> None:
        bucket = self.items(item_kind(item))
        bucket[:] = [i for i in bucket if i.id != item.id]
        bucket.append(item)

    def remove(self, kind: str, item_id: str) -> None:
        bucket = self.items(kind)
        bucket[:] = [i for i in bucket if i.id != item_id]


def _dedup(items: list) -> list:
    seen: set[str] = set()
    unique = []
    for item in items:
        if item.id in seen:
            continue
        seen.add(item.id)
        unique.append(item)
    return unique
