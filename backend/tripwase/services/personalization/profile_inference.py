"""Profile inference: derives traveler preferences from saved favorites."""

import logging
from dataclasses import dataclass, field

from tripwase.models import (
    ATTRACTION,
    FavoriteSet,
    item_features,
    item_location,
    item_price,
)
from tripwase.services.personalization.config import (
    PersonalizationConfig,
    ProfileDefaults,
    personalization_config,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BudgetRange:
    min: float
    max: float

    def contains(self, amount: float) -> bool:
        return self.min <= amount <= self.max


def _default_budget(defaults: ProfileDefaults = personalization_config.profile) -> BudgetRange:
    return BudgetRange(defaults.budget_min, defaults.budget_max)


@dataclass
class UserProfile:
    """Preference summary inferred from a FavoriteSet. Never persisted."""

    preferred_locations: set[str] = field(default_factory=set)
    budget_range: BudgetRange = field(default_factory=_default_budget)
    favorite_amenities: set[str] = field(default_factory=set)
    preferred_categories: set[str] = field(default_factory=set)
    travel_style: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "preferred_locations": sorted(self.preferred_locations),
            "budget_range": {"min": self.budget_range.min, "max": self.budget_range.max},
            "favorite_amenities": sorted(self.favorite_amenities),
            "preferred_categories": sorted(self.preferred_categories),
            "travel_style": list(self.travel_style),
        }


class ProfileInferenceEngine:
    """Turns a traveler's favorites into a UserProfile."""

    def __init__(self, config: PersonalizationConfig = personalization_config):
        self.defaults = config.profile

    def infer(self, favorites: FavoriteSet) -> UserProfile:
        items = favorites.all_items()

        locations = {loc for loc in (item_location(i) for i in items) if loc}

        # Zero or missing prices carry no budget signal
        prices = [
            price.amount
            for price in (item_price(i) for i in items)
            if price is not None and price.amount > 0
        ]
        if prices:
            budget = BudgetRange(min(prices), max(prices))
        else:
            budget = _default_budget(self.defaults)

        amenities: set[str] = set()
        for item in items:
            amenities.update(item_features(item))

        categories = {
            a.category or self.defaults.attraction_category
            for a in favorites.items(ATTRACTION)
        }

        profile = UserProfile(
            preferred_locations=locations,
            budget_range=budget,
            favorite_amenities=amenities,
            preferred_categories=categories,
            travel_style=list(self.defaults.travel_style),
        )
        logger.debug(
            f"Inferred profile from {len(items)} favorites: {len(locations)} locations, "
            f"budget {budget.min:.2f}-{budget.max:.2f}, {len(amenities)} amenities, "
            f"{len(categories)} categories"
        )
        return profile


profile_inference_engine = ProfileInferenceEngine()
