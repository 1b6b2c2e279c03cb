"""Scoring engine: rule-based, explained scores per catalog kind.

Every scorer honors the same contract: score(item, profile) -> RecommendationScore.
Points come from the injected ScoringPolicy; reasons are appended in the
order rules are evaluated. Scores are not normalized across kinds.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from tripwase.models import (
    ATTRACTION,
    LODGING,
    VOYAGE,
    Attraction,
    CatalogItem,
    Lodging,
    Voyage,
    item_features,
    item_kind,
    item_location,
    item_price,
    item_rating,
)
from tripwase.services.personalization.config import (
    PersonalizationConfig,
    ScoringPolicy,
    personalization_config,
)
from tripwase.services.personalization.profile_inference import UserProfile

logger = logging.getLogger(__name__)


@dataclass
class RecommendationScore:
    """A catalog item id with its score and the reasons behind it."""

    item_id: str
    kind: str
    score: float = 0
    reasons: list[str] = field(default_factory=list)

    def award(self, points: float, reason: str) -> None:
        self.score += points
        self.reasons.append(reason)

    def to_dict(self) -> dict:
        return {
            "item_id": self.item_id,
            "kind": self.kind,
            "score": self.score,
            "reasons": list(self.reasons),
        }


class CategoryScorer(ABC):
    """Base scorer with the rules shared across kinds."""

    kind: str = ""
    rating_reason: str = "Excellent rating"
    amenity_reason: str = "Includes amenities you like"

    def __init__(self, policy: ScoringPolicy):
        self.policy = policy

    @abstractmethod
    def score(self, item: CatalogItem, profile: UserProfile) -> RecommendationScore:
        ...

    def rank(
        self,
        items: list[CatalogItem],
        profile: UserProfile,
        limit: int | None = None,
    ) -> list[RecommendationScore]:
        """Score items and sort descending. Ties keep catalog order."""
        scored = [self.score(item, profile) for item in items]
        # list.sort is stable, including with reverse=True
        scored.sort(key=lambda s: s.score, reverse=True)
        if limit is not None:
            scored = scored[:max(limit, 0)]
        return scored

    # ---------- Shared rules ----------

    def _location_rule(self, result: RecommendationScore, item: CatalogItem, profile: UserProfile) -> None:
        location = item_location(item)
        if location and location in profile.preferred_locations:
            result.award(
                self.policy.location_match,
                f"Located in {location}, one of your favorite cities",
            )

    def _budget_rule(self, result: RecommendationScore, item: CatalogItem, profile: UserProfile) -> None:
        price = item_price(item)
        if price is None:
            logger.debug(f"{self.kind} {result.item_id}: no price, budget rule skipped")
            return
        if profile.budget_range.contains(price.amount):
            result.award(self.policy.budget_match, "Within your budget range")

    def _amenity_rule(self, result: RecommendationScore, item: CatalogItem, profile: UserProfile) -> None:
        matching = [a for a in item_features(item) if a in profile.favorite_amenities]
        if matching:
            result.award(
                len(matching) * self.policy.amenity_match,
                f"{self.amenity_reason}: {', '.join(matching)}",
            )

    def _rating_rule(self, result: RecommendationScore, item: CatalogItem) -> None:
        rating = item_rating(item)
        if rating is not None and rating >= self.policy.high_rating_threshold:
            result.award(self.policy.high_rating, self.rating_reason)


class LodgingScorer(CategoryScorer):
    kind = LODGING
    rating_reason = "Excellent guest rating"

    def score(self, item: Lodging, profile: UserProfile) -> RecommendationScore:
        result = RecommendationScore(item_id=item.id, kind=self.kind)
        self._location_rule(result, item, profile)
        self._budget_rule(result, item, profile)
        self._amenity_rule(result, item, profile)
        self._rating_rule(result, item)
        return result


class VoyageScorer(CategoryScorer):
    """Voyages have no city; the departure port rule replaces the location rule."""

    kind = VOYAGE
    rating_reason = "Excellent passenger rating"
    amenity_reason = "Includes onboard facilities you enjoy"

    def score(self, item: Voyage, profile: UserProfile) -> RecommendationScore:
        result = RecommendationScore(item_id=item.id, kind=self.kind)
        self._budget_rule(result, item, profile)
        if self.policy.is_ideal_duration(item.duration):
            result.award(self.policy.ideal_duration, "Ideal vacation length")
        self._amenity_rule(result, item, profile)
        self._rating_rule(result, item)
        if item.departure_port and item.departure_port in profile.preferred_locations:
            result.award(
                self.policy.departure_port_match,
                f"Departs from {item.departure_port}, close to your favorite places",
            )
        return result


class AttractionScorer(CategoryScorer):
    kind = ATTRACTION
    rating_reason = "Highly recommended by visitors"

    def score(self, item: Attraction, profile: UserProfile) -> RecommendationScore:
        result = RecommendationScore(item_id=item.id, kind=self.kind)
        self._location_rule(result, item, profile)
        self._budget_rule(result, item, profile)
        if item.category and item.category in profile.preferred_categories:
            result.award(
                self.policy.category_match,
                f"A {item.category} attraction, the kind you usually enjoy",
            )
        self._rating_rule(result, item)
        self._highlight_rule(result, item, profile)
        return result

    def _highlight_rule(self, result: RecommendationScore, item: Attraction, profile: UserProfile) -> None:
        styles = [s.lower() for s in profile.travel_style]
        relevant = [h for h in item.highlights if any(s in h.lower() for s in styles)]
        if relevant:
            result.award(
                len(relevant) * self.policy.highlight_match,
                f"Includes activities you're interested in: {', '.join(relevant)}",
            )


class ScoringEngine:
    """Dispatches items to the scorer for their kind."""

    def __init__(self, config: PersonalizationConfig = personalization_config):
        policy = config.scoring
        self.scorers: dict[str, CategoryScorer] = {
            LODGING: LodgingScorer(policy),
            VOYAGE: VoyageScorer(policy),
            ATTRACTION: AttractionScorer(policy),
        }

    def scorer_for(self, kind: str) -> CategoryScorer:
        try:
            return self.scorers[kind]
        except KeyError:
            raise ValueError(f"No scorer for kind: {kind}") from None

    def score(self, item: CatalogItem, profile: UserProfile) -> RecommendationScore:
        return self.scorer_for(item_kind(item)).score(item, profile)

    def rank(
        self,
        kind: str,
        items: list[CatalogItem],
        profile: UserProfile,
        limit: int | None = None,
    ) -> list[RecommendationScore]:
        return self.scorer_for(kind).rank(items, profile, limit)


scoring_engine = ScoringEngine()
