"""Recommendation aggregator: turns favorites + catalog into ranked suggestions.

Steps:
  1. Gate on favorite count (too few favorites is a normal empty result)
  2. Exclude items the traveler already saved, per kind
  3. Rank each kind with its scorer, capped per kind
  4. Merge kinds into one cross-kind ranking on demand
  5. Resolve ids back to catalog items, dropping ids that no longer resolve
  6. Summary statistics over everything returned
"""

import logging
from dataclasses import asdict, dataclass, field

from tripwase.models import KINDS, Catalog, CatalogItem, FavoriteSet
from tripwase.services.personalization.config import (
    PersonalizationConfig,
    personalization_config,
)
from tripwase.services.personalization.profile_inference import (
    ProfileInferenceEngine,
    UserProfile,
)
from tripwase.services.personalization.scoring import RecommendationScore, ScoringEngine

logger = logging.getLogger(__name__)


@dataclass
class RecommendationStats:
    total: int = 0
    high_score: int = 0
    average_score: float = 0.0

    def to_dict(self) -> dict:
        return {
            "total_recommendations": self.total,
            "high_score_recommendations": self.high_score,
            "average_score": round(self.average_score, 2),
        }


@dataclass
class ResolvedRecommendation:
    """A score joined back to the full catalog item."""

    score: RecommendationScore
    item: CatalogItem

    def to_dict(self) -> dict:
        return {**self.score.to_dict(), "item": {"kind": self.item.kind, **asdict(self.item)}}


@dataclass
class RecommendationResult:
    has_sufficient_data: bool
    profile: UserProfile | None
    recommendations: dict[str, list[RecommendationScore]] = field(
        default_factory=lambda: {kind: [] for kind in KINDS}
    )
    stats: RecommendationStats = field(default_factory=RecommendationStats)

    def all_scores(self) -> list[RecommendationScore]:
        return [s for kind in KINDS for s in self.recommendations.get(kind, [])]

    def to_dict(self) -> dict:
        return {
            "has_sufficient_data": self.has_sufficient_data,
            "profile": self.profile.to_dict() if self.profile else None,
            "recommendations": {
                kind: [s.to_dict() for s in scores]
                for kind, scores in self.recommendations.items()
            },
            "stats": self.stats.to_dict(),
        }


class RecommendationAggregator:
    """Runs the full recommendation pipeline for one traveler."""

    def __init__(
        self,
        config: PersonalizationConfig = personalization_config,
        inference: ProfileInferenceEngine | None = None,
        engine: ScoringEngine | None = None,
    ):
        self.cfg = config.aggregation
        self.inference = inference or ProfileInferenceEngine(config)
        self.engine = engine or ScoringEngine(config)

    def has_sufficient_data(self, favorites: FavoriteSet) -> bool:
        return favorites.total >= self.cfg.min_favorites

    def generate(
        self,
        favorites: FavoriteSet,
        catalog: Catalog,
        limits: dict[str, int] | None = None,
        enabled: bool = True,
    ) -> RecommendationResult:
        """Profile the favorites and rank unsaved catalog items per kind."""
        sufficient = self.has_sufficient_data(favorites)
        if not enabled or not sufficient:
            logger.debug(
                f"Recommendations skipped (enabled={enabled}, favorites={favorites.total})"
            )
            return RecommendationResult(has_sufficient_data=sufficient, profile=None)

        profile = self.inference.infer(favorites)
        limits = limits or {}

        recommendations: dict[str, list[RecommendationScore]] = {}
        for kind in KINDS:
            saved = favorites.ids(kind)
            candidates = [i for i in catalog.items(kind) if i.id not in saved]
            limit = limits.get(kind, self.cfg.limit_for(kind))
            recommendations[kind] = self.engine.rank(kind, candidates, profile, limit)

        result = RecommendationResult(
            has_sufficient_data=True,
            profile=profile,
            recommendations=recommendations,
        )
        result.stats = self.compute_stats(result.all_scores())
        logger.info(
            f"Generated {result.stats.total} recommendations "
            f"({result.stats.high_score} high-score, avg {result.stats.average_score:.1f}) "
            f"from {favorites.total} favorites"
        )
        return result

    def compute_stats(self, scores: list[RecommendationScore]) -> RecommendationStats:
        if not scores:
            return RecommendationStats()
        values = [s.score for s in scores]
        return RecommendationStats(
            total=len(values),
            high_score=sum(1 for v in values if v >= self.cfg.high_score_threshold),
            average_score=sum(values) / len(values),
        )

    def resolve(
        self, scores: list[RecommendationScore], catalog: Catalog
    ) -> list[ResolvedRecommendation]:
        """Join scores to catalog items. Unknown ids are dropped, not fatal."""
        resolved = []
        for s in scores:
            item = catalog.find(s.kind, s.item_id)
            if item is None:
                logger.warning(f"Recommendation {s.kind}:{s.item_id} not found in catalog, dropped")
                continue
            resolved.append(ResolvedRecommendation(score=s, item=item))
        return resolved

    def with_items(
        self, result: RecommendationResult, catalog: Catalog, kind: str
    ) -> list[ResolvedRecommendation]:
        return self.resolve(result.recommendations.get(kind, []), catalog)

    def top_recommendations(
        self,
        result: RecommendationResult,
        catalog: Catalog,
        limit: int | None = None,
    ) -> list[ResolvedRecommendation]:
        """Best recommendations across every kind, by raw score."""
        limit = self.cfg.top_limit if limit is None else limit
        merged = result.all_scores()
        merged.sort(key=lambda s: s.score, reverse=True)
        return self.resolve(merged[:max(limit, 0)], catalog)


recommendation_aggregator = RecommendationAggregator()
