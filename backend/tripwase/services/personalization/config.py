"""Personalization configuration: single source for all scoring constants."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ScoringPolicy:
    """Points awarded per rule. All rules are additive."""
    location_match: int = 30          # item city in preferred locations
    budget_match: int = 25            # price within inferred budget range
    amenity_match: int = 5            # per amenity shared with favorites
    highlight_match: int = 3          # per attraction highlight matching travel style
    high_rating: int = 10
    high_rating_threshold: float = 4.5
    category_match: int = 20          # attraction category in preferred categories
    departure_port_match: int = 20    # voyage port in preferred locations
    ideal_duration: int = 15          # voyage length in the ideal window
    ideal_duration_min_days: int = 5
    ideal_duration_max_days: int = 10

    def is_ideal_duration(self, days: int) -> bool:
        return self.ideal_duration_min_days <= days <= self.ideal_duration_max_days


@dataclass(frozen=True)
class ProfileDefaults:
    """Fallbacks used when favorites carry no signal."""
    budget_min: float = 0.0
    budget_max: float = 1000.0
    travel_style: tuple[str, ...] = ("comfort", "adventure")
    attraction_category: str = "general"


@dataclass(frozen=True)
class AggregationConfig:
    """Gating, limits and summary thresholds for recommendation output."""
    min_favorites: int = 2
    high_score_threshold: float = 50.0
    lodging_limit: int = 8
    voyage_limit: int = 6
    attraction_limit: int = 10
    top_limit: int = 5

    def limit_for(self, kind: str) -> int:
        return getattr(self, f"{kind}_limit")


@dataclass(frozen=True)
class PersonalizationConfig:
    """Top-level config aggregating all sub-configs."""
    scoring: ScoringPolicy = field(default_factory=ScoringPolicy)
    profile: ProfileDefaults = field(default_factory=ProfileDefaults)
    aggregation: AggregationConfig = field(default_factory=AggregationConfig)


# Singleton
personalization_config = PersonalizationConfig()
