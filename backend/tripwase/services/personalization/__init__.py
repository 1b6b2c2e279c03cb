"""Personalization engine: favorites-driven travel recommendations.

Modules:
    config              Scoring policy, profile defaults and aggregation limits
    profile_inference   Builds a UserProfile from a traveler's favorites
    scoring             One rule-based scorer per catalog kind
    aggregator          Gating, exclusion, ranking, item resolution and stats

Pipeline:
    FavoriteSet → ProfileInferenceEngine → UserProfile
    → ScoringEngine (lodging / voyage / attraction) → RecommendationAggregator
"""
