"""Recommendations router: favorites-driven profile and suggestions."""

import logging

from fastapi import APIRouter

from tripwase.config import settings
from tripwase.schemas.recommendations import ProfileRequest, RecommendationRequest
from tripwase.services.personalization.aggregator import recommendation_aggregator
from tripwase.services.personalization.profile_inference import profile_inference_engine

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("")
async def generate_recommendations(req: RecommendationRequest):
    """Rank unsaved catalog items against the profile inferred from favorites."""
    favorites = req.favorites.to_favorites()
    catalog = req.catalog.to_domain()

    result = recommendation_aggregator.generate(
        favorites,
        catalog,
        limits=req.limits,
        enabled=settings.recommendations_enabled,
    )
    top = recommendation_aggregator.top_recommendations(result, catalog, req.top_limit)
    logger.info(f"Recommendations: {favorites.total} favorites, {len(top)} top picks")

    return {
        **result.to_dict(),
        "top": [r.to_dict() for r in top],
    }


@router.post("/profile")
async def infer_profile(req: ProfileRequest):
    """Preference profile inferred from a traveler's favorites."""
    favorites = req.favorites.to_favorites()
    profile = profile_inference_engine.infer(favorites)
    return {
        "favorites_count": favorites.total,
        "has_sufficient_data": recommendation_aggregator.has_sufficient_data(favorites),
        "profile": profile.to_dict(),
    }
