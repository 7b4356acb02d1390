"""Recommendation use cases."""

from .create_recommendation import (
    CreateRecommendationRequest,
    CreateRecommendationUseCase,
    RecommendationInfo,
)
from .get_recommendation import (
    CommentInfo,
    GetRecommendationRequest,
    GetRecommendationResponse,
    GetRecommendationUseCase,
)
from .list_recommendations import (
    ListRecommendationsRequest,
    ListRecommendationsUseCase,
    RecommendationListItem,
)

__all__ = [
    "CommentInfo",
    "CreateRecommendationRequest",
    "CreateRecommendationUseCase",
    "GetRecommendationRequest",
    "GetRecommendationResponse",
    "GetRecommendationUseCase",
    "ListRecommendationsRequest",
    "ListRecommendationsUseCase",
    "RecommendationInfo",
    "RecommendationListItem",
]
