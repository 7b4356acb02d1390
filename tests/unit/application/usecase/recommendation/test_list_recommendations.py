"""Unit tests for the recommendation read use cases."""

from uuid import uuid4

import pytest

from acadly.application.usecase.comment.create_comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from acadly.application.usecase.recommendation.get_recommendation import (
    GetRecommendationRequest,
    GetRecommendationUseCase,
)
from acadly.application.usecase.recommendation.list_recommendations import (
    ListRecommendationsRequest,
    ListRecommendationsUseCase,
)
from acadly.application.usecase.upvote.toggle_upvote import (
    ToggleUpvoteRequest,
    ToggleUpvoteUseCase,
)
from acadly.domain.error import NotFoundError
from acadly.domain.repository import ProfileRepository, RecommendationRepository
from tests.conftest import make_profile, make_recommendation
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _seed(unit_env):
    """An author, a reader who upvoted and commented, and one recommendation."""
    profile_repo = await unit_env.get(ProfileRepository)
    author = await profile_repo.save(make_profile("Dr. Author"))
    reader = await profile_repo.save(make_profile("Dr. Reader"))
    recommendation = await (await unit_env.get(RecommendationRepository)).save(
        make_recommendation(author.id)
    )

    await (await unit_env.get(ToggleUpvoteUseCase)).execute(
        ToggleUpvoteRequest(
            recommendation_id=str(recommendation.id), user_id=str(reader.id)
        )
    )
    await (await unit_env.get(CreateCommentUseCase)).execute(
        CreateCommentRequest(
            recommendation_id=str(recommendation.id),
            content="Attended last year, highly recommended.",
            author_id=str(reader.id),
        )
    )
    return author, reader, recommendation


class TestListRecommendationsUseCase:
    """Tests for ListRecommendationsUseCase."""

    @pytest.mark.asyncio
    async def test_counts_and_viewer_flag(self, unit_env):
        """Each item carries counts, the author's name and the viewer's vote."""
        # Arrange
        author, reader, recommendation = await _seed(unit_env)
        list_recommendations = await unit_env.get(ListRecommendationsUseCase)

        # Act
        as_reader = await list_recommendations.execute(
            ListRecommendationsRequest(viewer_id=str(reader.id))
        )
        as_author = await list_recommendations.execute(
            ListRecommendationsRequest(viewer_id=str(author.id))
        )

        # Assert
        item = as_reader[0]
        assert item.id == str(recommendation.id)
        assert item.author_name == "Dr. Author"
        assert item.comment_count == 1
        assert item.upvote_count == 1
        assert item.has_upvoted is True
        assert as_author[0].has_upvoted is False


class TestGetRecommendationUseCase:
    """Tests for GetRecommendationUseCase."""

    @pytest.mark.asyncio
    async def test_detail_includes_named_comments(self, unit_env):
        # Arrange
        _, reader, recommendation = await _seed(unit_env)
        get_recommendation = await unit_env.get(GetRecommendationUseCase)

        # Act
        detail = await get_recommendation.execute(
            GetRecommendationRequest(
                recommendation_id=str(recommendation.id), viewer_id=str(reader.id)
            )
        )

        # Assert
        assert detail.upvote_count == 1
        assert detail.has_upvoted is True
        assert len(detail.comments) == 1
        assert detail.comments[0].author_name == "Dr. Reader"

    @pytest.mark.asyncio
    async def test_missing_recommendation_raises(self, unit_env):
        viewer = await (await unit_env.get(ProfileRepository)).save(make_profile())
        get_recommendation = await unit_env.get(GetRecommendationUseCase)

        with pytest.raises(NotFoundError):
            await get_recommendation.execute(
                GetRecommendationRequest(
                    recommendation_id=str(uuid4()), viewer_id=str(viewer.id)
                )
            )
