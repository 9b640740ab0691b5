"""
Review Routes.

Append and remove reviews on a blog, and read every review across blogs.
"""

from logging import getLogger

from fastapi import APIRouter

from blog_api.configs import file_logger
from blog_api.dependencies import BlogRepoDep, EngagementDep
from blog_api.models import BlogReviewDB
from blog_api.schemas import ReviewCreate, ReviewFeedItem, ReviewMutationResponse, ReviewResponse

router = APIRouter(tags=["⭐ Reviews"])

logger = file_logger(getLogger(__name__))


def _mutation_response(message: str, reviews: list[BlogReviewDB]) -> ReviewMutationResponse:
    return ReviewMutationResponse(
        message=message,
        reviews=[ReviewResponse.model_validate(review, from_attributes=True) for review in reviews],
    )


@router.post(
    "/blogs/{blog_id}/reviews",
    response_model=ReviewMutationResponse,
    summary="Add a review to a blog",
    description="Append a review. A `reviewId` is generated when the caller omits one.",
    responses={
        400: {
            "description": "Malformed blog id",
            "content": {"application/json": {"example": {"detail": "Invalid blog ID"}}},
        },
        404: {
            "description": "Blog not found",
            "content": {"application/json": {"example": {"detail": "Blog not found"}}},
        },
    },
    operation_id="reviews_add",
)
async def add_review(
    blog_id: str,
    review: ReviewCreate,
    repo: BlogRepoDep,
) -> ReviewMutationResponse:
    reviews = await repo.add_review(blog_id, review)
    return _mutation_response("Review added successfully", reviews)


@router.delete(
    "/blogs/{blog_id}/reviews/{review_id}",
    response_model=ReviewMutationResponse,
    summary="Remove a review from a blog",
    responses={
        404: {
            "description": "Blog or review not found",
            "content": {"application/json": {"example": {"detail": "Review not found"}}},
        },
    },
    operation_id="reviews_remove",
)
async def remove_review(
    blog_id: str,
    review_id: str,
    repo: BlogRepoDep,
) -> ReviewMutationResponse:
    """
    Remove exactly one review, keeping the order of the rest.

    Parameters
    ----------
    blog_id : str
        Parent blog identifier.
    review_id : str
        Identifier of the review to remove.
    repo : BlogRepository
        Repository dependency.

    Returns
    -------
    ReviewMutationResponse
        Acknowledgement with the remaining reviews.
    """
    reviews = await repo.remove_review(blog_id, review_id)
    return _mutation_response("Review deleted successfully", reviews)


@router.get(
    "/reviews",
    response_model=list[ReviewFeedItem],
    summary="List every review across all blogs",
    operation_id="reviews_list_all",
)
async def list_reviews(engagement: EngagementDep) -> list[ReviewFeedItem]:
    return await engagement.all_reviews()
