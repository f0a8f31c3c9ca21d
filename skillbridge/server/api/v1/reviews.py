"""
Review Endpoints.
"""

from fastapi import APIRouter, status

from skillbridge.core.models.io.reviews import ReviewCreate, ReviewRead, ReviewResponse, TutorReviewsResponse
from skillbridge.server.services import reviews as review_service
from skillbridge.server.services.deps import ReposDep, StudentDep
from skillbridge.server.services.views import reviews_with_students

router = APIRouter(tags=["reviews"])


@router.post(
    "",
    response_model=ReviewResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create Review",
    description="Rate a completed booking. Updates the tutor's average rating.",
    responses={
        400: {"description": "Booking not completed or already reviewed"},
        403: {"description": "Not the caller's booking"},
        404: {"description": "Booking not found"},
    },
)
async def create_review(data: ReviewCreate, student: StudentDep, repos: ReposDep) -> ReviewResponse:
    review = await review_service.create_review(repos, student, data)
    return ReviewResponse(message="Review created successfully", review=ReviewRead.model_validate(review))


@router.get(
    "/tutor/{tutor_id}",
    response_model=TutorReviewsResponse,
    summary="Tutor Reviews",
    description="All reviews of a tutor, newest first, with the average and a 1-5 star histogram.",
)
async def list_tutor_reviews(tutor_id: str, repos: ReposDep) -> TutorReviewsResponse:
    reviews = await repos.reviews.list_for_tutor(tutor_id)
    return TutorReviewsResponse(
        reviews=await reviews_with_students(repos, reviews),
        count=len(reviews),
        avg_rating=review_service.average_rating(reviews),
        rating_distribution=review_service.rating_distribution(reviews),
    )
