from freeeats.services.review.review_service import ReviewService, average_rating

__all__ = ["ReviewService", "average_rating"]
