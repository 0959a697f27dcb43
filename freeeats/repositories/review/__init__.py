from freeeats.repositories.review.review_repository import ReviewRepository

__all__ = ["ReviewRepository"]
