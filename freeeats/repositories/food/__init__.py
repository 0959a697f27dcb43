from freeeats.repositories.food.food_post_repository import FoodPostRepository

__all__ = ["FoodPostRepository"]
