from freeeats.services.food.feed_ranking import rank_feed
from freeeats.services.food.food_post_service import FoodPostService

__all__ = ["FoodPostService", "rank_feed"]
