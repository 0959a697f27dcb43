"""
Enumerations persisted in the database and exchanged on the wire.

Values are part of the client contract and must not change.
"""

from enum import Enum


class FoodType(str, Enum):
    """Food categories a post can belong to"""
    PIZZA = "pizza"
    SANDWICHES = "sandwiches"
    SNACKS = "snacks"
    DRINKS = "drinks"
    DESSERTS = "desserts"
    ASIAN = "asian"
    MEXICAN = "mexican"
    OTHER = "other"


class DietaryTag(str, Enum):
    """Dietary labels for posts and user restrictions"""
    VEGETARIAN = "vegetarian"
    VEGAN = "vegan"
    HALAL = "halal"
    KOSHER = "kosher"
    GLUTEN_FREE = "gluten-free"
    DAIRY_FREE = "dairy-free"
    NUT_FREE = "nut-free"


class NotificationType(str, Enum):
    """In-app notification kinds"""
    FOOD_REPORTED_GONE = "food_reported_gone"
    FOOD_EXPIRED = "food_expired"


class FileStatus(str, Enum):
    """Stored object upload state"""
    PENDING = "pending"
    UPLOADED = "uploaded"
