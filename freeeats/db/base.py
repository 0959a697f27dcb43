"""SQLAlchemy Base with every model registered on its metadata."""
from freeeats.models import (  # noqa: F401
    Base,
    Campus,
    FoodPost,
    Notification,
    Review,
    StoredFile,
    User,
)

__all__ = ["Base"]
