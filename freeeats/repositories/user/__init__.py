from freeeats.repositories.user.user_repository import UserRepository

__all__ = ["UserRepository"]
