from freeeats.repositories.notification.notification_repository import NotificationRepository

__all__ = ["NotificationRepository"]
