from freeeats.services.notification.notification_service import NotificationService

__all__ = ["NotificationService"]
