from rental.infrastructure.messaging.notification_dispatcher import NotificationDispatcher

__all__ = ["NotificationDispatcher"]
