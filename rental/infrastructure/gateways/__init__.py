from rental.infrastructure.gateways.notification_http import (
    HttpNotificationGateway,
    NotificationDeliveryError,
)
from rental.infrastructure.gateways.qr_code_encoder import SegnoQrCodeEncoder

__all__ = [
    "HttpNotificationGateway",
    "NotificationDeliveryError",
    "SegnoQrCodeEncoder",
]
