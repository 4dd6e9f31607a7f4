from .booking_channel import BookingChannel
from .booking_status import BookingStatus
from .payment_method import PaymentMethod
from .payment_status import PaymentStatus

__all__ = ["BookingChannel", "BookingStatus", "PaymentMethod", "PaymentStatus"]
