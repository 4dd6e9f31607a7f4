from .booking import BOOKING_TRANSITIONS, PAYMENT_TRANSITIONS, Booking

__all__ = ["Booking", "BOOKING_TRANSITIONS", "PAYMENT_TRANSITIONS"]
