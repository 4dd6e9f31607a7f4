from .create_booking import CreateBookingService
from .query_bookings import BookingQueryService
from .update_booking_status import UpdateBookingStatusService

__all__ = ["CreateBookingService", "BookingQueryService", "UpdateBookingStatusService"]
