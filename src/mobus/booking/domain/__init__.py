from .entity import Booking
from .enum import BookingChannel, BookingStatus, PaymentMethod, PaymentStatus
from .event import SeatsReleased
from .factory import BookingDetails, BookingFactory
from .repository import BookingRepository
from .service import SeatInventoryResolver
from .value_object import BookingId, PassengerContact, SeatPartition

__all__ = [
    "Booking",
    "BookingChannel",
    "BookingStatus",
    "PaymentMethod",
    "PaymentStatus",
    "SeatsReleased",
    "BookingDetails",
    "BookingFactory",
    "BookingRepository",
    "SeatInventoryResolver",
    "BookingId",
    "PassengerContact",
    "SeatPartition",
]
