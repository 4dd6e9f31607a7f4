from .booking_id import BookingId
from .passenger_contact import PassengerContact
from .seat_partition import SeatPartition

__all__ = ["BookingId", "PassengerContact", "SeatPartition"]
