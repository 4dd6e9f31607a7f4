from mobus.booking.domain.entity import Booking
from mobus.booking.domain.repository import BookingRepository
from mobus.booking.domain.service import SeatInventoryResolver
from mobus.booking.domain.value_object import BookingId
from mobus.fleet.domain.value_object import RouteId, SeatNumber
from mobus.shared.domain import TravelDate
from mobus.shared.domain.exception import BookingNotFoundException


class BookingQueryService:
    """予約の参照系ユースケース"""

    def __init__(self, repository: BookingRepository, resolver: SeatInventoryResolver) -> None:
        self._repository = repository
        self._resolver = resolver

    def get(self, booking_id: BookingId) -> Booking:
        booking = self._repository.find_by_id(booking_id)
        if booking is None:
            raise BookingNotFoundException(f"Booking not found: {booking_id}")
        return booking

    def list_for_user(self, user_id: str) -> list[Booking]:
        """利用者の予約履歴（新しい順）"""
        bookings = self._repository.find_by_user_id(user_id)
        return sorted(bookings, key=lambda b: b.created_at, reverse=True)

    def occupied_seats(self, route_id: RouteId, travel_date: TravelDate) -> list[SeatNumber]:
        """座席表描画用の占有座席（座席表の並び順）"""
        occupied = self._resolver.resolve_occupied(route_id, travel_date)
        return sorted(occupied, key=lambda seat: seat.position)
