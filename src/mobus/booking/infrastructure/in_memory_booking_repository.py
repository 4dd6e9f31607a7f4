import copy
from threading import Lock

from mobus.booking.domain.entity import Booking
from mobus.booking.domain.enum import BookingStatus, PaymentStatus
from mobus.booking.domain.repository import BookingRepository
from mobus.booking.domain.value_object import BookingId, SeatPartition
from mobus.fleet.domain.value_object import RouteId, SeatNumber
from mobus.shared.domain.exception import (
    BookingNotFoundException,
    DuplicateResourceException,
    OptimisticLockException,
    SeatConflictException,
)


class InMemoryBookingRepository(BookingRepository):
    """プロセス内の辞書を使用した BookingRepository の具象実装

    (パーティション, 座席) → 予約ID の索引を持ち、CONFIRMED 予約の座席に
    一意制約をかける。読み書きはすべて内部ロックの中で行い、
    呼び出し側とはエンティティのコピーを受け渡す（保存前の変更が他から見えないように）。
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._bookings: dict[BookingId, Booking] = {}
        self._seat_owners: dict[str, dict[SeatNumber, BookingId]] = {}

    def save(self, booking: Booking) -> None:
        with self._lock:
            if booking.id in self._bookings:
                raise DuplicateResourceException(f"Booking already exists: {booking.id}")

            if booking.holds_seats:
                owners = self._seat_owners.setdefault(booking.partition.key, {})
                conflicts = [str(seat) for seat in booking.seat_numbers if seat in owners]
                if conflicts:
                    raise SeatConflictException(conflicts)
                for seat in booking.seat_numbers:
                    owners[seat] = booking.id

            self._bookings[booking.id] = copy.deepcopy(booking)

    def update(
        self,
        booking: Booking,
        expected_payment_status: PaymentStatus,
        expected_booking_status: BookingStatus,
    ) -> None:
        with self._lock:
            stored = self._bookings.get(booking.id)
            if stored is None:
                raise BookingNotFoundException(f"Booking not found: {booking.id}")
            if (
                stored.payment_status != expected_payment_status
                or stored.booking_status != expected_booking_status
            ):
                raise OptimisticLockException(
                    f"Booking status conflict: "
                    f"expected {expected_payment_status.value}/{expected_booking_status.value}, "
                    f"booking_id={booking.id}"
                )

            if stored.holds_seats and not booking.holds_seats:
                self._release_seats(stored)

            self._bookings[booking.id] = copy.deepcopy(booking)

    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        with self._lock:
            booking = self._bookings.get(booking_id)
            return copy.deepcopy(booking) if booking is not None else None

    def find_by_partition(self, partition: SeatPartition) -> list[Booking]:
        return self._select(lambda b: b.partition == partition)

    def find_occupied_seats(self, partition: SeatPartition) -> set[SeatNumber]:
        with self._lock:
            occupied: set[SeatNumber] = set()
            for booking in self._bookings.values():
                if booking.partition == partition and booking.holds_seats:
                    occupied.update(booking.seat_numbers)
            return occupied

    def find_by_route_id(self, route_id: RouteId) -> list[Booking]:
        return self._select(lambda b: b.route_id == route_id)

    def find_by_user_id(self, user_id: str) -> list[Booking]:
        return self._select(lambda b: b.user_id == user_id)

    def _select(self, predicate) -> list[Booking]:
        with self._lock:
            return [copy.deepcopy(b) for b in self._bookings.values() if predicate(b)]

    def _release_seats(self, booking: Booking) -> None:
        """予約が保持している座席を索引から外す（ロック保持中に呼ぶ）"""
        owners = self._seat_owners.get(booking.partition.key, {})
        for seat in booking.seat_numbers:
            if owners.get(seat) == booking.id:
                del owners[seat]
        if not owners:
            self._seat_owners.pop(booking.partition.key, None)
