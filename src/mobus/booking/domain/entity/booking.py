from datetime import datetime, timezone

from mobus.booking.domain.enum import (
    BookingChannel,
    BookingStatus,
    PaymentMethod,
    PaymentStatus,
)
from mobus.booking.domain.event import SeatsReleased
from mobus.booking.domain.value_object import BookingId, PassengerContact, SeatPartition
from mobus.fleet.domain.value_object import RouteId, SeatNumber
from mobus.shared.domain import AggregateRoot, Money, TravelDate
from mobus.shared.domain.exception import (
    BusinessRuleViolationException,
    InvalidTransitionException,
)

# 許可されるステータス遷移。キーにない状態は終端
PAYMENT_TRANSITIONS: dict[PaymentStatus, frozenset[PaymentStatus]] = {
    PaymentStatus.PENDING: frozenset({PaymentStatus.PAID, PaymentStatus.FAILED}),
    PaymentStatus.PAID: frozenset({PaymentStatus.REFUNDED}),
}

BOOKING_TRANSITIONS: dict[BookingStatus, frozenset[BookingStatus]] = {
    BookingStatus.CONFIRMED: frozenset({BookingStatus.CANCELLED}),
}


class Booking(AggregateRoot[BookingId]):
    """座席予約エンティティ

    座席確保の最小単位。物理削除はせず、キャンセルはステータスで表す。
    CONFIRMED の予約だけが (路線, 乗車日) の座席を占有する。
    決済が PENDING のままでも座席は確保されたままになる。
    """

    def __init__(
        self,
        id: BookingId,
        route_id: RouteId,
        travel_date: TravelDate,
        passenger: PassengerContact,
        seat_numbers: list[SeatNumber],
        total_amount: Money,
        payment_status: PaymentStatus = PaymentStatus.PENDING,
        booking_status: BookingStatus = BookingStatus.CONFIRMED,
        booked_by: BookingChannel = BookingChannel.PASSENGER,
        agent_id: str | None = None,
        user_id: str | None = None,
        payment_method: PaymentMethod | None = None,
        created_at: datetime | None = None,
    ) -> None:
        super().__init__(id)
        self._route_id = route_id
        self._travel_date = travel_date
        self._passenger = passenger
        self._seat_numbers = list(seat_numbers)
        self._total_amount = total_amount
        self._payment_status = payment_status
        self._booking_status = booking_status
        self._booked_by = booked_by
        self._agent_id = agent_id
        self._user_id = user_id
        self._payment_method = payment_method
        self._created_at = created_at or datetime.now(timezone.utc)

        self._validate_seats()
        self._validate_channel()

    def _validate_seats(self) -> None:
        if not self._seat_numbers:
            raise BusinessRuleViolationException("Booking must hold at least one seat")
        if len(set(self._seat_numbers)) != len(self._seat_numbers):
            raise BusinessRuleViolationException("Booking cannot hold the same seat twice")

    def _validate_channel(self) -> None:
        """代理店経由の予約には代理店IDが必須"""
        if self._booked_by == BookingChannel.AGENT and not self._agent_id:
            raise BusinessRuleViolationException("Agent bookings require an agent_id")

    @property
    def route_id(self) -> RouteId:
        return self._route_id

    @property
    def travel_date(self) -> TravelDate:
        return self._travel_date

    @property
    def partition(self) -> SeatPartition:
        return SeatPartition(route_id=self._route_id, travel_date=self._travel_date)

    @property
    def passenger(self) -> PassengerContact:
        return self._passenger

    @property
    def seat_numbers(self) -> list[SeatNumber]:
        return list(self._seat_numbers)

    @property
    def total_amount(self) -> Money:
        return self._total_amount

    @property
    def payment_status(self) -> PaymentStatus:
        return self._payment_status

    @property
    def booking_status(self) -> BookingStatus:
        return self._booking_status

    @property
    def booked_by(self) -> BookingChannel:
        return self._booked_by

    @property
    def agent_id(self) -> str | None:
        return self._agent_id

    @property
    def user_id(self) -> str | None:
        return self._user_id

    @property
    def payment_method(self) -> PaymentMethod | None:
        return self._payment_method

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def holds_seats(self) -> bool:
        """座席を占有しているかどうか"""
        return self._booking_status == BookingStatus.CONFIRMED

    def change_status(
        self,
        payment_status: PaymentStatus | None = None,
        booking_status: BookingStatus | None = None,
    ) -> None:
        """決済ステータス・予約ステータスを変更する

        両方の遷移を検証してから反映するため、片方だけが変わることはない。
        キャンセル済みの予約を再度キャンセルすると InvalidTransitionException。
        """
        if payment_status is None and booking_status is None:
            raise BusinessRuleViolationException("No status change requested")

        if payment_status is not None:
            _ensure_transition(
                "payment", self._payment_status, payment_status, PAYMENT_TRANSITIONS
            )
        if booking_status is not None:
            _ensure_transition(
                "booking", self._booking_status, booking_status, BOOKING_TRANSITIONS
            )

        if payment_status is not None:
            self._payment_status = payment_status
        if booking_status is not None:
            self._booking_status = booking_status
            if booking_status == BookingStatus.CANCELLED:
                self.add_domain_event(
                    SeatsReleased(
                        booking_id=self.id,
                        partition=self.partition,
                        seat_numbers=tuple(str(seat) for seat in self._seat_numbers),
                    )
                )


def _ensure_transition(kind: str, current, target, transitions: dict) -> None:
    if target not in transitions.get(current, frozenset()):
        raise InvalidTransitionException(
            f"Cannot change {kind} status from {current.value} to {target.value}"
        )
