from dataclasses import dataclass

from mobus.booking.domain.entity import Booking
from mobus.booking.domain.enum import PaymentStatus
from mobus.booking.domain.repository import BookingRepository
from mobus.fleet.domain.repository import BusRepository, RouteRepository
from mobus.fleet.domain.value_object import OperatorId
from mobus.shared.domain import Currency, Money


@dataclass(frozen=True)
class OperatorRevenue:
    """運行会社の売上集計"""

    operator_id: OperatorId
    total_bookings: int
    paid_bookings: int
    total_revenue: Money


class OperatorRevenueService:
    """運行会社の売上集計ユースケース

    運行会社 → バス → 路線 → 予約 の順に辿り、決済済み（paid）の予約金額を合計する。
    """

    def __init__(
        self,
        bus_repository: BusRepository,
        route_repository: RouteRepository,
        booking_repository: BookingRepository,
        default_currency: Currency | None = None,
    ) -> None:
        self._bus_repository = bus_repository
        self._route_repository = route_repository
        self._booking_repository = booking_repository
        self._default_currency = default_currency or Currency.usd()

    def report(self, operator_id: OperatorId) -> OperatorRevenue:
        bookings = self._operator_bookings(operator_id)
        paid = [b for b in bookings if b.payment_status == PaymentStatus.PAID]

        currency = paid[0].total_amount.currency if paid else self._default_currency
        total = Money.zero(currency)
        for booking in paid:
            total = total.add(booking.total_amount)

        return OperatorRevenue(
            operator_id=operator_id,
            total_bookings=len(bookings),
            paid_bookings=len(paid),
            total_revenue=total,
        )

    def _operator_bookings(self, operator_id: OperatorId) -> list[Booking]:
        bookings: list[Booking] = []
        for bus in self._bus_repository.find_by_operator_id(operator_id):
            for route in self._route_repository.find_by_bus_id(bus.id):
                bookings.extend(self._booking_repository.find_by_route_id(route.id))
        return bookings
