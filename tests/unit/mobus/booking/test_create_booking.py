from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from mobus.booking.applications import CreateBookingService
from mobus.booking.domain.enum import BookingStatus, PaymentStatus
from mobus.booking.domain.factory import BookingFactory
from mobus.booking.domain.service import SeatInventoryResolver
from mobus.booking.domain.value_object import SeatPartition
from mobus.booking.infrastructure import PartitionLockRegistry
from mobus.fleet.domain.value_object import RouteId, SeatNumber
from mobus.shared.domain import Money, TravelDate
from mobus.shared.domain.exception import (
    BusNotFoundException,
    InvalidSeatNumberException,
    PartitionBusyException,
    RouteInactiveException,
    RouteNotFoundException,
    SeatConflictException,
)

TRAVEL_DATE = TravelDate("2025-01-01")
PARTITION = SeatPartition(RouteId("route-1"), TRAVEL_DATE)


class TestCreateBookingService:
    def test_create_saves_confirmed_booking(self, container, booking_details):
        """座席が空いていれば CONFIRMED で保存され、合計金額が計算される"""

        # Act
        booking = container.create_booking.create(
            RouteId("route-1"), TRAVEL_DATE, booking_details(seat_numbers=("3A", "3B"))
        )

        # Assert
        assert booking.booking_status == BookingStatus.CONFIRMED
        assert booking.total_amount == Money.usd(Decimal("90.00"))
        saved = container.booking_repository.find_by_id(booking.id)
        assert saved == booking
        assert container.locks.active_keys() == []

    def test_unknown_route_raises_not_found(self, container, booking_details):
        with pytest.raises(RouteNotFoundException):
            container.create_booking.create(RouteId("route-x"), TRAVEL_DATE, booking_details())

    def test_inactive_route_raises_error(self, container, create_route, booking_details):
        container.route_repository.save(create_route(route_id="route-off", is_active=False))

        with pytest.raises(RouteInactiveException):
            container.create_booking.create(
                RouteId("route-off"), TRAVEL_DATE, booking_details()
            )

    def test_route_without_bus_raises_not_found(
        self, container, create_route, booking_details
    ):
        container.route_repository.save(
            create_route(route_id="route-orphan", bus_id="bus-missing")
        )

        with pytest.raises(BusNotFoundException):
            container.create_booking.create(
                RouteId("route-orphan"), TRAVEL_DATE, booking_details()
            )

    def test_out_of_range_seat_raises_error(self, container, booking_details):
        with pytest.raises(InvalidSeatNumberException):
            container.create_booking.create(
                RouteId("route-1"), TRAVEL_DATE, booking_details(seat_numbers=("11A",))
            )

    def test_seat_conflict_lists_only_conflicting_seats(self, container, booking_details):
        """1A を予約後、1A と 1B を要求すると 1A だけが競合として返り、何も保存されない"""
        service = container.create_booking
        service.create(RouteId("route-1"), TRAVEL_DATE, booking_details(seat_numbers=("1A",)))

        with pytest.raises(SeatConflictException) as exc_info:
            service.create(
                RouteId("route-1"), TRAVEL_DATE, booking_details(seat_numbers=("1A", "1B"))
            )

        assert exc_info.value.seats == ["1A"]
        assert len(container.booking_repository.find_by_partition(PARTITION)) == 1

        # 競合しなかった座席はそのまま予約できる
        service.create(RouteId("route-1"), TRAVEL_DATE, booking_details(seat_numbers=("1B",)))
        occupied = container.booking_query.occupied_seats(RouteId("route-1"), TRAVEL_DATE)
        assert occupied == [SeatNumber("1A"), SeatNumber("1B")]

    def test_pending_payment_keeps_seats_occupied(self, container, booking_details):
        container.create_booking.create(
            RouteId("route-1"),
            TRAVEL_DATE,
            booking_details(seat_numbers=("5C",), payment_status="pending"),
        )

        with pytest.raises(SeatConflictException):
            container.create_booking.create(
                RouteId("route-1"), TRAVEL_DATE, booking_details(seat_numbers=("5C",))
            )

    def test_same_seat_on_different_dates(self, container, booking_details):
        service = container.create_booking
        first = service.create(RouteId("route-1"), TravelDate("2025-01-01"), booking_details())
        second = service.create(RouteId("route-1"), TravelDate("2025-01-02"), booking_details())

        assert first.partition != second.partition

    def test_failed_payment_booking_is_admitted(self, container, booking_details):
        booking = container.create_booking.create(
            RouteId("route-1"), TRAVEL_DATE, booking_details(payment_status="failed")
        )

        assert booking.payment_status == PaymentStatus.FAILED
        assert booking.booking_status == BookingStatus.CONFIRMED

    def test_busy_partition_does_not_save(
        self, create_route, create_bus, booking_details
    ):
        """ロックが取得できなければ PartitionBusyException になり、保存されない"""
        mock_repository = MagicMock()
        mock_repository.find_occupied_seats.return_value = set()
        route_repository = MagicMock()
        route_repository.find_by_id.return_value = create_route()
        bus_repository = MagicMock()
        bus_repository.find_by_id.return_value = create_bus()
        locks = PartitionLockRegistry(timeout=0.01, max_attempts=1)
        service = CreateBookingService(
            repository=mock_repository,
            route_repository=route_repository,
            bus_repository=bus_repository,
            factory=BookingFactory(),
            resolver=SeatInventoryResolver(mock_repository),
            locks=locks,
        )

        with locks.hold(PARTITION.key):
            with pytest.raises(PartitionBusyException):
                service.create(RouteId("route-1"), TRAVEL_DATE, booking_details())

        mock_repository.save.assert_not_called()
