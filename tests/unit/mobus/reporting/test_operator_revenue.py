import json
from decimal import Decimal

import pytest

from mobus.booking.domain.enum import PaymentStatus
from mobus.fleet.domain.value_object import OperatorId, RouteId
from mobus.reporting.handlers import revenue
from mobus.shared.domain import Money, TravelDate

TRAVEL_DATE = TravelDate("2025-01-01")


@pytest.fixture
def paid_and_pending(container, create_bus, create_route, booking_details):
    """operator-1 に paid 2 件（3 席・1 席）と pending 1 件、別会社に paid 1 件"""
    container.bus_repository.save(create_bus(bus_id="bus-2", operator_id="operator-2"))
    container.route_repository.save(create_route(route_id="route-2", bus_id="bus-2"))

    service = container.create_booking
    route_id = RouteId("route-1")
    service.create(
        route_id,
        TRAVEL_DATE,
        booking_details(seat_numbers=("1A", "1B", "1C"), payment_status="paid"),
    )
    service.create(route_id, TravelDate("2025-01-02"), booking_details(payment_status="paid"))
    service.create(route_id, TRAVEL_DATE, booking_details(seat_numbers=("2A",)))
    service.create(RouteId("route-2"), TRAVEL_DATE, booking_details(payment_status="paid"))


class TestOperatorRevenueService:
    def test_sums_paid_bookings_only(self, container, paid_and_pending):
        report = container.operator_revenue.report(OperatorId("operator-1"))

        assert report.total_bookings == 3
        assert report.paid_bookings == 2
        assert report.total_revenue == Money.usd(Decimal("180.00"))

    def test_refunded_bookings_are_not_revenue(self, container, paid_and_pending):
        paid = [
            b
            for b in container.booking_repository.find_by_route_id(RouteId("route-1"))
            if b.payment_status == PaymentStatus.PAID
        ]
        container.update_booking_status.update(
            paid[0].id, payment_status=PaymentStatus.REFUNDED
        )

        report = container.operator_revenue.report(OperatorId("operator-1"))

        assert report.paid_bookings == 1

    def test_operator_without_buses_has_zero_revenue(self, container):
        report = container.operator_revenue.report(OperatorId("operator-x"))

        assert report.total_bookings == 0
        assert report.total_revenue == Money.usd("0")


class TestRevenueHandler:
    def test_returns_revenue_report(
        self, monkeypatch, container, paid_and_pending, api_event, lambda_context
    ):
        monkeypatch.setattr(revenue, "get_container", lambda: container)

        response = revenue.lambda_handler(
            api_event(path_parameters={"operator_id": "operator-1"}), lambda_context
        )

        assert response["statusCode"] == 200
        assert json.loads(response["body"])["data"] == {
            "operator_id": "operator-1",
            "total_bookings": 3,
            "paid_bookings": 2,
            "total_revenue": "180.00",
            "currency": "USD",
        }
