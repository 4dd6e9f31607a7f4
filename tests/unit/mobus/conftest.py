import json
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

import pytest

from mobus.booking.domain.entity import Booking
from mobus.booking.domain.enum import BookingChannel, BookingStatus, PaymentStatus
from mobus.booking.domain.factory import BookingDetails
from mobus.booking.domain.value_object import BookingId, PassengerContact
from mobus.bootstrap import build_container
from mobus.fleet.domain.entity import Bus, Route
from mobus.fleet.domain.enum import BusStatus
from mobus.fleet.domain.value_object import BusId, OperatorId, RouteId, SeatNumber
from mobus.shared.domain import Money, TravelDate


@pytest.fixture
def create_bus():
    """Bus を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        bus_id: str = "bus-1",
        operator_id: str = "operator-1",
        total_seats: int = 40,
        status: BusStatus = BusStatus.ACTIVE,
    ) -> Bus:
        return Bus(
            id=BusId(bus_id),
            operator_id=OperatorId(operator_id),
            bus_number="EL001",
            bus_type="Semi-Sleeper",
            total_seats=total_seats,
            amenities=["WiFi"],
            status=status,
        )

    return _factory


@pytest.fixture
def create_route():
    """Route を生成する Factory fixture"""

    def _factory(
        route_id: str = "route-1",
        bus_id: str = "bus-1",
        from_city: str = "New York",
        to_city: str = "Boston",
        departure_time: str = "08:00",
        price_amount: Decimal = Decimal("45.00"),
        is_active: bool = True,
    ) -> Route:
        return Route(
            id=RouteId(route_id),
            bus_id=BusId(bus_id),
            from_city=from_city,
            to_city=to_city,
            departure_time=departure_time,
            arrival_time="14:00",
            duration="6h 0m",
            price=Money.usd(price_amount),
            operating_days=["Monday", "Friday"],
            is_active=is_active,
        )

    return _factory


@pytest.fixture
def create_booking():
    """Booking を生成する Factory fixture"""

    def _factory(
        booking_id: str = "booking-1",
        route_id: str = "route-1",
        travel_date: str = "2025-01-01",
        seats: tuple[str, ...] = ("1A",),
        payment_status: PaymentStatus = PaymentStatus.PENDING,
        booking_status: BookingStatus = BookingStatus.CONFIRMED,
        amount: Decimal = Decimal("45.00"),
        user_id: str | None = None,
        created_at: datetime | None = None,
    ) -> Booking:
        return Booking(
            id=BookingId(booking_id),
            route_id=RouteId(route_id),
            travel_date=TravelDate(travel_date),
            passenger=PassengerContact(name="Jane Doe", phone="+1-555-0100"),
            seat_numbers=[SeatNumber(seat) for seat in seats],
            total_amount=Money.usd(amount),
            payment_status=payment_status,
            booking_status=booking_status,
            booked_by=BookingChannel.PASSENGER,
            user_id=user_id,
            created_at=created_at,
        )

    return _factory


@pytest.fixture
def booking_details():
    """BookingDetails を生成する Factory fixture"""

    def _factory(seat_numbers: tuple[str, ...] = ("1A",), **overrides) -> BookingDetails:
        details: BookingDetails = {
            "seat_numbers": list(seat_numbers),
            "passenger_name": "Jane Doe",
            "passenger_phone": "+1-555-0100",
            "passenger_email": "jane@example.com",
            "user_id": "user-1",
            "payment_status": "pending",
            "payment_method": "card",
            "booked_by": "passenger",
            "agent_id": None,
        }
        details.update(overrides)  # type: ignore[typeddict-item]
        return details

    return _factory


@pytest.fixture
def container(monkeypatch, create_bus, create_route):
    """インメモリ構成のコンテナ（bus-1: 40席, route-1: $45 を登録済み）"""
    monkeypatch.setenv("STORAGE_BACKEND", "memory")
    monkeypatch.setenv("SEED_SAMPLE_DATA", "false")
    monkeypatch.delenv("ADMISSION_LOCK_TIMEOUT_SECONDS", raising=False)
    monkeypatch.delenv("ADMISSION_MAX_ATTEMPTS", raising=False)
    monkeypatch.delenv("ADMISSION_RETRY_BACKOFF_SECONDS", raising=False)

    built = build_container()
    built.bus_repository.save(create_bus())
    built.route_repository.save(create_route())
    return built


@dataclass
class FakeLambdaContext:
    function_name: str = "test"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = "arn:aws:lambda:us-east-1:123456789012:function:test"
    aws_request_id: str = "da658bd3-2d6f-4e7b-8ec2-937234644fdc"
    tenant_id: str | None = None


@pytest.fixture
def lambda_context():
    return FakeLambdaContext()


@pytest.fixture
def api_event():
    """API Gateway HTTP API (v2) のイベントを生成する Factory fixture"""

    def _factory(
        body: dict | None = None,
        path_parameters: dict | None = None,
        query: dict | None = None,
        method: str = "GET",
        path: str = "/",
    ) -> dict:
        return {
            "version": "2.0",
            "routeKey": f"{method} {path}",
            "rawPath": path,
            "rawQueryString": "",
            "headers": {"content-type": "application/json"},
            "requestContext": {
                "http": {"method": method, "path": path},
                "requestId": "request-1",
                "stage": "$default",
            },
            "pathParameters": path_parameters,
            "queryStringParameters": query,
            "body": json.dumps(body) if body is not None else None,
            "isBase64Encoded": False,
        }

    return _factory
