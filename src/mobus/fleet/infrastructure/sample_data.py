from decimal import Decimal

from mobus.fleet.domain.entity import Bus, Route
from mobus.fleet.domain.repository import BusRepository, RouteRepository
from mobus.fleet.domain.value_object import BusId, OperatorId, RouteId
from mobus.shared.domain import Money

EVERY_DAY = [
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
]


def load_sample_fleet(bus_repository: BusRepository, route_repository: RouteRepository) -> None:
    """デモ用の運行会社・バス・路線を登録する（ローカル実行用）"""
    operator_id = OperatorId("operator-express-lines")

    buses = [
        Bus(
            id=BusId("bus-el001"),
            operator_id=operator_id,
            bus_number="EL001",
            bus_type="AC Sleeper",
            total_seats=36,
            amenities=["WiFi", "Charging Port", "Entertainment", "Blanket"],
        ),
        Bus(
            id=BusId("bus-el002"),
            operator_id=operator_id,
            bus_number="EL002",
            bus_type="Semi-Sleeper",
            total_seats=40,
            amenities=["WiFi", "Charging Port"],
        ),
    ]
    routes = [
        Route(
            id=RouteId("route-nyc-bos-0800"),
            bus_id=BusId("bus-el001"),
            from_city="New York",
            to_city="Boston",
            departure_time="08:00",
            arrival_time="14:00",
            duration="6h 0m",
            price=Money.usd(Decimal("45.00")),
            operating_days=EVERY_DAY,
        ),
        Route(
            id=RouteId("route-nyc-bos-1030"),
            bus_id=BusId("bus-el002"),
            from_city="New York",
            to_city="Boston",
            departure_time="10:30",
            arrival_time="16:45",
            duration="6h 15m",
            price=Money.usd(Decimal("38.00")),
            operating_days=EVERY_DAY,
        ),
    ]

    for bus in buses:
        bus_repository.save(bus)
    for route in routes:
        route_repository.save(route)
