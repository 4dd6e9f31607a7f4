from __future__ import annotations

from pydantic import BaseModel

from mobus.search.applications import RouteAvailability


class BusData(BaseModel):
    """バス情報のレスポンスモデル"""

    bus_id: str
    operator_id: str
    bus_number: str
    bus_type: str
    total_seats: int
    amenities: list[str]
    status: str


class RouteAvailabilityData(BaseModel):
    """路線と空席数のレスポンスモデル"""

    route_id: str
    from_city: str
    to_city: str
    departure_time: str
    arrival_time: str
    duration: str
    price_amount: str
    price_currency: str
    operating_days: list[str]
    bus: BusData
    available_seats: int
    booked_seats: list[str]


def to_route_availability_data(availability: RouteAvailability) -> RouteAvailabilityData:
    """RouteAvailability をレスポンスモデルに変換する"""
    route = availability.route
    bus = availability.bus
    return RouteAvailabilityData(
        route_id=str(route.id),
        from_city=route.from_city,
        to_city=route.to_city,
        departure_time=route.departure_time,
        arrival_time=route.arrival_time,
        duration=route.duration,
        price_amount=str(route.price.amount),
        price_currency=str(route.price.currency),
        operating_days=route.operating_days,
        bus=BusData(
            bus_id=str(bus.id),
            operator_id=str(bus.operator_id),
            bus_number=bus.bus_number,
            bus_type=bus.bus_type,
            total_seats=bus.total_seats,
            amenities=bus.amenities,
            status=bus.status.value,
        ),
        available_seats=availability.available_seats,
        booked_seats=[
            str(seat) for seat in sorted(availability.occupied_seats, key=lambda s: s.position)
        ],
    )
