from __future__ import annotations

from pydantic import BaseModel

from mobus.booking.domain.entity import Booking
from mobus.fleet.domain.value_object import SeatNumber


class BookingData(BaseModel):
    """予約データのレスポンスモデル"""

    booking_id: str
    route_id: str
    travel_date: str
    passenger_name: str
    passenger_phone: str
    passenger_email: str | None
    seat_numbers: list[str]
    total_amount: str
    currency: str
    payment_status: str
    payment_method: str | None
    booking_status: str
    booked_by: str
    agent_id: str | None
    user_id: str | None
    created_at: str


class OccupiedSeatsData(BaseModel):
    """占有座席のレスポンスモデル"""

    route_id: str
    travel_date: str
    occupied_seats: list[str]


def to_booking_data(booking: Booking) -> BookingData:
    """Booking エンティティをレスポンスモデルに変換する"""
    return BookingData(
        booking_id=str(booking.id),
        route_id=str(booking.route_id),
        travel_date=str(booking.travel_date),
        passenger_name=booking.passenger.name,
        passenger_phone=booking.passenger.phone,
        passenger_email=booking.passenger.email,
        seat_numbers=[str(seat) for seat in booking.seat_numbers],
        total_amount=str(booking.total_amount.amount),
        currency=str(booking.total_amount.currency),
        payment_status=booking.payment_status.value,
        payment_method=booking.payment_method.value if booking.payment_method else None,
        booking_status=booking.booking_status.value,
        booked_by=booking.booked_by.value,
        agent_id=booking.agent_id,
        user_id=booking.user_id,
        created_at=booking.created_at.isoformat(),
    )


def to_occupied_seats_data(
    route_id: str, travel_date: str, seats: list[SeatNumber]
) -> OccupiedSeatsData:
    return OccupiedSeatsData(
        route_id=route_id,
        travel_date=travel_date,
        occupied_seats=[str(seat) for seat in seats],
    )
