from typing import Literal

from pydantic import BaseModel, Field, model_validator


class CreateBookingRequest(BaseModel):
    """座席予約リクエストモデル"""

    route_id: str = Field(..., min_length=1, description="路線ID")
    travel_date: str = Field(
        ...,
        pattern=r"^\d{4}-\d{2}-\d{2}$",
        description="乗車日（YYYY-MM-DD形式）",
        examples=["2025-01-01"],
    )
    seat_numbers: list[str] = Field(
        ...,
        min_length=1,
        description="座席番号",
        examples=[["3A", "3B"]],
    )
    passenger_name: str = Field(..., min_length=1, max_length=100)
    passenger_phone: str = Field(..., min_length=1, max_length=30)
    passenger_email: str | None = Field(default=None, max_length=254)
    user_id: str | None = Field(default=None, description="本人予約の場合の利用者ID")
    payment_status: Literal["pending", "paid", "failed"] = "pending"
    payment_method: Literal["cash", "card", "mobile_money", "paypal"] | None = None
    booked_by: Literal["passenger", "agent"] = "passenger"
    agent_id: str | None = Field(default=None, description="代理店経由の場合の代理店ID")

    @model_validator(mode="after")
    def require_agent_id_for_agent_bookings(self) -> "CreateBookingRequest":
        if self.booked_by == "agent" and not self.agent_id:
            raise ValueError("agent_id is required when booked_by is agent")
        return self

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "route_id": "route-nyc-bos-0800",
                    "travel_date": "2025-01-01",
                    "seat_numbers": ["3A", "3B"],
                    "passenger_name": "Jane Doe",
                    "passenger_phone": "+1-555-0100",
                    "payment_status": "pending",
                    "booked_by": "passenger",
                }
            ]
        }
    }


class UpdateBookingStatusRequest(BaseModel):
    """予約ステータス変更リクエストモデル"""

    payment_status: Literal["pending", "paid", "failed", "refunded"] | None = None
    booking_status: Literal["confirmed", "cancelled"] | None = None

    @model_validator(mode="after")
    def require_any_status(self) -> "UpdateBookingStatusRequest":
        if self.payment_status is None and self.booking_status is None:
            raise ValueError("payment_status or booking_status is required")
        return self


class OccupiedSeatsRequest(BaseModel):
    """占有座席取得リクエストモデル"""

    route_id: str = Field(..., min_length=1)
    date: str = Field(..., pattern=r"^\d{4}-\d{2}-\d{2}$")
