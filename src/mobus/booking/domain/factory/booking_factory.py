from typing import TypedDict

from mobus.booking.domain.entity import Booking
from mobus.booking.domain.enum import (
    BookingChannel,
    BookingStatus,
    PaymentMethod,
    PaymentStatus,
)
from mobus.booking.domain.value_object import BookingId, PassengerContact
from mobus.fleet.domain.entity import Bus, Route
from mobus.shared.domain import TravelDate
from mobus.shared.domain.exception import BusinessRuleViolationException

# 予約作成時に指定できる決済ステータス（返金済みでの新規作成は不可）
INITIAL_PAYMENT_STATUSES = frozenset(
    {PaymentStatus.PENDING, PaymentStatus.PAID, PaymentStatus.FAILED}
)


class BookingDetails(TypedDict):
    """予約の入力データ構造"""

    seat_numbers: list[str]
    passenger_name: str
    passenger_phone: str
    passenger_email: str | None
    user_id: str | None
    payment_status: str
    payment_method: str | None
    booked_by: str
    agent_id: str | None


class BookingFactory:
    """座席予約エンティティのファクトリ

    - 座席番号をバスの座席配置に照らして検証する
    - 運賃 × 座席数で合計金額を算出する
    - 初期状態（CONFIRMED）の設定
    """

    def create(
        self,
        route: Route,
        bus: Bus,
        travel_date: TravelDate,
        details: BookingDetails,
    ) -> Booking:
        """新規予約エンティティを生成する

        Args:
            route: 予約対象の路線
            bus: 路線を運行するバス（座席数の上限）
            travel_date: 乗車日
            details: 乗客・決済・座席の入力

        Returns:
            Booking: 生成された予約エンティティ（CONFIRMED状態）

        Raises:
            InvalidSeatNumberException: 座席番号が不正、重複、または座席数を超える
        """
        seats = bus.layout.parse(details["seat_numbers"])

        payment_status = PaymentStatus(details["payment_status"])
        if payment_status not in INITIAL_PAYMENT_STATUSES:
            raise BusinessRuleViolationException(
                f"Cannot create a booking with payment status {payment_status.value}"
            )

        payment_method = details["payment_method"]

        return Booking(
            id=BookingId.generate(),
            route_id=route.id,
            travel_date=travel_date,
            passenger=PassengerContact(
                name=details["passenger_name"],
                phone=details["passenger_phone"],
                email=details["passenger_email"],
            ),
            seat_numbers=seats,
            total_amount=route.price.multiply(len(seats)),
            payment_status=payment_status,
            booking_status=BookingStatus.CONFIRMED,
            booked_by=BookingChannel(details["booked_by"]),
            agent_id=details["agent_id"],
            user_id=details["user_id"],
            payment_method=PaymentMethod(payment_method) if payment_method else None,
        )
