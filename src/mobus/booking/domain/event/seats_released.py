from dataclasses import dataclass

from mobus.booking.domain.value_object import BookingId, SeatPartition


@dataclass(frozen=True)
class SeatsReleased:
    """予約キャンセルにより座席が解放されたことを表すドメインイベント"""

    booking_id: BookingId
    partition: SeatPartition
    seat_numbers: tuple[str, ...]
