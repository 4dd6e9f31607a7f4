from aws_lambda_powertools import Logger

from mobus.booking.domain.entity import Booking
from mobus.booking.domain.enum import BookingStatus, PaymentStatus
from mobus.booking.domain.event import SeatsReleased
from mobus.booking.domain.repository import BookingRepository
from mobus.booking.domain.value_object import BookingId
from mobus.booking.infrastructure.partition_lock import PartitionLockRegistry
from mobus.shared.domain.exception import BookingNotFoundException

logger = Logger(child=True)


class UpdateBookingStatusService:
    """予約のステータス変更ユースケース

    受付と同じパーティションロックの中で最新の予約を読み直してから遷移させる。
    キャンセルによる座席解放は、競合する受付から原子的に見える。
    """

    def __init__(self, repository: BookingRepository, locks: PartitionLockRegistry) -> None:
        self._repository = repository
        self._locks = locks

    def update(
        self,
        booking_id: BookingId,
        payment_status: PaymentStatus | None = None,
        booking_status: BookingStatus | None = None,
    ) -> Booking:
        """決済ステータス・予約ステータスを変更する"""
        found = self._repository.find_by_id(booking_id)
        if found is None:
            raise BookingNotFoundException(f"Booking not found: {booking_id}")

        with self._locks.hold(found.partition.key):
            booking = self._repository.find_by_id(booking_id)
            if booking is None:
                raise BookingNotFoundException(f"Booking not found: {booking_id}")
            expected_payment_status = booking.payment_status
            expected_booking_status = booking.booking_status
            booking.change_status(payment_status=payment_status, booking_status=booking_status)
            self._repository.update(
                booking,
                expected_payment_status=expected_payment_status,
                expected_booking_status=expected_booking_status,
            )

        for event in booking.flush_domain_events():
            if isinstance(event, SeatsReleased):
                logger.info(
                    "Seats released",
                    extra={
                        "booking_id": str(event.booking_id),
                        "partition": event.partition.key,
                        "seats": list(event.seat_numbers),
                    },
                )
        return booking
