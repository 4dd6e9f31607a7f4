from abc import abstractmethod

from mobus.booking.domain.entity import Booking
from mobus.booking.domain.enum import BookingStatus, PaymentStatus
from mobus.booking.domain.value_object import BookingId, SeatPartition
from mobus.fleet.domain.value_object import RouteId, SeatNumber
from mobus.shared.domain import Repository


class BookingRepository(Repository[Booking, BookingId]):
    """座席予約リポジトリのインターフェース

    Domain 層で定義し、具象実装は Infrastructure 層で行う。
    save は「座席が重複しない場合のみ挿入する」原子的な操作として実装すること。
    同一パーティションで CONFIRMED の予約と座席が重なる場合は
    SeatConflictException を送出し、何も書き込まない。
    """

    @abstractmethod
    def save(self, booking: Booking) -> None:
        """新規予約を保存する（座席の重複があれば SeatConflictException）"""
        raise NotImplementedError

    @abstractmethod
    def update(
        self,
        booking: Booking,
        expected_payment_status: PaymentStatus,
        expected_booking_status: BookingStatus,
    ) -> None:
        """ステータスを更新する

        保存済みのステータスが期待値と異なる場合は OptimisticLockException。
        CANCELLED への更新では座席を同時に解放する。
        """
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_partition(self, partition: SeatPartition) -> list[Booking]:
        """(路線, 乗車日) の予約をステータスに関係なく取得する"""
        raise NotImplementedError

    @abstractmethod
    def find_occupied_seats(self, partition: SeatPartition) -> set[SeatNumber]:
        """CONFIRMED の予約が占有している座席を、確定済みの最新状態で返す

        受付時の重複判定に使うため、結果整合の索引から読んではならない。
        """
        raise NotImplementedError

    @abstractmethod
    def find_by_route_id(self, route_id: RouteId) -> list[Booking]:
        """路線の予約を全乗車日分取得する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_user_id(self, user_id: str) -> list[Booking]:
        """利用者本人の予約を取得する"""
        raise NotImplementedError
