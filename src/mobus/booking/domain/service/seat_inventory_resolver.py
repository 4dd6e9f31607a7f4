from mobus.booking.domain.repository import BookingRepository
from mobus.booking.domain.value_object import SeatPartition
from mobus.fleet.domain.value_object import RouteId, SeatNumber
from mobus.shared.domain import TravelDate


class SeatInventoryResolver:
    """座席在庫の解決

    (路線, 乗車日) で CONFIRMED の予約が占有している座席を集合で返す。
    副作用はなく、予約が無ければ空集合を返す（路線の存在確認はしない）。
    占有状況はリポジトリの確定済みの状態から読み、キャッシュしない。
    """

    def __init__(self, repository: BookingRepository) -> None:
        self._repository = repository

    def resolve_occupied(self, route_id: RouteId, travel_date: TravelDate) -> set[SeatNumber]:
        return self.resolve_partition(SeatPartition(route_id=route_id, travel_date=travel_date))

    def resolve_partition(self, partition: SeatPartition) -> set[SeatNumber]:
        return set(self._repository.find_occupied_seats(partition))
