from dataclasses import dataclass

from mobus.fleet.domain.value_object import RouteId
from mobus.shared.domain import TravelDate


@dataclass(frozen=True)
class SeatPartition:
    """座席の占有を判定する単位（路線 × 乗車日）

    座席の重複チェックと排他制御はこの単位で行う。
    異なるパーティション同士が互いを待たせることはない。
    """

    route_id: RouteId
    travel_date: TravelDate

    @property
    def key(self) -> str:
        return f"SEATS#{self.route_id}#{self.travel_date}"

    def __str__(self) -> str:
        return self.key
