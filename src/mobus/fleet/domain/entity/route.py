from mobus.fleet.domain.value_object import BusId, RouteId
from mobus.shared.domain import AggregateRoot, Money


class Route(AggregateRoot[RouteId]):
    """路線エンティティ

    出発地・目的地・時刻・運賃と、運行するバスへの参照を持つ。
    公開後の変更は運行会社による明示的な編集のみ。
    """

    def __init__(
        self,
        id: RouteId,
        bus_id: BusId,
        from_city: str,
        to_city: str,
        departure_time: str,
        arrival_time: str,
        duration: str,
        price: Money,
        operating_days: list[str] | None = None,
        is_active: bool = True,
    ) -> None:
        super().__init__(id)
        self._bus_id = bus_id
        self._from_city = from_city
        self._to_city = to_city
        self._departure_time = departure_time
        self._arrival_time = arrival_time
        self._duration = duration
        self._price = price
        self._operating_days = list(operating_days or [])
        self._is_active = is_active

    @property
    def bus_id(self) -> BusId:
        return self._bus_id

    @property
    def from_city(self) -> str:
        return self._from_city

    @property
    def to_city(self) -> str:
        return self._to_city

    @property
    def departure_time(self) -> str:
        return self._departure_time

    @property
    def arrival_time(self) -> str:
        return self._arrival_time

    @property
    def duration(self) -> str:
        return self._duration

    @property
    def price(self) -> Money:
        return self._price

    @property
    def operating_days(self) -> list[str]:
        return list(self._operating_days)

    @property
    def is_active(self) -> bool:
        return self._is_active

    def matches(self, from_city: str, to_city: str) -> bool:
        """出発地・目的地の部分一致（大文字小文字を区別しない）"""
        return (
            from_city.casefold() in self._from_city.casefold()
            and to_city.casefold() in self._to_city.casefold()
        )
