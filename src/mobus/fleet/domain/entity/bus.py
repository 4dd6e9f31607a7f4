from mobus.fleet.domain.enum import BusStatus
from mobus.fleet.domain.value_object import BusId, OperatorId, SeatLayout
from mobus.shared.domain import AggregateRoot


class Bus(AggregateRoot[BusId]):
    """バスエンティティ

    総座席数は、このバスが運行するすべての路線の座席数の上限になる。
    """

    def __init__(
        self,
        id: BusId,
        operator_id: OperatorId,
        bus_number: str,
        bus_type: str,
        total_seats: int,
        amenities: list[str] | None = None,
        status: BusStatus = BusStatus.ACTIVE,
    ) -> None:
        super().__init__(id)
        self._operator_id = operator_id
        self._bus_number = bus_number
        self._bus_type = bus_type
        self._layout = SeatLayout(total_seats)
        self._amenities = list(amenities or [])
        self._status = status

    @property
    def operator_id(self) -> OperatorId:
        return self._operator_id

    @property
    def bus_number(self) -> str:
        return self._bus_number

    @property
    def bus_type(self) -> str:
        return self._bus_type

    @property
    def total_seats(self) -> int:
        return self._layout.total_seats

    @property
    def layout(self) -> SeatLayout:
        return self._layout

    @property
    def amenities(self) -> list[str]:
        return list(self._amenities)

    @property
    def status(self) -> BusStatus:
        return self._status
