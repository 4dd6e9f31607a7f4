from dataclasses import dataclass

from mobus.shared.domain.exception import InvalidSeatNumberException

from .seat_number import SeatNumber


@dataclass(frozen=True)
class SeatLayout:
    """バスの座席配置

    1 列 4 席（A-D）で前から順に並べ、総座席数に達したところで打ち切る。
    38 席のバスなら最後の座席は 10B になる。
    """

    total_seats: int

    def __post_init__(self) -> None:
        if self.total_seats <= 0:
            raise ValueError("Total seats must be positive")

    def contains(self, seat: SeatNumber) -> bool:
        return seat.position < self.total_seats

    def parse(self, raw_seats: list[str]) -> list[SeatNumber]:
        """座席番号の文字列リストを検証して SeatNumber に変換する

        空のリスト・重複・座席数を超える番号はすべて InvalidSeatNumberException。
        """
        if not raw_seats:
            raise InvalidSeatNumberException("At least one seat must be requested")

        seats: list[SeatNumber] = []
        for raw in raw_seats:
            seat = SeatNumber(raw)
            if not self.contains(seat):
                raise InvalidSeatNumberException(
                    f"Seat {seat} is out of range for a {self.total_seats}-seat bus"
                )
            if seat in seats:
                raise InvalidSeatNumberException(f"Seat {seat} is requested twice")
            seats.append(seat)
        return seats
