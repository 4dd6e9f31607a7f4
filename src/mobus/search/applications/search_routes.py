from dataclasses import dataclass

from mobus.booking.domain.service import SeatInventoryResolver
from mobus.fleet.domain.entity import Bus, Route
from mobus.fleet.domain.repository import BusRepository, RouteRepository
from mobus.fleet.domain.value_object import SeatNumber
from mobus.shared.domain import TravelDate


@dataclass(frozen=True)
class RouteAvailability:
    """路線と、乗車日時点の空席状況"""

    route: Route
    bus: Bus
    occupied_seats: frozenset[SeatNumber]

    @property
    def available_seats(self) -> int:
        return self.bus.total_seats - len(self.occupied_seats)


class RouteSearchService:
    """路線検索ユースケース

    出発地・目的地の部分一致（大文字小文字を区別しない）かつ運行中の路線を返す。
    空席数は検索のたびにリポジトリから解決し、キャッシュしない。
    結果は出発時刻順（同時刻は路線ID順）。
    """

    def __init__(
        self,
        route_repository: RouteRepository,
        bus_repository: BusRepository,
        resolver: SeatInventoryResolver,
    ) -> None:
        self._route_repository = route_repository
        self._bus_repository = bus_repository
        self._resolver = resolver

    def search(self, from_city: str, to_city: str, travel_date: TravelDate) -> list[RouteAvailability]:
        candidates = [
            route
            for route in self._route_repository.find_all()
            if route.is_active and route.matches(from_city, to_city)
        ]

        results: list[RouteAvailability] = []
        for route in sorted(candidates, key=lambda r: (r.departure_time, str(r.id))):
            bus = self._bus_repository.find_by_id(route.bus_id)
            # バスが見つからない路線は予約できないので結果に含めない
            if bus is None:
                continue
            occupied = self._resolver.resolve_occupied(route.id, travel_date)
            results.append(
                RouteAvailability(route=route, bus=bus, occupied_seats=frozenset(occupied))
            )
        return results
