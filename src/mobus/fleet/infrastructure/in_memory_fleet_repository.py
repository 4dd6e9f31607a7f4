from threading import Lock

from mobus.fleet.domain.entity import Bus, Route
from mobus.fleet.domain.repository import BusRepository, RouteRepository
from mobus.fleet.domain.value_object import BusId, OperatorId, RouteId


class InMemoryBusRepository(BusRepository):
    """プロセス内の辞書を使用した BusRepository の具象実装"""

    def __init__(self) -> None:
        self._lock = Lock()
        self._buses: dict[BusId, Bus] = {}

    def save(self, bus: Bus) -> None:
        with self._lock:
            self._buses[bus.id] = bus

    def find_by_id(self, bus_id: BusId) -> Bus | None:
        with self._lock:
            return self._buses.get(bus_id)

    def find_by_operator_id(self, operator_id: OperatorId) -> list[Bus]:
        with self._lock:
            return [bus for bus in self._buses.values() if bus.operator_id == operator_id]


class InMemoryRouteRepository(RouteRepository):
    """プロセス内の辞書を使用した RouteRepository の具象実装

    辞書の挿入順を登録順として扱う。
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._routes: dict[RouteId, Route] = {}

    def save(self, route: Route) -> None:
        with self._lock:
            self._routes[route.id] = route

    def find_by_id(self, route_id: RouteId) -> Route | None:
        with self._lock:
            return self._routes.get(route_id)

    def find_all(self) -> list[Route]:
        with self._lock:
            return list(self._routes.values())

    def find_by_bus_id(self, bus_id: BusId) -> list[Route]:
        with self._lock:
            return [route for route in self._routes.values() if route.bus_id == bus_id]

    def delete(self, route_id: RouteId) -> bool:
        with self._lock:
            return self._routes.pop(route_id, None) is not None
