from abc import abstractmethod

from mobus.fleet.domain.entity import Route
from mobus.fleet.domain.value_object import BusId, RouteId
from mobus.shared.domain import Repository


class RouteRepository(Repository[Route, RouteId]):
    """路線リポジトリのインターフェース"""

    @abstractmethod
    def save(self, route: Route) -> None:
        """路線を保存する（同一IDは上書き）"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, route_id: RouteId) -> Route | None:
        """路線IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Route]:
        """全路線を登録順に取得する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_bus_id(self, bus_id: BusId) -> list[Route]:
        """バスが運行する路線を取得する"""
        raise NotImplementedError

    @abstractmethod
    def delete(self, route_id: RouteId) -> bool:
        """路線を物理削除する"""
        raise NotImplementedError
