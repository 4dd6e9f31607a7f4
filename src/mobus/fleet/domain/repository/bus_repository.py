from abc import abstractmethod

from mobus.fleet.domain.entity import Bus
from mobus.fleet.domain.value_object import BusId, OperatorId
from mobus.shared.domain import Repository


class BusRepository(Repository[Bus, BusId]):
    """バスリポジトリのインターフェース"""

    @abstractmethod
    def save(self, bus: Bus) -> None:
        """バスを保存する（同一IDは上書き）"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, bus_id: BusId) -> Bus | None:
        """バスIDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_operator_id(self, operator_id: OperatorId) -> list[Bus]:
        """運行会社が保有するバスを取得する"""
        raise NotImplementedError
