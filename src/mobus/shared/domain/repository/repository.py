from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from mobus.shared.domain.entity import AggregateRoot

AggregateT = TypeVar("AggregateT", bound=AggregateRoot)
IdT = TypeVar("IdT")


class Repository(ABC, Generic[AggregateT, IdT]):
    """集約 1 種類の保存先

    保存・取得の単位は常に集約ルート。検索条件は各リポジトリで足す。
    """

    @abstractmethod
    def save(self, aggregate: AggregateT) -> None:
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, id: IdT) -> AggregateT | None:
        """見つからなければ None"""
        raise NotImplementedError
