from abc import ABC
from typing import Generic, TypeVar

ID = TypeVar("ID")


class AggregateRoot(ABC, Generic[ID]):
    """集約ルートの基底クラス

    - 同一性は ID だけで判定する（属性が変わっても同じ集約）
    - 集約内で起きたことはドメインイベントとして溜め、ユースケース側で取り出す
    """

    def __init__(self, id: ID) -> None:
        self._id = id
        self._domain_events: list = []

    @property
    def id(self) -> ID:
        return self._id

    def add_domain_event(self, event: object) -> None:
        self._domain_events.append(event)

    def flush_domain_events(self) -> list:
        """ドメインイベントを取り出してクリアする"""
        events = self._domain_events.copy()
        self._domain_events.clear()
        return events

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._id))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id!s})"
