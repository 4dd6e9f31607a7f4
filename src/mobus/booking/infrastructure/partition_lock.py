import time
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from threading import Lock

from aws_lambda_powertools import Logger

from mobus.shared.domain.exception import PartitionBusyException

logger = Logger(child=True)


@dataclass
class _Slot:
    lock: Lock = field(default_factory=Lock)
    # ロックを保持中、または待機中のスレッド数
    users: int = 0


class PartitionLockRegistry:
    """パーティション（路線 × 乗車日）単位の排他ロック

    キーごとに threading.Lock を払い出し、誰も使っていないキーは破棄する。
    別キーのロック同士は独立しているので、無関係な予約は互いを待たない。

    1 回の待機は timeout 秒まで。取得できなければ backoff 秒ずつ間隔を延ばして
    max_attempts 回まで試し、それでも取れなければ PartitionBusyException を送出する。
    """

    def __init__(
        self,
        timeout: float = 2.0,
        max_attempts: int = 3,
        backoff: float = 0.05,
    ) -> None:
        if timeout <= 0:
            raise ValueError("Lock timeout must be positive")
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self._timeout = timeout
        self._max_attempts = max_attempts
        self._backoff = backoff
        self._guard = Lock()
        self._slots: dict[str, _Slot] = {}

    @contextmanager
    def hold(self, key: str) -> Iterator[None]:
        """キーのロックを保持した状態でブロックを実行する"""
        slot = self._check_out(key)
        try:
            self._acquire(key, slot)
            try:
                yield
            finally:
                slot.lock.release()
        finally:
            self._check_in(key, slot)

    def active_keys(self) -> list[str]:
        """保持中・待機中のロックがあるキー"""
        with self._guard:
            return list(self._slots)

    def _acquire(self, key: str, slot: _Slot) -> None:
        for attempt in range(1, self._max_attempts + 1):
            if slot.lock.acquire(timeout=self._timeout):
                return
            logger.warning(
                "Partition lock contended",
                extra={"partition": key, "attempt": attempt},
            )
            if attempt < self._max_attempts:
                time.sleep(self._backoff * attempt)
        raise PartitionBusyException(key)

    def _check_out(self, key: str) -> _Slot:
        with self._guard:
            slot = self._slots.get(key)
            if slot is None:
                slot = _Slot()
                self._slots[key] = slot
            slot.users += 1
            return slot

    def _check_in(self, key: str, slot: _Slot) -> None:
        with self._guard:
            slot.users -= 1
            if slot.users == 0:
                del self._slots[key]
