class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合"""

    pass


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    pass


class DuplicateResourceException(DomainException):
    """リソースの重複エラー（条件付き書き込みの失敗時）"""

    pass


class OptimisticLockException(DomainException):
    """楽観ロックの競合エラー（ステータスが期待値と異なる場合）"""

    pass


class RouteNotFoundException(ResourceNotFoundException):
    """路線が見つからない場合"""

    pass


class BusNotFoundException(ResourceNotFoundException):
    """バスが見つからない場合"""

    pass


class BookingNotFoundException(ResourceNotFoundException):
    """予約が見つからない場合"""

    pass


class RouteInactiveException(BusinessRuleViolationException):
    """路線が存在するが予約受付を停止している場合"""

    pass


class InvalidSeatNumberException(BusinessRuleViolationException):
    """座席番号の形式不正、またはバスの座席数を超えている場合"""

    pass


class InvalidTransitionException(BusinessRuleViolationException):
    """許可されていないステータス遷移"""

    pass


class SeatConflictException(DuplicateResourceException):
    """座席が既に他の予約に確保されている場合

    呼び出し側が別の座席を提示できるよう、競合した座席番号を保持する。
    """

    def __init__(self, seats: list[str]) -> None:
        self.seats = list(seats)
        super().__init__(f"Seats already booked: {', '.join(self.seats)}")


class PartitionBusyException(DomainException):
    """パーティションロックを時間内に取得できなかった場合（リトライ可能）"""

    def __init__(self, partition: str) -> None:
        self.partition = partition
        super().__init__(f"Partition is busy, please retry: {partition}")
