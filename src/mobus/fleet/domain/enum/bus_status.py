from enum import Enum


class BusStatus(str, Enum):
    """バスの運用ステータス"""

    ACTIVE = "active"
    MAINTENANCE = "maintenance"
    INACTIVE = "inactive"
