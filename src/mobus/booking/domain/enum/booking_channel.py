from enum import Enum


class BookingChannel(str, Enum):
    """予約経路（乗客本人か、窓口の代理店か）"""

    PASSENGER = "passenger"
    AGENT = "agent"
