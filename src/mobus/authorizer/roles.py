from __future__ import annotations

import re
from enum import Enum


class Role(str, Enum):
    """利用者のロール

    passenger < agent < operator < admin の全順序を持ち、
    上位のロールは下位のロールの権限をすべて含む。
    """

    PASSENGER = "passenger"
    AGENT = "agent"
    OPERATOR = "operator"
    ADMIN = "admin"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    def includes(self, other: Role) -> bool:
        return self.rank >= other.rank

    @classmethod
    def parse(cls, value: str | None) -> Role | None:
        """未知のロールは None（どの権限も持たない）"""
        if not value:
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


_RANKS = {
    Role.PASSENGER: 1,
    Role.AGENT: 2,
    Role.OPERATOR: 3,
    Role.ADMIN: 4,
}


class Capability(str, Enum):
    """API ごとに要求する権限"""

    SEARCH_ROUTES = "search_routes"
    VIEW_SEAT_MAP = "view_seat_map"
    BOOK_SEATS = "book_seats"
    VIEW_BOOKING = "view_booking"
    UPDATE_BOOKING = "update_booking"
    VIEW_OWN_BOOKINGS = "view_own_bookings"
    VIEW_OPERATOR_REVENUE = "view_operator_revenue"


# 権限ごとの最低ロール
REQUIRED_ROLE: dict[Capability, Role] = {
    Capability.SEARCH_ROUTES: Role.PASSENGER,
    Capability.VIEW_SEAT_MAP: Role.PASSENGER,
    Capability.BOOK_SEATS: Role.PASSENGER,
    Capability.VIEW_BOOKING: Role.PASSENGER,
    Capability.UPDATE_BOOKING: Role.PASSENGER,
    Capability.VIEW_OWN_BOOKINGS: Role.PASSENGER,
    Capability.VIEW_OPERATOR_REVENUE: Role.OPERATOR,
}

_ROUTE_CAPABILITIES: list[tuple[str, re.Pattern[str], Capability]] = [
    ("GET", re.compile(r"^/routes/search$"), Capability.SEARCH_ROUTES),
    ("GET", re.compile(r"^/routes/[^/]+/seats$"), Capability.VIEW_SEAT_MAP),
    ("POST", re.compile(r"^/bookings$"), Capability.BOOK_SEATS),
    ("GET", re.compile(r"^/bookings/[^/]+$"), Capability.VIEW_BOOKING),
    ("PATCH", re.compile(r"^/bookings/[^/]+$"), Capability.UPDATE_BOOKING),
    ("GET", re.compile(r"^/users/[^/]+/bookings$"), Capability.VIEW_OWN_BOOKINGS),
    ("GET", re.compile(r"^/operators/[^/]+/revenue$"), Capability.VIEW_OPERATOR_REVENUE),
]


def required_capability(method: str, path: str) -> Capability | None:
    """HTTP メソッドとパスから要求権限を引く（未登録の API は None）"""
    for route_method, pattern, capability in _ROUTE_CAPABILITIES:
        if route_method == method.upper() and pattern.match(path):
            return capability
    return None


def is_allowed(role: Role | None, method: str, path: str) -> bool:
    capability = required_capability(method, path)
    if role is None or capability is None:
        return False
    return role.includes(REQUIRED_ROLE[capability])
