from .entity import Bus, Route
from .enum import BusStatus
from .repository import BusRepository, RouteRepository
from .value_object import BusId, OperatorId, RouteId, SeatLayout, SeatNumber

__all__ = [
    "Bus",
    "Route",
    "BusStatus",
    "BusRepository",
    "RouteRepository",
    "BusId",
    "OperatorId",
    "RouteId",
    "SeatLayout",
    "SeatNumber",
]
