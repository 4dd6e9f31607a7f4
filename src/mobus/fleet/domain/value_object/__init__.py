from .bus_id import BusId
from .operator_id import OperatorId
from .route_id import RouteId
from .seat_layout import SeatLayout
from .seat_number import SeatNumber

__all__ = ["BusId", "OperatorId", "RouteId", "SeatLayout", "SeatNumber"]
