from .bus_repository import BusRepository
from .route_repository import RouteRepository

__all__ = ["BusRepository", "RouteRepository"]
