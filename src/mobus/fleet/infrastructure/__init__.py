from .in_memory_fleet_repository import InMemoryBusRepository, InMemoryRouteRepository
from .sample_data import load_sample_fleet

__all__ = ["InMemoryBusRepository", "InMemoryRouteRepository", "load_sample_fleet"]
