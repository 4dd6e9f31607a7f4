from .bus_status import BusStatus

__all__ = ["BusStatus"]
