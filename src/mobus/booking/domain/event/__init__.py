from .seats_released import SeatsReleased

__all__ = ["SeatsReleased"]
