from .seat_inventory_resolver import SeatInventoryResolver

__all__ = ["SeatInventoryResolver"]
