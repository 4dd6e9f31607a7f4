from .in_memory_booking_repository import InMemoryBookingRepository
from .partition_lock import PartitionLockRegistry

__all__ = ["InMemoryBookingRepository", "PartitionLockRegistry"]
