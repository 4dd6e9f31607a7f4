from .exceptions import (
    BookingNotFoundException,
    BusinessRuleViolationException,
    BusNotFoundException,
    DomainException,
    DuplicateResourceException,
    InvalidSeatNumberException,
    InvalidTransitionException,
    OptimisticLockException,
    PartitionBusyException,
    ResourceNotFoundException,
    RouteInactiveException,
    RouteNotFoundException,
    SeatConflictException,
)

__all__ = [
    "DomainException",
    "ResourceNotFoundException",
    "BusinessRuleViolationException",
    "DuplicateResourceException",
    "OptimisticLockException",
    "RouteNotFoundException",
    "BusNotFoundException",
    "BookingNotFoundException",
    "RouteInactiveException",
    "InvalidSeatNumberException",
    "InvalidTransitionException",
    "SeatConflictException",
    "PartitionBusyException",
]
