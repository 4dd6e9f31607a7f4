from .entity import AggregateRoot
from .exception import (
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
from .repository import Repository
from .value_object import Currency, Money, TravelDate

__all__ = [
    "AggregateRoot",
    "Repository",
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
    "Currency",
    "Money",
    "TravelDate",
]
