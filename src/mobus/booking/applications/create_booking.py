from aws_lambda_powertools import Logger

from mobus.booking.domain.entity import Booking
from mobus.booking.domain.factory import BookingDetails, BookingFactory
from mobus.booking.domain.repository import BookingRepository
from mobus.booking.domain.service import SeatInventoryResolver
from mobus.booking.infrastructure.partition_lock import PartitionLockRegistry
from mobus.fleet.domain.repository import BusRepository, RouteRepository
from mobus.fleet.domain.value_object import RouteId
from mobus.shared.domain import TravelDate
from mobus.shared.domain.exception import (
    BusNotFoundException,
    RouteInactiveException,
    RouteNotFoundException,
    SeatConflictException,
)

logger = Logger(child=True)


class CreateBookingService:
    """座席予約の受付ユースケース

    1. 路線・バス・座席番号の検証（ロック取得前）
    2. パーティションロックを保持したまま占有座席を解決し、重複があれば拒否
    3. 重複がなければ CONFIRMED で 1 回だけ保存

    2 と 3 は同じパーティションへの他の受付と直列化される。
    座席が重なる同時リクエストは必ず一方だけが成功する。
    """

    def __init__(
        self,
        repository: BookingRepository,
        route_repository: RouteRepository,
        bus_repository: BusRepository,
        factory: BookingFactory,
        resolver: SeatInventoryResolver,
        locks: PartitionLockRegistry,
    ) -> None:
        self._repository = repository
        self._route_repository = route_repository
        self._bus_repository = bus_repository
        self._factory = factory
        self._resolver = resolver
        self._locks = locks

    def create(
        self, route_id: RouteId, travel_date: TravelDate, details: BookingDetails
    ) -> Booking:
        """座席を予約する"""
        route = self._route_repository.find_by_id(route_id)
        if route is None:
            raise RouteNotFoundException(f"Route not found: {route_id}")
        if not route.is_active:
            raise RouteInactiveException(f"Route is not bookable: {route_id}")

        bus = self._bus_repository.find_by_id(route.bus_id)
        if bus is None:
            raise BusNotFoundException(f"Bus not found: {route.bus_id}")

        booking = self._factory.create(route, bus, travel_date, details)
        partition = booking.partition

        with self._locks.hold(partition.key):
            occupied = self._resolver.resolve_partition(partition)
            conflicts = [str(seat) for seat in booking.seat_numbers if seat in occupied]
            if conflicts:
                logger.info(
                    "Rejected booking with seat conflict",
                    extra={"partition": partition.key, "seats": conflicts},
                )
                raise SeatConflictException(conflicts)
            self._repository.save(booking)

        logger.info(
            "Booking admitted",
            extra={
                "booking_id": str(booking.id),
                "partition": partition.key,
                "seats": [str(seat) for seat in booking.seat_numbers],
            },
        )
        return booking
