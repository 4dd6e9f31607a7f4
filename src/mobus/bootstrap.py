import os
from dataclasses import dataclass
from functools import lru_cache

from mobus.booking.applications import (
    BookingQueryService,
    CreateBookingService,
    UpdateBookingStatusService,
)
from mobus.booking.domain.factory import BookingFactory
from mobus.booking.domain.repository import BookingRepository
from mobus.booking.domain.service import SeatInventoryResolver
from mobus.booking.infrastructure import InMemoryBookingRepository, PartitionLockRegistry
from mobus.fleet.domain.repository import BusRepository, RouteRepository
from mobus.fleet.infrastructure import (
    InMemoryBusRepository,
    InMemoryRouteRepository,
    load_sample_fleet,
)
from mobus.reporting.applications import OperatorRevenueService
from mobus.search.applications import RouteSearchService
from mobus.shared.utils import get_logger

logger = get_logger()


@dataclass(frozen=True)
class Container:
    """1 プロセスで共有するリポジトリとユースケース"""

    route_repository: RouteRepository
    bus_repository: BusRepository
    booking_repository: BookingRepository
    locks: PartitionLockRegistry
    create_booking: CreateBookingService
    update_booking_status: UpdateBookingStatusService
    booking_query: BookingQueryService
    route_search: RouteSearchService
    operator_revenue: OperatorRevenueService


def build_container() -> Container:
    """環境変数から依存関係を組み立てる"""
    backend = os.getenv("STORAGE_BACKEND", "memory")

    route_repository: RouteRepository
    bus_repository: BusRepository
    booking_repository: BookingRepository
    if backend == "memory":
        route_repository = InMemoryRouteRepository()
        bus_repository = InMemoryBusRepository()
        booking_repository = InMemoryBookingRepository()
        if os.getenv("SEED_SAMPLE_DATA", "false").lower() == "true":
            load_sample_fleet(bus_repository, route_repository)
    elif backend == "dynamodb":
        from mobus.booking.infrastructure.dynamodb_booking_repository import (
            DynamoDBBookingRepository,
        )
        from mobus.fleet.infrastructure.dynamodb_fleet_repository import (
            DynamoDBBusRepository,
            DynamoDBRouteRepository,
        )

        route_repository = DynamoDBRouteRepository()
        bus_repository = DynamoDBBusRepository()
        booking_repository = DynamoDBBookingRepository()
    else:
        raise ValueError(f"Unknown STORAGE_BACKEND: {backend}")

    locks = PartitionLockRegistry(
        timeout=float(os.getenv("ADMISSION_LOCK_TIMEOUT_SECONDS", "2.0")),
        max_attempts=int(os.getenv("ADMISSION_MAX_ATTEMPTS", "3")),
        backoff=float(os.getenv("ADMISSION_RETRY_BACKOFF_SECONDS", "0.05")),
    )
    resolver = SeatInventoryResolver(booking_repository)

    logger.info("Container built", extra={"storage_backend": backend})

    return Container(
        route_repository=route_repository,
        bus_repository=bus_repository,
        booking_repository=booking_repository,
        locks=locks,
        create_booking=CreateBookingService(
            repository=booking_repository,
            route_repository=route_repository,
            bus_repository=bus_repository,
            factory=BookingFactory(),
            resolver=resolver,
            locks=locks,
        ),
        update_booking_status=UpdateBookingStatusService(
            repository=booking_repository, locks=locks
        ),
        booking_query=BookingQueryService(repository=booking_repository, resolver=resolver),
        route_search=RouteSearchService(
            route_repository=route_repository,
            bus_repository=bus_repository,
            resolver=resolver,
        ),
        operator_revenue=OperatorRevenueService(
            bus_repository=bus_repository,
            route_repository=route_repository,
            booking_repository=booking_repository,
        ),
    )


@lru_cache(maxsize=1)
def get_container() -> Container:
    """プロセス内で共有するコンテナ（Lambda のウォームスタート間で再利用される）"""
    return build_container()
