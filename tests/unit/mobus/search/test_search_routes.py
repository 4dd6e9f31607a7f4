from mobus.booking.domain.enum import BookingStatus
from mobus.fleet.domain.value_object import RouteId
from mobus.shared.domain import TravelDate

TRAVEL_DATE = TravelDate("2025-01-01")


class TestRouteSearchService:
    def test_available_seats_subtracts_booked_seats(self, container, booking_details):
        """40 席のバスで 5 席予約済みなら空席は 35"""
        container.create_booking.create(
            RouteId("route-1"),
            TRAVEL_DATE,
            booking_details(seat_numbers=("1A", "1B", "1C")),
        )
        container.create_booking.create(
            RouteId("route-1"), TRAVEL_DATE, booking_details(seat_numbers=("2A", "2B"))
        )

        results = container.route_search.search("New York", "Boston", TRAVEL_DATE)

        assert len(results) == 1
        assert results[0].bus.total_seats == 40
        assert results[0].available_seats == 35

    def test_cancelled_seats_are_available_again(self, container, booking_details):
        booking = container.create_booking.create(
            RouteId("route-1"), TRAVEL_DATE, booking_details(seat_numbers=("1A", "1B"))
        )
        container.update_booking_status.update(
            booking.id, booking_status=BookingStatus.CANCELLED
        )

        results = container.route_search.search("New York", "Boston", TRAVEL_DATE)

        assert results[0].available_seats == 40

    def test_other_dates_do_not_affect_availability(self, container, booking_details):
        container.create_booking.create(
            RouteId("route-1"), TravelDate("2025-01-02"), booking_details()
        )

        results = container.route_search.search("New York", "Boston", TRAVEL_DATE)

        assert results[0].available_seats == 40

    def test_case_insensitive_partial_match(self, container):
        results = container.route_search.search("new", "BOS", TRAVEL_DATE)

        assert [str(r.route.id) for r in results] == ["route-1"]

    def test_no_match_returns_empty_list(self, container):
        assert container.route_search.search("Boston", "New York", TRAVEL_DATE) == []

    def test_inactive_routes_are_excluded(self, container, create_route):
        container.route_repository.save(create_route(route_id="route-off", is_active=False))

        results = container.route_search.search("New York", "Boston", TRAVEL_DATE)

        assert [str(r.route.id) for r in results] == ["route-1"]

    def test_results_are_ordered_by_departure_time(self, container, create_route):
        container.route_repository.save(
            create_route(route_id="route-c", departure_time="10:30")
        )
        container.route_repository.save(
            create_route(route_id="route-b", departure_time="06:15")
        )
        container.route_repository.save(
            create_route(route_id="route-a", departure_time="10:30")
        )

        results = container.route_search.search("New York", "Boston", TRAVEL_DATE)

        assert [str(r.route.id) for r in results] == [
            "route-b",
            "route-1",
            "route-a",
            "route-c",
        ]

    def test_routes_without_bus_are_skipped(self, container, create_route):
        container.route_repository.save(
            create_route(route_id="route-orphan", bus_id="bus-missing")
        )

        results = container.route_search.search("New York", "Boston", TRAVEL_DATE)

        assert [str(r.route.id) for r in results] == ["route-1"]
