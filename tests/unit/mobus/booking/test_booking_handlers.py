import json

import pytest

from mobus.booking.handlers import (
    create,
    get,
    list_user_bookings,
    occupied_seats,
    update_status,
)


@pytest.fixture(autouse=True)
def use_container(monkeypatch, container):
    """各ハンドラが参照するコンテナをテスト用に差し替える"""
    for module in (create, get, list_user_bookings, occupied_seats, update_status):
        monkeypatch.setattr(module, "get_container", lambda: container)


@pytest.fixture
def create_request():
    def _factory(**overrides) -> dict:
        body = {
            "route_id": "route-1",
            "travel_date": "2025-01-01",
            "seat_numbers": ["1A"],
            "passenger_name": "Jane Doe",
            "passenger_phone": "+1-555-0100",
            "user_id": "user-1",
        }
        body.update(overrides)
        return body

    return _factory


def _body(response: dict) -> dict:
    return json.loads(response["body"])


def _book(api_event, lambda_context, body: dict) -> dict:
    event = api_event(body=body, method="POST", path="/bookings")
    return create.lambda_handler(event, lambda_context)


class TestCreateHandler:
    def test_create_returns_created_booking(self, api_event, lambda_context, create_request):
        response = _book(api_event, lambda_context, create_request(seat_numbers=["1a", "1B"]))

        assert response["statusCode"] == 201
        data = _body(response)["data"]
        assert data["seat_numbers"] == ["1A", "1B"]
        assert data["total_amount"] == "90.00"
        assert data["currency"] == "USD"
        assert data["booking_status"] == "confirmed"
        assert data["payment_status"] == "pending"

    def test_conflict_returns_conflicting_seats(
        self, api_event, lambda_context, create_request
    ):
        _book(api_event, lambda_context, create_request(seat_numbers=["1A"]))

        response = _book(api_event, lambda_context, create_request(seat_numbers=["1A", "1B"]))

        assert response["statusCode"] == 409
        body = _body(response)
        assert body["error_code"] == "SEAT_CONFLICT"
        assert body["details"] == [{"conflicting_seats": ["1A"]}]

    def test_missing_field_returns_bad_request(
        self, api_event, lambda_context, create_request
    ):
        body = create_request()
        del body["passenger_name"]

        response = _book(api_event, lambda_context, body)

        assert response["statusCode"] == 400
        assert _body(response)["error_code"] == "VALIDATION_ERROR"

    def test_agent_booking_without_agent_id_returns_bad_request(
        self, api_event, lambda_context, create_request
    ):
        response = _book(api_event, lambda_context, create_request(booked_by="agent"))

        assert response["statusCode"] == 400

    def test_unknown_route_returns_not_found(self, api_event, lambda_context, create_request):
        response = _book(api_event, lambda_context, create_request(route_id="route-x"))

        assert response["statusCode"] == 404

    def test_invalid_seat_returns_unprocessable(
        self, api_event, lambda_context, create_request
    ):
        response = _book(api_event, lambda_context, create_request(seat_numbers=["99A"]))

        assert response["statusCode"] == 422
        assert _body(response)["error_code"] == "INVALID_SEAT_NUMBER"


class TestGetHandler:
    def test_get_booking(self, api_event, lambda_context, create_request):
        created = _body(_book(api_event, lambda_context, create_request()))["data"]

        response = get.lambda_handler(
            api_event(path_parameters={"booking_id": created["booking_id"]}), lambda_context
        )

        assert response["statusCode"] == 200
        assert _body(response)["data"]["booking_id"] == created["booking_id"]

    def test_unknown_booking_returns_not_found(self, api_event, lambda_context):
        response = get.lambda_handler(
            api_event(path_parameters={"booking_id": "b-x"}), lambda_context
        )

        assert response["statusCode"] == 404

    def test_missing_booking_id_returns_bad_request(self, api_event, lambda_context):
        response = get.lambda_handler(api_event(), lambda_context)

        assert response["statusCode"] == 400


class TestUpdateStatusHandler:
    def _patch(self, api_event, lambda_context, booking_id: str, body: dict) -> dict:
        event = api_event(
            body=body,
            path_parameters={"booking_id": booking_id},
            method="PATCH",
            path=f"/bookings/{booking_id}",
        )
        return update_status.lambda_handler(event, lambda_context)

    def test_mark_as_paid(self, api_event, lambda_context, create_request):
        created = _body(_book(api_event, lambda_context, create_request()))["data"]

        response = self._patch(
            api_event, lambda_context, created["booking_id"], {"payment_status": "paid"}
        )

        assert response["statusCode"] == 200
        assert _body(response)["data"]["payment_status"] == "paid"

    def test_empty_patch_returns_bad_request(self, api_event, lambda_context, create_request):
        created = _body(_book(api_event, lambda_context, create_request()))["data"]

        response = self._patch(api_event, lambda_context, created["booking_id"], {})

        assert response["statusCode"] == 400

    def test_cancel_twice_returns_unprocessable(
        self, api_event, lambda_context, create_request
    ):
        created = _body(_book(api_event, lambda_context, create_request()))["data"]
        cancel = {"booking_status": "cancelled"}

        first = self._patch(api_event, lambda_context, created["booking_id"], cancel)
        second = self._patch(api_event, lambda_context, created["booking_id"], cancel)

        assert first["statusCode"] == 200
        assert second["statusCode"] == 422
        assert _body(second)["error_code"] == "INVALID_TRANSITION"


class TestListUserBookingsHandler:
    def test_lists_only_users_bookings(self, api_event, lambda_context, create_request):
        _book(api_event, lambda_context, create_request(seat_numbers=["1A"], user_id="user-1"))
        _book(api_event, lambda_context, create_request(seat_numbers=["1B"], user_id="user-2"))

        response = list_user_bookings.lambda_handler(
            api_event(path_parameters={"user_id": "user-1"}), lambda_context
        )

        assert response["statusCode"] == 200
        data = _body(response)["data"]
        assert [b["seat_numbers"] for b in data] == [["1A"]]


class TestOccupiedSeatsHandler:
    def test_returns_occupied_seats(self, api_event, lambda_context, create_request):
        _book(api_event, lambda_context, create_request(seat_numbers=["2A", "1D"]))

        response = occupied_seats.lambda_handler(
            api_event(path_parameters={"route_id": "route-1"}, query={"date": "2025-01-01"}),
            lambda_context,
        )

        assert response["statusCode"] == 200
        assert _body(response)["data"] == {
            "route_id": "route-1",
            "travel_date": "2025-01-01",
            "occupied_seats": ["1D", "2A"],
        }

    def test_unbooked_route_returns_empty_list(self, api_event, lambda_context):
        response = occupied_seats.lambda_handler(
            api_event(path_parameters={"route_id": "route-x"}, query={"date": "2025-01-01"}),
            lambda_context,
        )

        assert response["statusCode"] == 200
        assert _body(response)["data"]["occupied_seats"] == []

    @pytest.mark.parametrize("query", [None, {"date": "tomorrow"}, {"date": "2025-02-30"}])
    def test_invalid_date_returns_bad_request(self, api_event, lambda_context, query):
        response = occupied_seats.lambda_handler(
            api_event(path_parameters={"route_id": "route-1"}, query=query), lambda_context
        )

        assert response["statusCode"] == 400
