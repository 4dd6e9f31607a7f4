from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from mobus.booking.domain.factory import BookingDetails
from mobus.booking.handlers.request_models import CreateBookingRequest
from mobus.booking.handlers.response_models import to_booking_data
from mobus.bootstrap import get_container
from mobus.fleet.domain.value_object import RouteId
from mobus.shared.domain import TravelDate
from mobus.shared.utils import handle_exception, success_response

logger = Logger()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """座席予約 Lambda Handler

    乗客本人・代理店のどちらの予約もここで受け付ける。
    座席が既に確保されていれば 409 と競合した座席番号を返す。
    """
    logger.info("Received create booking request")

    try:
        request = CreateBookingRequest.model_validate(event.json_body if event.body else {})
        logger.append_keys(route_id=request.route_id, travel_date=request.travel_date)

        booking = get_container().create_booking.create(
            RouteId(request.route_id),
            TravelDate(request.travel_date),
            _to_booking_details(request),
        )
        return success_response(to_booking_data(booking), status_code=201)
    except Exception as e:
        return handle_exception(logger, e)


def _to_booking_details(request: CreateBookingRequest) -> BookingDetails:
    """リクエストボディから BookingDetails を構築する"""

    return {
        "seat_numbers": request.seat_numbers,
        "passenger_name": request.passenger_name,
        "passenger_phone": request.passenger_phone,
        "passenger_email": request.passenger_email,
        "user_id": request.user_id,
        "payment_status": request.payment_status,
        "payment_method": request.payment_method,
        "booked_by": request.booked_by,
        "agent_id": request.agent_id,
    }
