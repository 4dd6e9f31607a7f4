from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from mobus.booking.domain.enum import BookingStatus, PaymentStatus
from mobus.booking.domain.value_object import BookingId
from mobus.booking.handlers.request_models import UpdateBookingStatusRequest
from mobus.booking.handlers.response_models import to_booking_data
from mobus.bootstrap import get_container
from mobus.shared.utils import api_response, handle_exception, success_response

logger = Logger()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """予約ステータス変更 Lambda Handler（決済結果の反映・キャンセル）"""

    path_params = event.path_parameters or {}
    booking_id = path_params.get("booking_id")

    if not booking_id:
        return api_response(400, {"message": "booking_id is required"})

    logger.info("Received update booking status request", extra={"booking_id": booking_id})

    try:
        request = UpdateBookingStatusRequest.model_validate(
            event.json_body if event.body else {}
        )
        booking = get_container().update_booking_status.update(
            BookingId(booking_id),
            payment_status=PaymentStatus(request.payment_status)
            if request.payment_status
            else None,
            booking_status=BookingStatus(request.booking_status)
            if request.booking_status
            else None,
        )
        return success_response(to_booking_data(booking))
    except Exception as e:
        return handle_exception(logger, e)
