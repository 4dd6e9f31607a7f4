from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from mobus.booking.handlers.response_models import to_booking_data
from mobus.bootstrap import get_container
from mobus.shared.utils import api_response, handle_exception, success_response

logger = Logger()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """利用者の予約履歴取得 Lambda Handler"""

    path_params = event.path_parameters or {}
    user_id = path_params.get("user_id")

    if not user_id:
        return api_response(400, {"message": "user_id is required"})

    try:
        bookings = get_container().booking_query.list_for_user(user_id)
        logger.info("Listed user bookings", extra={"user_id": user_id, "count": len(bookings)})
        return success_response([to_booking_data(booking) for booking in bookings])
    except Exception as e:
        return handle_exception(logger, e)
