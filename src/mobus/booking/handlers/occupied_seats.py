from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from mobus.booking.handlers.request_models import OccupiedSeatsRequest
from mobus.booking.handlers.response_models import to_occupied_seats_data
from mobus.bootstrap import get_container
from mobus.fleet.domain.value_object import RouteId
from mobus.shared.domain import TravelDate
from mobus.shared.utils import handle_exception, success_response

logger = Logger()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """占有座席取得 Lambda Handler（座席表の描画用）

    予約の無い路線・乗車日は空のリストを返す。
    """

    path_params = event.path_parameters or {}
    query_params = event.query_string_parameters or {}

    try:
        request = OccupiedSeatsRequest.model_validate(
            {"route_id": path_params.get("route_id"), "date": query_params.get("date")}
        )
        seats = get_container().booking_query.occupied_seats(
            RouteId(request.route_id), TravelDate(request.date)
        )
        return success_response(to_occupied_seats_data(request.route_id, request.date, seats))
    except Exception as e:
        return handle_exception(logger, e)
