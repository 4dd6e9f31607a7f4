from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from mobus.bootstrap import get_container
from mobus.search.handlers.request_models import SearchRoutesRequest
from mobus.search.handlers.response_models import to_route_availability_data
from mobus.shared.domain import TravelDate
from mobus.shared.utils import handle_exception, success_response

logger = Logger()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """路線検索 Lambda Handler

    空席数はリクエストのたびに最新の予約から計算する。
    """

    try:
        request = SearchRoutesRequest.model_validate(event.query_string_parameters or {})
        logger.info(
            "Searching routes",
            extra={"from": request.from_city, "to": request.to_city, "date": request.date},
        )
        results = get_container().route_search.search(
            request.from_city, request.to_city, TravelDate(request.date)
        )
        return success_response([to_route_availability_data(r) for r in results])
    except Exception as e:
        return handle_exception(logger, e)
