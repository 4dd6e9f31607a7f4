from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from mobus.bootstrap import get_container
from mobus.fleet.domain.value_object import OperatorId
from mobus.reporting.handlers.response_models import to_revenue_data
from mobus.shared.utils import api_response, handle_exception, success_response

logger = Logger()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """運行会社の売上集計 Lambda Handler"""

    path_params = event.path_parameters or {}
    operator_id = path_params.get("operator_id")

    if not operator_id:
        return api_response(400, {"message": "operator_id is required"})

    logger.info("Building revenue report", extra={"operator_id": operator_id})

    try:
        revenue = get_container().operator_revenue.report(OperatorId(operator_id))
        return success_response(to_revenue_data(revenue))
    except Exception as e:
        return handle_exception(logger, e)
