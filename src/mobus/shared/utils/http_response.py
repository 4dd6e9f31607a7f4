import json

from aws_lambda_powertools import Logger
from pydantic import BaseModel, ValidationError

from mobus.shared.domain.exception import (
    BusinessRuleViolationException,
    InvalidSeatNumberException,
    InvalidTransitionException,
    OptimisticLockException,
    PartitionBusyException,
    ResourceNotFoundException,
    RouteInactiveException,
    SeatConflictException,
)


class ErrorResponse(BaseModel):
    """エラーレスポンスモデル"""

    status: str = "error"
    error_code: str
    message: str
    details: list | None = None


# 上から順に判定するため、サブクラスを基底クラスより先に並べる
_ERROR_MAPPINGS: list[tuple[type[Exception], int, str]] = [
    (SeatConflictException, 409, "SEAT_CONFLICT"),
    (OptimisticLockException, 409, "CONCURRENT_UPDATE"),
    (PartitionBusyException, 503, "BUSY"),
    (ResourceNotFoundException, 404, "NOT_FOUND"),
    (RouteInactiveException, 422, "ROUTE_INACTIVE"),
    (InvalidSeatNumberException, 422, "INVALID_SEAT_NUMBER"),
    (InvalidTransitionException, 422, "INVALID_TRANSITION"),
    (BusinessRuleViolationException, 422, "BUSINESS_RULE_VIOLATION"),
    (ValidationError, 400, "VALIDATION_ERROR"),
    (ValueError, 400, "INVALID_REQUEST"),
]


def api_response(status_code: int, body: dict) -> dict:
    """API Gateway HTTP API のレスポンス形式を生成する"""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, default=str),
    }


def success_response(data: BaseModel | list[BaseModel], status_code: int = 200) -> dict:
    """成功レスポンスを生成する"""
    if isinstance(data, list):
        payload: object = [item.model_dump() for item in data]
    else:
        payload = data.model_dump()
    return api_response(status_code, {"status": "success", "data": payload})


def is_known_error(error: Exception) -> bool:
    """HTTP ステータスへの対応付けが定義されている例外かどうか"""
    return any(isinstance(error, exc_type) for exc_type, _, _ in _ERROR_MAPPINGS)


def error_response(error: Exception) -> dict:
    """例外を API Gateway のエラーレスポンスに変換する

    対応付けのない例外は 500 として扱う。
    """
    for exc_type, status_code, error_code in _ERROR_MAPPINGS:
        if isinstance(error, exc_type):
            body = ErrorResponse(
                error_code=error_code,
                message=str(error),
                details=_details(error),
            )
            return api_response(status_code, body.model_dump(exclude_none=True))

    body = ErrorResponse(error_code="INTERNAL_ERROR", message="Internal server error")
    return api_response(500, body.model_dump(exclude_none=True))


def _details(error: Exception) -> list | None:
    if isinstance(error, SeatConflictException):
        return [{"conflicting_seats": error.seats}]
    if isinstance(error, ValidationError):
        return [
            {"loc": list(e["loc"]), "msg": e["msg"]}
            for e in error.errors(include_url=False)
        ]
    return None


def handle_exception(logger: Logger, error: Exception) -> dict:
    """ハンドラで捕捉した例外をログに残してレスポンスへ変換する"""
    if is_known_error(error):
        logger.warning(
            "Request rejected",
            extra={"error_type": type(error).__name__, "reason": str(error)},
        )
    else:
        logger.exception("Unhandled error")
    return error_response(error)
