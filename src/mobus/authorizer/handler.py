import hmac
import logging
import os

import boto3

from mobus.authorizer.roles import Role, is_allowed

logger = logging.getLogger()
logger.setLevel(logging.INFO)

ROLE_HEADER = "x-mobus-role"

_secret_cache: str | None = None


def _get_secret() -> str:
    global _secret_cache
    if _secret_cache is None:
        client = boto3.client("secretsmanager")
        response = client.get_secret_value(
            SecretId=os.environ["ORIGIN_VERIFY_SECRET_ARN"]
        )
        _secret_cache = response["SecretString"]
    return _secret_cache


def lambda_handler(event, context):
    """API Gateway Lambda Authorizer

    CloudFront 経由のリクエストであることを検証したうえで、
    ロールが呼び出し先 API の権限を持つかどうかでポリシーを返す。
    """
    headers = {k.lower(): v for k, v in (event.get("headers") or {}).items()}
    actual = headers.get("x-origin-verify", "")
    expected = _get_secret()

    if not hmac.compare_digest(actual, expected):
        raise Exception("Unauthorized")

    method_arn = event["methodArn"]
    arn_parts = method_arn.split(":")
    region = arn_parts[3]
    account_id = arn_parts[4]
    api_gw_arn = arn_parts[5]
    rest_api_id, stage, method, *path_parts = api_gw_arn.split("/")
    path = "/" + "/".join(path_parts)

    role = Role.parse(headers.get(ROLE_HEADER))
    allowed = is_allowed(role, method, path)
    if not allowed:
        logger.info("Denied %s %s for role %s", method, path, headers.get(ROLE_HEADER))

    resource_arn = (
        f"arn:aws:execute-api:{region}:{account_id}:{rest_api_id}/{stage}/{method}{path}"
    )

    return {
        "principalId": role.value if role else "anonymous",
        "policyDocument": {
            "Version": "2012-10-17",
            "Statement": [
                {
                    "Action": "execute-api:Invoke",
                    "Effect": "Allow" if allowed else "Deny",
                    "Resource": resource_arn,
                }
            ],
        },
        "context": {"role": role.value if role else ""},
    }
