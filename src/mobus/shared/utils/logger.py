import os

from aws_lambda_powertools import Logger


def get_logger(service_name: str | None = None) -> Logger:
    return Logger(service=service_name or os.getenv("POWERTOOLS_SERVICE_NAME", "mobus"))
