#!/usr/bin/env python3
"""
Exception-free variant of the client.

Useful for log shippers and command-line tools that would rather inspect
a result than handle exceptions: every operation returns an ApiResponse,
and local failures come back as
{"errors": [{"title": "Internal Error", "detail": "<message>"}]}.
"""

import functools
import logging
from typing import Callable

from .client import AbuseIPDBClient
from .response import ApiResponse

logger = logging.getLogger('abuseipdb_client.quiet')


def quiet(operation: Callable[..., ApiResponse]) -> Callable[..., ApiResponse]:
    """Wrap an operation so that any exception becomes an error ApiResponse."""

    @functools.wraps(operation)
    def wrapper(*args, **kwargs) -> ApiResponse:
        try:
            return operation(*args, **kwargs)
        except Exception as e:
            logger.debug(f"{operation.__name__} failed: {e}")
            return ApiResponse.from_error_message(str(e))

    return wrapper


class QuietAbuseIPDBClient(AbuseIPDBClient):
    """
    AbuseIPDBClient whose operations never raise.

    Construction is not wrapped: an empty API key still raises ConfigError
    when the client is created, before any operation can be called.
    """

    report = quiet(AbuseIPDBClient.report)
    bulk_report = quiet(AbuseIPDBClient.bulk_report)
    clear_address = quiet(AbuseIPDBClient.clear_address)
    check = quiet(AbuseIPDBClient.check)
    check_block = quiet(AbuseIPDBClient.check_block)
    blacklist = quiet(AbuseIPDBClient.blacklist)
    execute = quiet(AbuseIPDBClient.execute)
