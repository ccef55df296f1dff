#!/usr/bin/env python3
"""
AbuseIPDB API v2 client.

Report abusive IPs, check an address or a network, fetch the blacklist,
bulk-report from CSV and clear your own reports.
Features:
- Category validation (ids or short names, standalone rules)
- Report message sanitization (self IPs, emails, length)
- Uniform ApiResponse wrapper for data and errors
- Quiet client variant that never raises
"""

from .categories import (
    CATEGORIES,
    Category,
    find_by_id,
    find_by_short_name,
    get_category_id_by_name,
    get_category_name_by_id,
    list_categories,
    resolve_report_categories,
)
from .client import AbuseIPDBClient
from .config import ClientConfig
from .errors import (
    AbuseIPDBError,
    ConfigError,
    FilePermissionError,
    InvalidArgumentError,
    InvalidCategoryError,
    MissingFileError,
    RemoteApiError,
    StandaloneCategoryError,
    TransportError,
)
from .quiet import QuietAbuseIPDBClient, quiet
from .response import ApiResponse
from .sanitizer import MAX_MESSAGE_LENGTH, REDACTION_MARKER, sanitize_message
from .transport import AiohttpTransport, HttpTransport

__all__ = [
    'AbuseIPDBClient',
    'QuietAbuseIPDBClient',
    'quiet',
    'ApiResponse',
    'ClientConfig',
    'HttpTransport',
    'AiohttpTransport',
    'CATEGORIES',
    'Category',
    'list_categories',
    'find_by_id',
    'find_by_short_name',
    'get_category_id_by_name',
    'get_category_name_by_id',
    'resolve_report_categories',
    'sanitize_message',
    'REDACTION_MARKER',
    'MAX_MESSAGE_LENGTH',
    'AbuseIPDBError',
    'InvalidArgumentError',
    'InvalidCategoryError',
    'StandaloneCategoryError',
    'MissingFileError',
    'FilePermissionError',
    'ConfigError',
    'TransportError',
    'RemoteApiError',
]
