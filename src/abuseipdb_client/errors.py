#!/usr/bin/env python3
"""
Exceptions raised by the AbuseIPDB client.

Validation errors are raised before any network I/O. Transport and remote
API failures are normally returned as data inside an ApiResponse; the
classes for them exist so callers (and the transport) can opt in to
raising.
"""

from typing import Any, Dict, List, Optional


class AbuseIPDBError(Exception):
    """Base class for all client errors."""


class InvalidArgumentError(AbuseIPDBError, ValueError):
    """A required argument is empty or a numeric argument is out of range."""


class InvalidCategoryError(InvalidArgumentError):
    """A report category token matches no known category."""


class StandaloneCategoryError(InvalidArgumentError):
    """A category that can't be used alone was given without a partner."""


class MissingFileError(AbuseIPDBError, FileNotFoundError):
    """A bulk-report CSV or config file does not exist."""


class FilePermissionError(AbuseIPDBError, PermissionError):
    """A bulk-report CSV or config file is not readable."""


class ConfigError(AbuseIPDBError):
    """Configuration could not be parsed or is incomplete."""


class TransportError(AbuseIPDBError):
    """The HTTP transport failed to deliver the request (connection, timeout)."""


class RemoteApiError(AbuseIPDBError):
    """The API answered with a non-empty `errors` array."""

    def __init__(self, errors: Optional[List[Dict[str, Any]]] = None):
        self.errors = errors or []
        details = [
            str(e.get('detail') or e.get('title') or e) if isinstance(e, dict) else str(e)
            for e in self.errors
        ]
        super().__init__('; '.join(details) or 'AbuseIPDB API error')
