#!/usr/bin/env python3
"""
AbuseIPDB Client - report, check and blacklist requests against API v2.

API docs: https://docs.abuseipdb.com/

Every operation validates its arguments before touching the network and
raises InvalidArgumentError (or a subclass) on bad input. Network
failures and API-level errors are not raised: they come back as an
ApiResponse that is empty or whose has_error() is True.

Usage:
    client = AbuseIPDBClient(api_key, self_identifiers=['203.0.113.10'])
    response = client.check('1.2.3.4', max_age_in_days=90)
    if not response.has_error():
        print(response.get_array()['data']['abuseConfidenceScore'])
"""

import logging
import os
from typing import Any, Dict, Iterable, Optional, Tuple, Union
from urllib.parse import urlencode

from .categories import Category, list_categories, resolve_report_categories
from .config import ClientConfig
from .errors import FilePermissionError, InvalidArgumentError, MissingFileError, TransportError
from .response import ApiResponse
from .sanitizer import sanitize_message
from .transport import AiohttpTransport, HttpTransport

logger = logging.getLogger('abuseipdb_client.client')

CategoriesArg = Union[str, Iterable[Union[str, int, Category]]]


class AbuseIPDBClient:
    """
    Client for the AbuseIPDB API v2.

    One HTTP request per operation; no retry, caching or rate limiting.
    """

    API_ENDPOINT = "https://api.abuseipdb.com/api/v2/"

    MAX_AGE_MIN = 1
    MAX_AGE_MAX = 365

    def __init__(
        self,
        api_key: str,
        self_identifiers: Iterable[str] = (),
        transport: Optional[HttpTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            api_key: AbuseIPDB API key
            self_identifiers: IPs / hostnames to hide from report messages
            transport: HTTP collaborator (AiohttpTransport by default)
        """
        self._config = ClientConfig(api_key=api_key, self_identifiers=self_identifiers)
        self.transport = transport or AiohttpTransport()

    @classmethod
    def from_config(cls, config: ClientConfig, transport: Optional[HttpTransport] = None):
        return cls(config.api_key, config.self_identifiers, transport=transport)

    @classmethod
    def from_config_file(cls, path: str, transport: Optional[HttpTransport] = None):
        """Create a client from a YAML/JSON config file (see ClientConfig.from_file)."""
        return cls.from_config(ClientConfig.from_file(path), transport=transport)

    def get_config(self) -> ClientConfig:
        return self._config

    @staticmethod
    def get_categories() -> Tuple[Category, ...]:
        return list_categories()

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def report(self, ip: str, categories: CategoriesArg, message: str) -> ApiResponse:
        """
        Report an IP address.

        Args:
            ip: IP address to report
            categories: "18,22", "brute,ssh" or a sequence of ids / short names / Category
            message: Comment (sanitized and truncated to 1024 chars)

        Returns:
            ApiResponse, e.g. {"data": {"ipAddress": "...", "abuseConfidenceScore": 52}}

        Raises:
            InvalidArgumentError: empty ip, categories or message
            InvalidCategoryError / StandaloneCategoryError: bad categories
        """
        if not ip:
            raise InvalidArgumentError("Ip was empty")

        if not isinstance(categories, str):
            categories = ','.join(str(c) for c in categories)
        if not categories:
            raise InvalidArgumentError("Categories list was empty")

        if not message:
            raise InvalidArgumentError("Report message was empty")

        data = {
            "ip": ip,
            "categories": resolve_report_categories(categories),
            "comment": sanitize_message(message, self._config.self_identifiers),
        }
        return self.execute('report', data, 'POST')

    def bulk_report(self, file_path: str) -> ApiResponse:
        """
        Upload a CSV file of reports (AbuseIPDB bulk-report format).

        Raises:
            MissingFileError: the file does not exist
            FilePermissionError: the file is not readable
        """
        if not file_path or not os.path.isfile(file_path):
            raise MissingFileError(f"The file [{file_path}] does not exist.")

        if not os.access(file_path, os.R_OK):
            raise FilePermissionError(f"The file [{file_path}] is not readable.")

        return self.execute('bulk-report', {}, 'POST', csv_path=file_path)

    def clear_address(self, ip: str) -> ApiResponse:
        """Remove all reports this account made for an IP."""
        if not ip:
            raise InvalidArgumentError("Ip argument must be set (empty value given)")

        return self.execute('clear-address', {'ipAddress': ip}, 'DELETE')

    def check(self, ip: str, max_age_in_days: int = 30, verbose: bool = False) -> ApiResponse:
        """
        Check the abuse history of one IP.

        Args:
            ip: IP address to check
            max_age_in_days: Only count reports this recent (1-365)
            verbose: Include the reports themselves and the country name

        Raises:
            InvalidArgumentError: empty ip or max_age_in_days out of range
        """
        max_age_in_days = self._validate_max_age(max_age_in_days)

        if not ip:
            raise InvalidArgumentError("Ip argument must be set (empty value given)")

        data: Dict[str, Any] = {
            'ipAddress': ip,
            'maxAgeInDays': max_age_in_days,
        }
        if verbose:
            data['verbose'] = True

        return self.execute('check', data, 'GET')

    def check_block(self, network: str, max_age_in_days: int = 30) -> ApiResponse:
        """
        Check every reported address of a network (CIDR notation, e.g. 127.0.0.1/24).

        Raises:
            InvalidArgumentError: empty network or max_age_in_days out of range
        """
        max_age_in_days = self._validate_max_age(max_age_in_days)

        if not network:
            raise InvalidArgumentError("Network argument must be set (empty value given)")

        data = {
            'network': network,
            'maxAgeInDays': max_age_in_days,
        }
        return self.execute('check-block', data, 'GET')

    def blacklist(
        self,
        limit: int = 10000,
        plain_text: bool = False,
        confidence_minimum: int = 100,
    ) -> ApiResponse:
        """
        Get the blacklist.

        Args:
            limit: Maximum number of addresses (at least 1)
            plain_text: Ask for a newline separated IP list instead of JSON
            confidence_minimum: Minimum abuse confidence score, 25-100
                (subscriber feature, ignored by the API otherwise)

        Raises:
            InvalidArgumentError: limit lower than 1
        """
        limit = _as_int(limit, "limit")
        if limit < 1:
            raise InvalidArgumentError(f"Limit must be at least 1 ({limit} was given)")

        data: Dict[str, Any] = {
            'confidenceMinimum': confidence_minimum,
            'limit': limit,
        }
        # The API reads the presence of plaintext as true, whatever its value
        if plain_text:
            data['plaintext'] = True

        return self.execute('blacklist', data, 'GET')

    # ------------------------------------------------------------------
    # Request dispatch
    # ------------------------------------------------------------------

    def execute(
        self,
        path: str,
        params: Dict[str, Any],
        method: str = 'GET',
        csv_path: Optional[str] = None,
    ) -> ApiResponse:
        """
        Send one request to the API and wrap its body.

        Args:
            path: Endpoint path relative to API_ENDPOINT (e.g. 'check')
            params: Query parameters (GET/DELETE) or form fields (POST)
            method: HTTP method
            csv_path: File sent as multipart field "csv"; params are ignored

        Returns:
            ApiResponse. Its text is empty if the transport failed.
        """
        method = method.upper()
        url = self.API_ENDPOINT + path
        data = None

        if method == 'POST':
            if csv_path is None:
                data = {k: _param_value(v) for k, v in params.items()}
        elif params:
            url += '?' + urlencode({k: _param_value(v) for k, v in params.items()})

        headers = {
            'Accept': 'application/json',
            'Key': self._config.api_key,
        }

        logger.debug(f"{method} {url}")
        try:
            body = self.transport.request(method, url, headers, data=data, csv_path=csv_path)
        except TransportError as e:
            logger.warning(f"AbuseIPDB request failed ({method} {path}): {e}")
            body = ''

        return ApiResponse(body)

    def _validate_max_age(self, max_age_in_days: int) -> int:
        max_age_in_days = _as_int(max_age_in_days, "maxAgeInDays")
        if not self.MAX_AGE_MIN <= max_age_in_days <= self.MAX_AGE_MAX:
            raise InvalidArgumentError(
                f"maxAgeInDays must be between {self.MAX_AGE_MIN} and {self.MAX_AGE_MAX} "
                f"({max_age_in_days} was given)"
            )
        return max_age_in_days


def _as_int(value: Any, name: str) -> int:
    """Accept ints and numeric strings ("90"), as config files and CLIs give them."""
    if isinstance(value, bool):
        raise InvalidArgumentError(f"{name} must be an integer ({value!r} was given)")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise InvalidArgumentError(f"{name} must be an integer ({value!r} was given)") from None


def _param_value(value: Any) -> str:
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)
