#!/usr/bin/env python3
"""
ApiResponse - uniform wrapper around one AbuseIPDB response body.

Successful bodies look like {"data": {...}}, error bodies like
{"errors": [{"title": ..., "detail": ...}]}. The blacklist endpoint may
also answer in plaintext (one IP per line), in which case the parsed
views are None and only get_plaintext() is meaningful.
"""

import json
from types import SimpleNamespace
from typing import Any, Dict, List, Optional

from .errors import RemoteApiError

_UNPARSED = object()


class ApiResponse:
    """
    Read-only view over a raw response body.

    An empty body means the transport failed to deliver the request.
    """

    def __init__(self, plaintext: Optional[str] = None):
        self._plaintext = plaintext
        self._decoded: Any = _UNPARSED

    @classmethod
    def from_error_message(cls, message: str) -> 'ApiResponse':
        """Build a response for a local failure, shaped like an API error."""
        body = {
            "errors": [
                {
                    "title": "Internal Error",
                    "detail": message,
                }
            ]
        }
        return cls(json.dumps(body))

    def _decode(self) -> Any:
        if self._decoded is _UNPARSED:
            self._decoded = None
            if self._plaintext:
                try:
                    self._decoded = json.loads(self._plaintext)
                except ValueError:
                    pass
        return self._decoded

    def get_plaintext(self) -> Optional[str]:
        return self._plaintext

    def get_array(self) -> Optional[Any]:
        """Decoded body as dicts and lists (key order preserved), or None. Fresh copy per call."""
        if self._decode() is None:
            return None
        return json.loads(self._plaintext)

    def get_object(self) -> Optional[Any]:
        """Decoded body with attribute access (response.get_object().data.ipAddress), or None."""
        if not self._plaintext:
            return None
        try:
            return json.loads(self._plaintext, object_hook=lambda d: SimpleNamespace(**d))
        except ValueError:
            return None

    def errors(self) -> List[Dict[str, Any]]:
        decoded = self._decode()
        if isinstance(decoded, dict) and isinstance(decoded.get('errors'), list):
            return decoded['errors']
        return []

    def has_error(self) -> bool:
        return len(self.errors()) > 0

    @property
    def is_empty(self) -> bool:
        """True when no body was received at all."""
        return not self._plaintext

    def raise_for_errors(self) -> 'ApiResponse':
        """Raise RemoteApiError if the body carries errors, else return self."""
        if self.has_error():
            raise RemoteApiError(self.errors())
        return self

    def __repr__(self) -> str:
        size = len(self._plaintext) if self._plaintext else 0
        return f"<ApiResponse {size} chars, errors={len(self.errors())}>"
