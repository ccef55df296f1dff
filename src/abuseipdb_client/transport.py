#!/usr/bin/env python3
"""
HTTP transport used by the client.

The client only needs "send this request, give me the body text". The
transport must hand back the body for every HTTP status (the API puts
its error JSON in 4xx bodies) and raise TransportError when the request
could not be delivered at all.
"""

import asyncio
import os
from abc import ABC, abstractmethod
from typing import Dict, Optional

import aiohttp

from .errors import TransportError


class HttpTransport(ABC):
    """Interface for the HTTP collaborator."""

    @abstractmethod
    def request(
        self,
        method: str,
        url: str,
        headers: Dict[str, str],
        data: Optional[Dict[str, str]] = None,
        csv_path: Optional[str] = None,
    ) -> str:
        """
        Perform one HTTP request.

        Args:
            method: GET, POST or DELETE
            url: Full URL, query string included
            headers: Request headers
            data: Form fields for POST
            csv_path: File to upload as multipart field "csv" (replaces data)

        Returns:
            Response body as text, whatever the status code

        Raises:
            TransportError: connection failure, timeout, etc.
        """
        pass


class AiohttpTransport(HttpTransport):
    """
    Blocking transport built on aiohttp.

    Each request runs in its own event loop with its own ClientSession,
    both closed before request() returns. Must not be called from a
    thread that is already running an event loop.
    """

    def __init__(self, timeout: Optional[float] = None):
        """
        Args:
            timeout: Total timeout in seconds (aiohttp default if None)
        """
        self.timeout = aiohttp.ClientTimeout(total=timeout) if timeout else None

    def request(
        self,
        method: str,
        url: str,
        headers: Dict[str, str],
        data: Optional[Dict[str, str]] = None,
        csv_path: Optional[str] = None,
    ) -> str:
        return asyncio.run(self._request(method, url, headers, data, csv_path))

    async def _request(
        self,
        method: str,
        url: str,
        headers: Dict[str, str],
        data: Optional[Dict[str, str]],
        csv_path: Optional[str],
    ) -> str:
        session_kwargs = {'timeout': self.timeout} if self.timeout else {}
        try:
            async with aiohttp.ClientSession(**session_kwargs) as session:
                if csv_path is not None:
                    with open(csv_path, 'rb') as csv_file:
                        form = aiohttp.FormData()
                        form.add_field(
                            'csv',
                            csv_file,
                            filename=os.path.basename(csv_path),
                            content_type='text/csv',
                        )
                        return await self._send(session, method, url, headers, form)
                return await self._send(session, method, url, headers, data)

        except aiohttp.ClientError as e:
            raise TransportError(f"Connection error: {e}") from e
        except asyncio.TimeoutError as e:
            raise TransportError(f"Request timed out: {method} {url}") from e
        except OSError as e:
            raise TransportError(f"Cannot read upload file {csv_path}: {e}") from e

    @staticmethod
    async def _send(session, method, url, headers, data) -> str:
        async with session.request(method, url, headers=headers, data=data) as response:
            return await response.text()
