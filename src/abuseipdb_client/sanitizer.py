#!/usr/bin/env python3
"""
Report message sanitizer.

Messages often come straight from log matches (fail2ban <matches>, etc.),
so before submission we strip backslashes, hide our own addresses and
hostnames, and mask anything that looks like an email address.
"""

import re
from typing import Iterable

REDACTION_MARKER = '*'

# AbuseIPDB rejects comments longer than this
MAX_MESSAGE_LENGTH = 1024

EMAIL_PATTERN = re.compile(r'[^@\s]*@[^@\s]*\.[^@\s]*')


def sanitize_message(message: str, self_identifiers: Iterable[str] = ()) -> str:
    """
    Clean a report message before it is sent.

    Args:
        message: Raw report message
        self_identifiers: IPs / hostnames identifying the reporter

    Returns:
        The cleaned message, at most MAX_MESSAGE_LENGTH characters
    """
    message = message.replace('\\', '')

    for identifier in self_identifiers:
        if identifier:
            message = message.replace(identifier, REDACTION_MARKER)

    message = EMAIL_PATTERN.sub(REDACTION_MARKER, message)

    return message[:MAX_MESSAGE_LENGTH]
