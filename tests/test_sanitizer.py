#!/usr/bin/env python3
"""
Tests for report message sanitization.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from abuseipdb_client.sanitizer import MAX_MESSAGE_LENGTH, REDACTION_MARKER, sanitize_message


class TestSanitizeMessage:
    """Tests for sanitize_message."""

    def test_backslash_ip_and_email(self):
        """Backslashes dropped, self IP and email redacted."""
        result = sanitize_message(
            "user\\name reach admin@example.com from 10.0.0.5",
            ["10.0.0.5"],
        )
        assert result == "username reach * from *"
        assert "10.0.0.5" not in result
        assert "admin@example.com" not in result
        assert "\\" not in result

    def test_marker_is_star(self):
        """Redaction marker is a single star."""
        assert REDACTION_MARKER == "*"

    def test_every_occurrence_replaced(self):
        """All occurrences of each self identifier are replaced."""
        result = sanitize_message(
            "sshd[1]: myhost.example.org refused 203.0.113.10 on myhost.example.org",
            ["203.0.113.10", "myhost.example.org"],
        )
        assert result == "sshd[1]: * refused * on *"

    def test_empty_identifier_ignored(self):
        """Empty identifiers don't alter the message."""
        assert sanitize_message("Failed password", [""]) == "Failed password"

    def test_address_without_dot_kept(self):
        """Strings with @ but no domain dot are not treated as emails."""
        assert sanitize_message("user@localhost", []) == "user@localhost"

    def test_truncated_to_max_length(self):
        """Long messages are cut to 1024 characters."""
        result = sanitize_message("a" * 2000, [])
        assert MAX_MESSAGE_LENGTH == 1024
        assert len(result) == 1024

    def test_truncation_counts_characters(self):
        """Truncation is by character, not by byte."""
        result = sanitize_message("é" * 2000)
        assert result == "é" * 1024

    def test_short_message_untouched(self):
        """A clean message is returned unchanged."""
        assert sanitize_message("Port scan on 22/tcp") == "Port scan on 22/tcp"
