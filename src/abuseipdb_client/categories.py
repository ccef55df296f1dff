#!/usr/bin/env python3
"""
AbuseIPDB report categories.
https://www.abuseipdb.com/categories

Each category has a short name (usable in place of its id when reporting),
a numeric id kept as a string, a display name, and a flag telling whether
it may be the only category of a report. Categories that can't be used
alone must be combined with at least one category that can.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .errors import InvalidCategoryError, StandaloneCategoryError


@dataclass(frozen=True)
class Category:
    """A single AbuseIPDB report category."""
    short_name: str
    numeric_id: str
    display_name: str
    allowed_alone: bool = True

    def __str__(self) -> str:
        return self.numeric_id


CATEGORIES: Tuple[Category, ...] = (
    # Altering DNS records resulting in improper redirection.
    Category('dns-c', '1', 'DNS Compromise'),
    # Falsifying domain server cache (cache poisoning).
    Category('dns-p', '2', 'DNS Poisoning'),
    Category('fraud-orders', '3', 'Fraud Orders'),
    # Participating in distributed denial-of-service (usually part of botnet).
    Category('ddos', '4', 'DDoS Attack'),
    Category('ftp-bf', '5', 'FTP Brute-Force'),
    # Oversized IP packet.
    Category('pingdeath', '6', 'Ping of Death'),
    Category('phishing', '7', 'Phishing'),
    Category('fraudvoip', '8', 'Fraud VoIP'),
    # Open proxy, open relay, or Tor exit node.
    Category('openproxy', '9', 'Open Proxy'),
    Category('webspam', '10', 'Web Spam'),
    Category('emailspam', '11', 'Email Spam'),
    Category('blogspam', '12', 'Blog Spam'),
    # Conjunctive category.
    Category('vpnip', '13', 'VPN IP', allowed_alone=False),
    Category('scan', '14', 'Port Scan'),
    Category('hack', '15', 'Hacking'),
    Category('sql', '16', 'SQL Injection'),
    # Email sender spoofing.
    Category('spoof', '17', 'Spoofing'),
    # Credential brute-force on logins and services (SSH, FTP, SIP, SMTP, RDP...).
    Category('brute', '18', 'Brute-Force'),
    # Scrapers and crawlers that ignore robots.txt.
    Category('badbot', '19', 'Bad Web Bot'),
    Category('explhost', '20', 'Exploited Host'),
    # Probing or exploiting installed web applications (CMS, phpMyAdmin...).
    Category('webattack', '21', 'Web App Attack'),
    # To be combined with more specific categories.
    Category('ssh', '22', 'SSH', allowed_alone=False),
    Category('iot', '23', 'IoT Targeted'),
)


def list_categories() -> Tuple[Category, ...]:
    """Return every known category, in id order."""
    return CATEGORIES


def find_by_short_name(name: str) -> Optional[Category]:
    for category in CATEGORIES:
        if category.short_name == name:
            return category
    return None


def find_by_id(category_id: str) -> Optional[Category]:
    for category in CATEGORIES:
        if category.numeric_id == category_id:
            return category
    return None


def get_category_id_by_name(name: str) -> Optional[str]:
    """Get the id (as a string) of the category with the given short name."""
    category = find_by_short_name(name)
    return category.numeric_id if category else None


def get_category_name_by_id(category_id: str) -> Optional[str]:
    """Get the short name of the category with the given id."""
    category = find_by_id(category_id)
    return category.short_name if category else None


def resolve_report_categories(categories: str) -> str:
    """
    Validate a comma-separated list of category ids and/or short names.

    Args:
        categories: e.g. "18,ssh" or "brute,22"

    Returns:
        The matching ids joined by commas, in input order (e.g. "18,22")

    Raises:
        InvalidCategoryError: a token matches no category
        StandaloneCategoryError: only categories that can't be used alone were given
    """
    ids = []
    # None until the first category, then True while no allowed-alone
    # category has been seen. Once False it stays False.
    need_another: Optional[bool] = None

    for token in categories.split(','):
        token = token.strip()
        if token.isdigit():
            category = find_by_id(token)
        else:
            category = find_by_short_name(token)

        if category is None:
            raise InvalidCategoryError(f"Invalid report category was given: [{token}]")

        if need_another is not False:
            need_another = not category.allowed_alone

        ids.append(category.numeric_id)

    if need_another is not False:
        raise StandaloneCategoryError(
            "Invalid report category parameter given: some categories can't be used alone"
        )

    return ','.join(ids)
