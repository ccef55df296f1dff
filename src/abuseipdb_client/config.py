#!/usr/bin/env python3
"""
Client configuration.

The client needs two things: the API key and the list of strings (own
IPv4/IPv6 addresses, hostname...) that must never appear in a report
message. They can come from a dict, the environment, or a YAML/JSON file:

    # abuseipdb.yaml
    abuseipdb:
      api_key: "xxxx"
      self_ips:
        - 203.0.113.10
        - myhost.example.org

Environment variables: ABUSEIPDB_API_KEY, ABUSEIPDB_SELF_IPS (comma separated)
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Tuple

import yaml

from .errors import ConfigError, FilePermissionError, MissingFileError

logger = logging.getLogger('abuseipdb_client.config')

# Looked up next to the main config file when it defines no self_ips
SELF_IPS_FILENAMES = ('self_ips.json', 'self_ips.yaml', 'self_ips.yml')


@dataclass(frozen=True)
class ClientConfig:
    """Immutable client settings."""
    api_key: str
    self_identifiers: Tuple[str, ...] = ()

    def __post_init__(self):
        if not self.api_key:
            raise ConfigError("AbuseIPDB API key not configured")
        # Accept any iterable of strings, store a tuple
        object.__setattr__(self, 'self_identifiers', _as_tuple(self.self_identifiers))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ClientConfig':
        """Create config from a dictionary (e.g., YAML parsed)."""
        if not isinstance(data, dict):
            raise ConfigError("Configuration must be a mapping")
        if isinstance(data.get('abuseipdb'), dict):
            data = data['abuseipdb']
        identifiers = data.get('self_ips', data.get('self_identifiers')) or ()
        return cls(
            api_key=data.get('api_key') or '',
            self_identifiers=identifiers,
        )

    @classmethod
    def from_env(cls) -> 'ClientConfig':
        """Create config from environment variables."""
        raw_ips = os.environ.get('ABUSEIPDB_SELF_IPS', '')
        return cls(
            api_key=os.environ.get('ABUSEIPDB_API_KEY', ''),
            self_identifiers=[ip.strip() for ip in raw_ips.split(',') if ip.strip()],
        )

    @classmethod
    def from_file(cls, path: str) -> 'ClientConfig':
        """
        Load config from a YAML (or JSON) file.

        Raises:
            MissingFileError: the file does not exist
            FilePermissionError: the file is not readable
            ConfigError: the file can't be parsed or has no api key
        """
        config_path = Path(path)
        data = _load_file(config_path)
        if isinstance(data, dict) and isinstance(data.get('abuseipdb'), dict):
            data = data['abuseipdb']

        if isinstance(data, dict) and not data.get('self_ips') and not data.get('self_identifiers'):
            for name in SELF_IPS_FILENAMES:
                sibling = config_path.parent / name
                if sibling.is_file():
                    extra = _load_file(sibling)
                    if isinstance(extra, dict):
                        data = {**data, 'self_ips': extra.get('self_ips') or ()}
                    break

        config = cls.from_dict(data)
        logger.info(
            f"Loaded AbuseIPDB config from {config_path} "
            f"({len(config.self_identifiers)} self identifiers)"
        )
        return config


def _as_tuple(values: Optional[Iterable[str]]) -> Tuple[str, ...]:
    if not values:
        return ()
    if isinstance(values, str):
        return (values,)
    return tuple(str(v) for v in values)


def _load_file(path: Path) -> Any:
    if not path.is_file():
        raise MissingFileError(f"The file [{path}] does not exist.")
    if not os.access(path, os.R_OK):
        raise FilePermissionError(f"The file [{path}] is not readable.")
    try:
        with open(path, encoding='utf-8') as f:
            return yaml.safe_load(f) or {}
    except (yaml.YAMLError, UnicodeDecodeError) as e:
        raise ConfigError(f"Failed to parse config file {path}: {e}") from e
