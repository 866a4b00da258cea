"""
Configuration for the Pwned Passwords range client.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import math
import os
from dataclasses import dataclass
from typing import Any

from yarl import URL

from pwnedpasswords.errors import InvalidBaseURL

VERSION = "1.0.0"

# Prefix is appended verbatim, so the trailing slash matters
DEFAULT_URL = "https://api.pwnedpasswords.com/range/"

USER_AGENT = f"pwnedpasswords/{VERSION} (+https://github.com/dnsscience/pwnedpasswords)"


@dataclass(frozen=True)
class ClientConfig:
    """Immutable settings for talking to the range endpoint.

    aiohttp has no separate TLS handshake timeout, so the TCP dial gets
    ``connect_timeout`` and establishing a connection as a whole (pool
    wait, dial and handshake) gets ``connect_timeout + handshake_timeout``.
    ``total_timeout`` bounds everything including the body read.
    """

    base_url: str = DEFAULT_URL
    user_agent: str = USER_AGENT

    # Timeouts (seconds), all must be finite and > 0
    total_timeout: float = 60.0
    connect_timeout: float = 30.0
    handshake_timeout: float = 10.0
    keepalive_timeout: float = 30.0

    # Connection pool. Idle keep-alive connections are capped by the same
    # limits, aiohttp has no separate idle cap.
    max_connections: int = 20
    max_connections_per_host: int = 20

    # Ask the service to pad responses with zero-count records
    add_padding: bool = False

    def __post_init__(self) -> None:
        try:
            url = URL(self.base_url)
        except (TypeError, ValueError) as e:
            raise InvalidBaseURL(str(self.base_url), str(e)) from e

        if url.scheme not in ("http", "https"):
            raise InvalidBaseURL(self.base_url, "scheme must be http or https")
        if not url.host:
            raise InvalidBaseURL(self.base_url, "missing host")

        # aiohttp reads 0, negative and NaN timeouts as "no timeout"
        for name in ("total_timeout", "connect_timeout", "handshake_timeout", "keepalive_timeout"):
            value = getattr(self, name)
            if not (math.isfinite(value) and value > 0):
                raise ValueError(f"{name} must be a finite number of seconds > 0, got {value!r}")

        for name in ("max_connections", "max_connections_per_host"):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be at least 1")

    @property
    def establish_timeout(self) -> float:
        """Budget for getting a usable connection: dial plus handshake."""
        return self.connect_timeout + self.handshake_timeout

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Load configuration from environment variables."""
        return cls(
            base_url=os.environ.get("PWNEDPASSWORDS_URL", DEFAULT_URL),
            total_timeout=float(os.environ.get("PWNEDPASSWORDS_TIMEOUT", "60")),
            add_padding=os.environ.get("PWNEDPASSWORDS_ADD_PADDING", "").lower() in ("true", "yes", "1"),
        )

    def range_url(self, prefix: str) -> str:
        """Get the lookup URL for a digest prefix."""
        return f"{self.base_url}{prefix}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "base_url": self.base_url,
            "user_agent": self.user_agent,
            "total_timeout": self.total_timeout,
            "connect_timeout": self.connect_timeout,
            "handshake_timeout": self.handshake_timeout,
            "keepalive_timeout": self.keepalive_timeout,
            "max_connections": self.max_connections,
            "max_connections_per_host": self.max_connections_per_host,
            "add_padding": self.add_padding,
        }
