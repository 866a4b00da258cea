"""
Pwned Passwords range API client.

Implements the k-anonymity password check:
- SHA-1 the password locally and split the hex digest
- Send only the 5 character prefix to the range endpoint
- Match the returned suffixes locally

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import asyncio
import logging
from typing import Iterable, Iterator

import aiohttp

from pwnedpasswords.config import ClientConfig
from pwnedpasswords.digest import split, split_digest
from pwnedpasswords.errors import EmptyResponse, TransportError, UnexpectedStatus
from pwnedpasswords.models import CandidateRecord, PasswordCheckResult

logger = logging.getLogger(__name__)


def _iter_records(lines: Iterable[str]) -> Iterator[CandidateRecord]:
    """Yield records from SUFFIX:COUNT lines, skipping anything malformed."""
    for line in lines:
        parts = line.split(":")
        if len(parts) != 2:
            continue

        suffix, count_str = parts
        # Bare base-10 digits only: no signs, separators or whitespace
        if not (count_str.isascii() and count_str.isdigit()):
            continue

        yield CandidateRecord(suffix=suffix, count=int(count_str))


def parse_range_response(body: str) -> list[CandidateRecord]:
    """Parse a range response body into candidate records.

    Args:
        body: Response text, one SUFFIX:COUNT record per line

    Returns:
        Records in the order they appear in the body

    Raises:
        EmptyResponse: No line could be parsed
    """
    # Only \n, optionally preceded by \r, ends a line
    lines = (line.removesuffix("\r") for line in body.split("\n"))
    records = list(_iter_records(lines))
    if not records:
        raise EmptyResponse()
    return records


def find_count(records: Iterable[CandidateRecord], suffix: str) -> int:
    """Return the count of the first record matching suffix, or 0."""
    for record in records:
        if record.suffix == suffix:
            return record.count
    return 0


class PwnedPasswordsClient:
    """Client for the Pwned Passwords range API.

    The password, hashed or not, never leaves this process. Only the
    first 5 characters of its SHA-1 hex digest are sent. A single client
    can serve concurrent checks; they share nothing but the read-only
    config and the session's connection pool.
    """

    def __init__(self, config: ClientConfig | None = None):
        """Initialize client.

        Args:
            config: Client configuration (default: ClientConfig())

        Raises:
            InvalidBaseURL: The configured base address is malformed
        """
        self.config = config or ClientConfig()
        self._session: aiohttp.ClientSession | None = None

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure HTTP session exists."""
        if self._session is None or self._session.closed:
            connector = aiohttp.TCPConnector(
                limit=self.config.max_connections,
                limit_per_host=self.config.max_connections_per_host,
                keepalive_timeout=self.config.keepalive_timeout,
            )
            self._session = aiohttp.ClientSession(
                connector=connector,
                timeout=aiohttp.ClientTimeout(
                    total=self.config.total_timeout,
                    connect=self.config.establish_timeout,
                    sock_connect=self.config.connect_timeout,
                ),
                trust_env=True,
            )
        return self._session

    async def close(self) -> None:
        """Close HTTP session."""
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    async def __aenter__(self) -> "PwnedPasswordsClient":
        """Async context manager entry."""
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()

    def _headers(self) -> dict[str, str]:
        headers = {"User-Agent": self.config.user_agent}
        if self.config.add_padding:
            headers["Add-Padding"] = "true"
        return headers

    async def fetch_range(self, prefix: str) -> list[CandidateRecord]:
        """Fetch all candidate records sharing a digest prefix.

        Args:
            prefix: 5 character uppercase hex prefix

        Returns:
            Parsed candidate records

        Raises:
            TransportError: Connection, DNS or timeout failure
            UnexpectedStatus: Response status was not 200
            EmptyResponse: Response held no parseable records
        """
        session = await self._ensure_session()
        url = self.config.range_url(prefix)

        logger.debug(f"Requesting range {prefix}")

        try:
            async with session.get(url, headers=self._headers()) as response:
                if response.status != 200:
                    raise UnexpectedStatus(response.status, response.reason)
                body = await response.text(encoding="utf-8", errors="replace")
        except asyncio.TimeoutError as e:
            raise TransportError(f"http request to {url!r} timed out") from e
        except aiohttp.ClientError as e:
            raise TransportError(f"http request to {url!r} failed: {e}") from e

        records = parse_range_response(body)
        logger.debug(f"Range {prefix} returned {len(records)} records")
        return records

    async def check(self, password: bytes) -> int:
        """Return how many times a password appears in Pwned Passwords.

        0 means the password is clean. Anything greater means it has
        been seen in breaches and should be changed.

        Args:
            password: Raw password bytes (NOT stored or logged)
        """
        prefix, suffix = split(password)
        records = await self.fetch_range(prefix)
        return find_count(records, suffix)

    async def check_password(self, password: bytes | str) -> PasswordCheckResult:
        """Check a password and wrap the count in a result object.

        Args:
            password: Password to check, str is UTF-8 encoded

        Returns:
            PasswordCheckResult with exposure count
        """
        if isinstance(password, str):
            password = password.encode("utf-8")

        prefix, _ = split(password)

        return PasswordCheckResult(
            occurrences=await self.check(password),
            hash_prefix=prefix,
        )

    async def check_digest(self, sha1_hex: str) -> PasswordCheckResult:
        """Check a pre-computed SHA-1 digest against Pwned Passwords.

        Args:
            sha1_hex: Full SHA-1 hex digest of the password

        Returns:
            PasswordCheckResult with exposure count
        """
        prefix, suffix = split_digest(sha1_hex)
        records = await self.fetch_range(prefix)

        return PasswordCheckResult(
            occurrences=find_count(records, suffix),
            hash_prefix=prefix,
        )


# Convenience function for synchronous usage
def check_sync(password: bytes, config: ClientConfig | None = None) -> int:
    """Synchronous wrapper for a single password check.

    Args:
        password: Raw password bytes
        config: Client configuration

    Returns:
        Number of times the password was seen in breaches
    """
    async def _check():
        async with PwnedPasswordsClient(config) as client:
            return await client.check(password)

    return asyncio.run(_check())
