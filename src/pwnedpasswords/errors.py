"""
Exceptions raised by the Pwned Passwords range client.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""


class PwnedPasswordsError(Exception):
    """Base class for all Pwned Passwords errors."""


class InvalidBaseURL(PwnedPasswordsError, ValueError):
    """The configured base address cannot be used for range queries."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"failed to parse {url!r}: {reason}")


class TransportError(PwnedPasswordsError):
    """The HTTP request failed before a response was received."""


class UnexpectedStatus(PwnedPasswordsError):
    """The range endpoint answered with something other than 200."""

    def __init__(self, status: int, reason: str | None = None):
        self.status = status
        self.reason = reason or ""
        super().__init__(f"unexpected http status code: {status} {self.reason}".rstrip())


class EmptyResponse(PwnedPasswordsError):
    """A successful response contained no parseable SUFFIX:COUNT records."""

    def __init__(self, message: str = "no hashes in response"):
        super().__init__(message)
