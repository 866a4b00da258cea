"""
Pwned Passwords k-anonymity client.

Checks passwords against the Have I Been Pwned, Pwned Passwords range
API. The password is SHA-1 hashed locally and only the first five hex
characters of the digest are sent; matching happens on this machine.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from pwnedpasswords.config import DEFAULT_URL, VERSION, ClientConfig
from pwnedpasswords.digest import split, split_digest
from pwnedpasswords.errors import (
    EmptyResponse,
    InvalidBaseURL,
    PwnedPasswordsError,
    TransportError,
    UnexpectedStatus,
)
from pwnedpasswords.models import CandidateRecord, PasswordCheckResult, RiskLevel
from pwnedpasswords.client import (
    PwnedPasswordsClient,
    check_sync,
    find_count,
    parse_range_response,
)

__version__ = VERSION

__all__ = [
    "DEFAULT_URL",
    "ClientConfig",
    "PwnedPasswordsClient",
    "check_sync",
    "find_count",
    "parse_range_response",
    "split",
    "split_digest",
    "CandidateRecord",
    "PasswordCheckResult",
    "RiskLevel",
    "PwnedPasswordsError",
    "InvalidBaseURL",
    "TransportError",
    "UnexpectedStatus",
    "EmptyResponse",
]
