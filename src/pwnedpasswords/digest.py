"""
SHA-1 digest splitting for k-anonymity range queries.

Only the 5 character prefix may leave the process. The full digest
must never be written to disk, logged or sent across the network.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import hashlib
import string

PREFIX_LENGTH = 5
DIGEST_LENGTH = 40

_HEX_DIGITS = set(string.hexdigits)


def split(password: bytes) -> tuple[str, str]:
    """Hash a password and split the digest into prefix and suffix.

    The bytes are hashed exactly as given, with no normalization.

    Args:
        password: Raw password bytes (may be empty)

    Returns:
        Tuple of (prefix, suffix) as uppercase hex strings
    """
    digest = hashlib.sha1(password).hexdigest().upper()
    return digest[:PREFIX_LENGTH], digest[PREFIX_LENGTH:]


def split_digest(sha1_hex: str) -> tuple[str, str]:
    """Split a pre-computed SHA-1 hex digest into prefix and suffix.

    Args:
        sha1_hex: Full 40 character SHA-1 digest, any case

    Returns:
        Tuple of (prefix, suffix) as uppercase hex strings
    """
    sha1_hex = sha1_hex.strip()
    if len(sha1_hex) != DIGEST_LENGTH or not set(sha1_hex) <= _HEX_DIGITS:
        raise ValueError("SHA-1 digest must be exactly 40 hexadecimal characters")

    sha1_hex = sha1_hex.upper()
    return sha1_hex[:PREFIX_LENGTH], sha1_hex[PREFIX_LENGTH:]
