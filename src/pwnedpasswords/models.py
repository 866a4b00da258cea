"""
Data models for Pwned Passwords range lookups.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class RiskLevel(str, Enum):
    """How widely a password has been exposed."""

    SAFE = "safe"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @property
    def style(self) -> str:
        """Rich style used when printing this level."""
        return _RISK_STYLES[self]


_RISK_STYLES = {
    RiskLevel.SAFE: "green",
    RiskLevel.LOW: "yellow",
    RiskLevel.MEDIUM: "orange3",
    RiskLevel.HIGH: "red",
    RiskLevel.CRITICAL: "bold red",
}

# (exclusive upper bound on occurrences, level); anything above is CRITICAL
_RISK_BOUNDS = (
    (1, RiskLevel.SAFE),
    (10, RiskLevel.LOW),
    (100, RiskLevel.MEDIUM),
    (10000, RiskLevel.HIGH),
)

_ADVICE = {
    RiskLevel.SAFE: "No breach corpus entry matches this password's hash.",
    RiskLevel.LOW: "Rarely seen, but attackers' wordlists may still include it. Pick a new one.",
    RiskLevel.MEDIUM: "Seen often enough to appear in targeted wordlists. Replace it.",
    RiskLevel.HIGH: "Common in breach dumps. Replace it everywhere it is used.",
    RiskLevel.CRITICAL: "One of the most exposed passwords known. Replace it everywhere now.",
}


@dataclass(frozen=True)
class CandidateRecord:
    """One SUFFIX:COUNT line returned for a queried prefix."""

    suffix: str
    count: int


@dataclass
class PasswordCheckResult:
    """Outcome of one password check, safe to print or serialize."""

    occurrences: int = 0
    checked_at: datetime = field(default_factory=datetime.now)
    # 5 character digest prefix, the only part of the hash ever sent
    hash_prefix: str = ""

    @property
    def is_pwned(self) -> bool:
        return self.occurrences > 0

    @property
    def risk_level(self) -> RiskLevel:
        for bound, level in _RISK_BOUNDS:
            if self.occurrences < bound:
                return level
        return RiskLevel.CRITICAL

    @property
    def risk_description(self) -> str:
        """Exposure count followed by advice for the risk level."""
        if not self.is_pwned:
            return _ADVICE[RiskLevel.SAFE]
        return f"Seen {self.occurrences:,} times in breaches. {_ADVICE[self.risk_level]}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "is_pwned": self.is_pwned,
            "occurrences": self.occurrences,
            "risk_level": self.risk_level.value,
            "risk_description": self.risk_description,
            "hash_prefix": self.hash_prefix,
            "checked_at": self.checked_at.isoformat(),
        }
