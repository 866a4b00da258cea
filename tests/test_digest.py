"""Tests for SHA-1 digest splitting."""

import hashlib
import os

import pytest

from pwnedpasswords.digest import split, split_digest


class TestSplit:
    """Test splitting a password digest."""

    @pytest.mark.parametrize(
        "password, prefix, suffix",
        [
            (b"", "DA39A", "3EE5E6B4B0D3255BFEF95601890AFD80709"),
            (b"password", "5BAA6", "1E4C9B93F3F0682250B6CF8331B7EE68FD8"),
            (b"test word", "DBE16", "4D0591EEAAC5A33064731DBD53F6A819DCE"),
            ("世界".encode("utf-8"), "CF165", "6101ED511A094D1E4E515BBF8D32B266090"),
        ],
        ids=["empty", "password", "test word", "unicode"],
    )
    def test_known_vectors(self, password, prefix, suffix):
        assert split(password) == (prefix, suffix)

    def test_lengths_and_case(self):
        """Prefix is 5 chars, suffix 35, both uppercase hex."""
        for _ in range(20):
            prefix, suffix = split(os.urandom(16))
            assert len(prefix) == 5
            assert len(suffix) == 35
            assert all(c in "0123456789ABCDEF" for c in prefix + suffix)

    def test_reassembles_full_digest(self):
        password = b"correct horse battery staple"
        prefix, suffix = split(password)
        assert prefix + suffix == hashlib.sha1(password).hexdigest().upper()

    def test_deterministic(self):
        assert split(b"mypassword") == split(b"mypassword")

    def test_no_normalization(self):
        """Surrounding whitespace is part of the password."""
        assert split(b"password ") != split(b"password")


class TestSplitDigest:
    """Test splitting a pre-computed digest."""

    def test_lowercase_is_normalized(self):
        assert split_digest("5baa61e4c9b93f3f0682250b6cf8331b7ee68fd8") == (
            "5BAA6",
            "1E4C9B93F3F0682250B6CF8331B7EE68FD8",
        )

    def test_matches_split(self):
        digest = hashlib.sha1(b"password").hexdigest()
        assert split_digest(digest) == split(b"password")

    @pytest.mark.parametrize("value", ["", "5BAA6", "Z" * 40, "5BAA61E4C9B93F3F0682250B6CF8331B7EE68FD8AA"])
    def test_rejects_invalid(self, value):
        with pytest.raises(ValueError):
            split_digest(value)
