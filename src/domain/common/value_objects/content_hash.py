"""
Fingerprint of a generation input text.

Only the digest is stored, so a generation source can be traced back to
identical submissions without keeping the text itself.
"""

import hashlib
import re
from dataclasses import dataclass
from typing import Self

_SHA256_HEX = re.compile(r"[0-9a-f]{64}")


@dataclass(frozen=True)
class ContentHash:
    """Lowercase hex SHA-256 digest. Informational only, never used for lookups."""

    value: str

    def __post_init__(self) -> None:
        if not _SHA256_HEX.fullmatch(self.value):
            raise ValueError(f"Not a SHA-256 hex digest: {self.value!r}")

    @classmethod
    def compute(cls, content: str) -> Self:
        """
        Hash the content with surrounding whitespace removed, matching the
        text as it was validated.

        Raises:
            ValueError: If nothing but whitespace is given
        """
        normalized = content.strip()
        if not normalized:
            raise ValueError("Cannot compute hash of empty content")
        return cls(hashlib.sha256(normalized.encode("utf-8")).hexdigest())
