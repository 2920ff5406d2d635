"""Cryptographic interfaces for varbase64.

This module defines protocols for callers that publish digests in an
encoded text form.
"""

from __future__ import annotations

from typing import Protocol


class IHasher(Protocol):
    """Interface for hashing operations."""

    async def sum(self, message: str) -> str:
        """Compute the encoded digest of a message.

        Args:
            message: The message to hash.

        Returns:
            The encoded digest.
        """
        ...
