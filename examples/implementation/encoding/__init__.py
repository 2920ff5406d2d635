"""Encoding reference implementation package.

This package provides reference callers of the codec: token compression and
encoding, qualified digests, IMAP mailbox names and filesystem-safe binary
names.
"""

from .digest import Hasher
from .mailbox import MailboxName
from .nokey_name import NoKeyName
from .token_encoder import TokenEncoder

__all__ = [
    "Hasher",
    "MailboxName",
    "NoKeyName",
    "TokenEncoder",
]
