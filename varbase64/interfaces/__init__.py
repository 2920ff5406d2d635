"""varbase64 interfaces package.

This package provides protocol definitions for codecs and the encoders
that callers build on top of them.
"""

from .crypto import IHasher
from .encoding import IBinaryEncoder, ITokenEncoder

__all__ = [
    # crypto
    "IHasher",
    # encoding
    "IBinaryEncoder",
    "ITokenEncoder",
]
