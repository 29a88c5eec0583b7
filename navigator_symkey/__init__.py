"""Navigator Symkey — 256-bit symmetric keys and AES-GCM envelopes.

Security Note (Threat Model):
    Key material lives in immutable ``bytes`` objects and is released by
    garbage collection; it is not zeroized. A memory dump of the process
    could expose keys and decrypted plaintext.
"""

from .crypto import (
    KEY_SIZE,
    NONCE_SIZE,
    TAG_SIZE,
    TEXT_BASE,
    encrypt,
    decrypt,
)
from .entropy import (
    RandomSource,
    SystemRandomSource,
    DeterministicRandomSource,
)
from .exceptions import (
    SymmetricKeyError,
    RandomSourceError,
    InvalidKeyError,
    EncodingError,
    MalformedCiphertextError,
    AuthenticationError,
    CipherInitError,
)
from .key import SymmetricKey
from .config import SymkeyConfig, load_key, generate_key_text
from .version import __version__

__all__ = [
    "KEY_SIZE",
    "NONCE_SIZE",
    "TAG_SIZE",
    "TEXT_BASE",
    "encrypt",
    "decrypt",
    "RandomSource",
    "SystemRandomSource",
    "DeterministicRandomSource",
    "SymmetricKeyError",
    "RandomSourceError",
    "InvalidKeyError",
    "EncodingError",
    "MalformedCiphertextError",
    "AuthenticationError",
    "CipherInitError",
    "SymmetricKey",
    "SymkeyConfig",
    "load_key",
    "generate_key_text",
    "__version__",
]
