"""
Symmetric Key Errors.

Every failure raised by navigator_symkey derives from ``SymmetricKeyError``.
Errors are returned to the immediate caller; nothing here is logged,
retried or swallowed.
"""


class SymmetricKeyError(Exception):
    """Base class for all symmetric key errors."""


class RandomSourceError(SymmetricKeyError):
    """The secure random source could not produce the requested bytes."""


class InvalidKeyError(SymmetricKeyError, ValueError):
    """Key material is not exactly 32 bytes."""


class EncodingError(SymmetricKeyError, ValueError):
    """Text is not validly multibase-encoded."""


class MalformedCiphertextError(SymmetricKeyError, ValueError):
    """Ciphertext blob is too short to contain a nonce."""


class AuthenticationError(SymmetricKeyError):
    """Authentication tag did not verify.

    Raised for tampered data, a wrong key or a truncated tag alike; the
    message never says which.
    """

    def __init__(self, message: str = "message authentication failed"):
        super().__init__(message)


class CipherInitError(SymmetricKeyError):
    """The AEAD cipher could not be built from the key material."""
