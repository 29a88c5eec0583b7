"""
SymmetricKey — immutable 256-bit key value.

Construction paths:
- ``SymmetricKey.generate()`` — 32 bytes from a secure random source
- ``SymmetricKey.generate_or_abort()`` — same, but fatal on entropy failure
- ``SymmetricKey.from_bytes(b)`` — exactly 32 raw bytes
- ``SymmetricKey.from_text(s)`` — any registered multibase encoding of 32 bytes

Security Note:
    ``repr()`` never includes key material. Never log ``str(key)``.
"""
import hmac
import logging
from typing import Optional

from .crypto import (
    KEY_SIZE,
    TEXT_BASE,
    decode_text,
    decrypt,
    encode_text,
    encrypt,
)
from .entropy import RandomSource, read_random
from .exceptions import InvalidKeyError, RandomSourceError

logger = logging.getLogger("navigator.symkey")


class SymmetricKey:
    """AES-256 key material, validated to exactly 32 bytes.

    Instances are immutable and may be shared freely between threads.
    """

    __slots__ = ("_raw",)

    def __init__(self, raw: bytes):
        try:
            material = bytes(memoryview(raw))
        except TypeError as err:
            raise InvalidKeyError(
                f"key material must be bytes-like, got {type(raw).__name__}"
            ) from err
        if len(material) != KEY_SIZE:
            raise InvalidKeyError(
                f"key must be exactly {KEY_SIZE} bytes, got {len(material)}"
            )
        object.__setattr__(self, "_raw", material)

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    # -- constructors -------------------------------------------------------

    @classmethod
    def generate(cls, random_source: Optional[RandomSource] = None) -> "SymmetricKey":
        """Return a new random key.

        Raises:
            RandomSourceError: If the random source fails; never retried.
        """
        return cls(read_random(KEY_SIZE, random_source))

    @classmethod
    def generate_or_abort(
        cls, random_source: Optional[RandomSource] = None
    ) -> "SymmetricKey":
        """Return a new random key, exiting if no entropy is available.

        Meant for start-up code with no recovery path. Library code should
        call ``generate`` and handle ``RandomSourceError`` instead.
        """
        try:
            return cls.generate(random_source)
        except RandomSourceError as err:
            logger.critical("Cannot generate symmetric key: %s", err)
            raise SystemExit(f"fatal: cannot generate symmetric key: {err}") from err

    @classmethod
    def from_bytes(cls, raw: bytes) -> "SymmetricKey":
        """Return a key from exactly 32 raw bytes.

        Raises:
            InvalidKeyError: On any other length.
        """
        return cls(raw)

    @classmethod
    def from_text(cls, text: str) -> "SymmetricKey":
        """Return a key from its multibase text form.

        Raises:
            EncodingError: If the text is not validly multibase-encoded.
            InvalidKeyError: If it does not decode to 32 bytes.
        """
        _, raw = decode_text(text)
        return cls(raw)

    # -- serialization ------------------------------------------------------

    def raw_bytes(self) -> bytes:
        return self._raw

    def to_text(self) -> str:
        """Return the base32 multibase form, e.g. ``"b..."``."""
        try:
            return encode_text(self._raw, TEXT_BASE)
        except (KeyError, ValueError) as err:
            raise AssertionError(
                f"hardcoded multibase {TEXT_BASE!r} failed to encode: {err}"
            ) from err

    def __bytes__(self) -> bytes:
        return self._raw

    def __str__(self) -> str:
        return self.to_text()

    # -- crypto -------------------------------------------------------------

    def encrypt(
        self, plaintext: bytes, random_source: Optional[RandomSource] = None
    ) -> bytes:
        """AES-256-GCM seal; see ``navigator_symkey.crypto.encrypt``."""
        return encrypt(self, plaintext, random_source)

    def decrypt(self, blob: bytes) -> bytes:
        """AES-256-GCM open; see ``navigator_symkey.crypto.decrypt``."""
        return decrypt(self, blob)

    # -- value semantics ----------------------------------------------------

    def __eq__(self, other) -> bool:
        if not isinstance(other, SymmetricKey):
            return NotImplemented
        return hmac.compare_digest(self._raw, other._raw)

    def __hash__(self) -> int:
        return hash((SymmetricKey, self._raw))

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {KEY_SIZE * 8}-bit>"

    def __copy__(self) -> "SymmetricKey":
        return self

    def __deepcopy__(self, memo) -> "SymmetricKey":
        return self

    def __reduce__(self):
        return (self.__class__, (self._raw,))
