"""
Symmetric Key Crypto Core — AES-256-GCM envelope and multibase text codec.

Envelope format: [nonce 12B][ciphertext len(plaintext)B][GCM tag 16B]

The nonce is drawn fresh from the random source on every call to
``encrypt``; reusing a nonce under the same key breaks GCM entirely.
No associated data is bound into the tag.

Security Note:
    Never log plaintext, ciphertext or key material.
"""
from typing import TYPE_CHECKING, Optional, Union

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from multiformats import multibase

from .entropy import RandomSource, read_random
from .exceptions import (
    AuthenticationError,
    CipherInitError,
    EncodingError,
    MalformedCiphertextError,
)

if TYPE_CHECKING:
    from .key import SymmetricKey

KEY_SIZE = 32  # AES-256
NONCE_SIZE = 12  # 96-bit nonce
TAG_SIZE = 16  # GCM tag
TEXT_BASE = "base32"  # multibase code "b", lowercase RFC 4648, no padding

KeyLike = Union["SymmetricKey", bytes]


# ---------------------------------------------------------------------------
# AEAD envelope
# ---------------------------------------------------------------------------

def _new_cipher(key: KeyLike) -> AESGCM:
    try:
        material = bytes(key)
    except TypeError as err:
        raise CipherInitError(f"cannot build AES-256-GCM cipher: {err}") from err
    # AESGCM also accepts 128 and 192-bit keys
    if len(material) != KEY_SIZE:
        raise CipherInitError(
            f"AES-256-GCM needs a {KEY_SIZE}-byte key, got {len(material)}"
        )
    return AESGCM(material)


def encrypt(
    key: KeyLike,
    plaintext: bytes,
    random_source: Optional[RandomSource] = None,
) -> bytes:
    """Seal plaintext with AES-256-GCM under a fresh random nonce.

    Args:
        key: SymmetricKey (or its raw 32 bytes).
        plaintext: Data to encrypt, may be empty.
        random_source: Nonce source; defaults to the system CSPRNG.

    Returns:
        ``nonce + ciphertext + tag``, i.e. ``12 + len(plaintext) + 16`` bytes.

    Raises:
        CipherInitError: If the key cannot build a cipher.
        RandomSourceError: If the nonce cannot be generated.
    """
    cipher = _new_cipher(key)
    nonce = read_random(NONCE_SIZE, random_source)
    return nonce + cipher.encrypt(nonce, plaintext, None)


def decrypt(key: KeyLike, blob: bytes) -> bytes:
    """Open an envelope produced by ``encrypt``.

    Args:
        key: SymmetricKey (or its raw 32 bytes).
        blob: Ciphertext in format [nonce 12B][payload+tag].

    Returns:
        The original plaintext.

    Raises:
        MalformedCiphertextError: If the blob is shorter than a nonce.
        AuthenticationError: If the tag does not verify.
        CipherInitError: If the key cannot build a cipher.
    """
    if len(blob) < NONCE_SIZE:
        raise MalformedCiphertextError(
            f"ciphertext too short: {len(blob)} bytes (minimum {NONCE_SIZE})"
        )
    cipher = _new_cipher(key)
    nonce = bytes(blob[:NONCE_SIZE])
    sealed = bytes(blob[NONCE_SIZE:])
    if len(sealed) < TAG_SIZE:
        raise AuthenticationError()
    try:
        return cipher.decrypt(nonce, sealed, None)
    except InvalidTag as err:
        raise AuthenticationError() from err


# ---------------------------------------------------------------------------
# Multibase text codec
# ---------------------------------------------------------------------------

def encode_text(data: bytes, base: str = TEXT_BASE) -> str:
    """Encode bytes as a multibase string (prefix code + payload)."""
    return multibase.encode(data, base)


def decode_text(text: str) -> tuple[str, bytes]:
    """Decode any registered multibase string.

    Returns:
        Tuple of (base name, decoded bytes).

    Raises:
        EncodingError: If the text is empty, not a string, uses an unknown
            prefix or carries an invalid payload for its base.
    """
    if not isinstance(text, str):
        raise EncodingError(
            f"multibase text must be str, got {type(text).__name__}"
        )
    if not text:
        raise EncodingError("multibase text is empty")
    try:
        base, data = multibase.decode_raw(text)
    except (KeyError, ValueError) as err:
        raise EncodingError(f"invalid multibase text: {err}") from err
    return base.name, bytes(data)


def is_registered_base(name: str) -> bool:
    """Return True if ``name`` is a base known to the multibase registry."""
    return multibase.exists(name)
