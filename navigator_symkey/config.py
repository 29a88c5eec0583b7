"""
Symmetric Key Configuration — key loading and validated settings.

Reads the key from environment variables in the format:
    SYMKEY_KEY = <multibase-encoded 32-byte key, e.g. "b...">
    SYMKEY_TEXT_BASE = <multibase name used for output, default "base32">

Security Note:
    Never log key material. Only log variable names and base names.
"""
import os
import logging
from typing import Any

from pydantic import BaseModel, Field, field_validator

from .crypto import TEXT_BASE, encode_text, is_registered_base
from .key import SymmetricKey

logger = logging.getLogger("navigator.symkey")

KEY_ENV = "SYMKEY_KEY"
TEXT_BASE_ENV = "SYMKEY_TEXT_BASE"


def load_key(env_var: str = KEY_ENV) -> SymmetricKey:
    """Load a symmetric key from its text form in ``env_var``.

    Returns:
        The decoded SymmetricKey.

    Raises:
        RuntimeError: If the variable is unset or empty.
        EncodingError: If the value is not validly multibase-encoded.
        InvalidKeyError: If the value does not decode to 32 bytes.
    """
    value = os.environ.get(env_var, "").strip()
    if not value:
        raise RuntimeError(
            f"{env_var} environment variable is not set. "
            f"Set {env_var}=<multibase-encoded-32-byte-key>"
        )
    key = SymmetricKey.from_text(value)
    logger.debug("Loaded symmetric key from %s", env_var)
    return key


def generate_key_text() -> str:
    """Generate a random key and return its text form.

    This is a utility for operators to generate new keys.
    """
    return SymmetricKey.generate().to_text()


class SymkeyConfig(BaseModel):
    """Validated symmetric key configuration."""

    key: SymmetricKey
    text_base: str = Field(default=TEXT_BASE)

    model_config = {"arbitrary_types_allowed": True, "frozen": True}

    @field_validator("key", mode="before")
    @classmethod
    def parse_key(cls, v: Any) -> Any:
        """Accept a SymmetricKey or its multibase text form."""
        if isinstance(v, str):
            return SymmetricKey.from_text(v)
        return v

    @field_validator("text_base")
    @classmethod
    def validate_text_base(cls, v: str) -> str:
        """Validate the output base is known to the multibase registry."""
        if not is_registered_base(v):
            raise ValueError(f"Unsupported multibase: {v}")
        return v

    def key_text(self) -> str:
        """Return the key encoded with the configured ``text_base``."""
        return encode_text(self.key.raw_bytes(), self.text_base)

    @classmethod
    def from_env(cls) -> "SymkeyConfig":
        """Create SymkeyConfig by loading values from environment.

        Returns:
            Populated SymkeyConfig instance.
        """
        key = load_key(KEY_ENV)
        text_base = os.environ.get(TEXT_BASE_ENV, TEXT_BASE)
        logger.debug("Symmetric key text base: %s", text_base)
        return cls(key=key, text_base=text_base)
