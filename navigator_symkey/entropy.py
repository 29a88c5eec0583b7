"""
Random Sources — the entropy capability used for keys and nonces.

``SystemRandomSource`` reads from the operating system CSPRNG and is the
default everywhere. ``DeterministicRandomSource`` produces a reproducible
SHA-256 counter stream; it exists for tests and must never back real keys.
"""
import os
import hashlib
import threading
from typing import Optional, Protocol, runtime_checkable

from .exceptions import RandomSourceError


@runtime_checkable
class RandomSource(Protocol):
    """Anything that can return ``size`` random bytes."""

    def read(self, size: int) -> bytes:
        ...


class SystemRandomSource:
    """Random bytes from ``os.urandom``."""

    def read(self, size: int) -> bytes:
        return os.urandom(size)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class DeterministicRandomSource:
    """Reproducible byte stream: SHA-256(seed || counter) blocks.

    Not cryptographically secure for production use. Thread-safe, so a
    single instance may be shared between concurrent test callers.
    """

    def __init__(self, seed: bytes = b""):
        self._seed = bytes(seed)
        self._counter = 0
        self._buffer = b""
        self._lock = threading.Lock()

    def read(self, size: int) -> bytes:
        with self._lock:
            while len(self._buffer) < size:
                block = hashlib.sha256(
                    self._seed + self._counter.to_bytes(8, "big")
                ).digest()
                self._counter += 1
                self._buffer += block
            out, self._buffer = self._buffer[:size], self._buffer[size:]
            return out

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(counter={self._counter})"


# process-wide default
DEFAULT_SOURCE = SystemRandomSource()


def read_random(size: int, source: Optional[RandomSource] = None) -> bytes:
    """Read exactly ``size`` bytes from ``source`` (default: system CSPRNG).

    Any exception raised by the source is reported as a RandomSourceError
    chained to the original.

    Raises:
        RandomSourceError: If the source fails or returns the wrong amount.
    """
    if source is None:
        source = DEFAULT_SOURCE
    try:
        data = source.read(size)
    except Exception as err:
        raise RandomSourceError(
            f"random source failed to produce {size} bytes: {err}"
        ) from err
    if not isinstance(data, (bytes, bytearray)) or len(data) != size:
        got = len(data) if isinstance(data, (bytes, bytearray)) else type(data).__name__
        raise RandomSourceError(
            f"random source returned {got}, expected {size} bytes"
        )
    return bytes(data)
