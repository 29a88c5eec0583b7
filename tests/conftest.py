"""Shared fixtures for navigator_symkey tests."""
import pytest

from navigator_symkey import SymmetricKey, DeterministicRandomSource


class FailingRandomSource:
    """Random source whose entropy is never available."""

    def read(self, size: int) -> bytes:
        raise OSError("entropy source unavailable")


class BrokenRandomSource:
    """Random source that fails with a non-OS error."""

    def read(self, size: int) -> bytes:
        raise RuntimeError("no entropy")


class ShortRandomSource:
    """Random source that returns one byte less than asked."""

    def read(self, size: int) -> bytes:
        return b"\x00" * (size - 1)


@pytest.fixture
def zero_key():
    """Key made of 32 zero bytes."""
    return SymmetricKey.from_bytes(bytes(32))


@pytest.fixture
def ones_key():
    """Key made of 32 0x01 bytes."""
    return SymmetricKey.from_bytes(b"\x01" * 32)


@pytest.fixture
def random_key():
    return SymmetricKey.generate()


@pytest.fixture
def failing_source():
    return FailingRandomSource()


@pytest.fixture
def broken_source():
    return BrokenRandomSource()


@pytest.fixture
def short_source():
    return ShortRandomSource()


@pytest.fixture
def seeded_source():
    return DeterministicRandomSource(b"navigator-symkey-tests")
