"""
Protocol definitions for the collaborators a region descriptor consumes.

The descriptor never implements key encoding or byte ordering itself. It
talks to these seams so a caller can plug in a different codec (for
example one aware of API v2 keyspace prefixes) without touching region.py.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class KeyCodecProtocol(Protocol):
    """
    Protocol for reversible key encodings.

    decode() must raise CodecError when its input is not a validly
    framed key. Bytes following the first encoded key may be ignored.
    """

    def encode(self, value: bytes) -> bytes:
        """Wrap a logical key into its stored form."""
        ...

    def decode(self, data: bytes) -> bytes:
        """Unwrap a stored key into comparable bytes."""
        ...


@runtime_checkable
class ByteComparatorProtocol(Protocol):
    """Protocol for byte-sequence ordering used on decoded keys."""

    def __call__(self, left: bytes, right: bytes) -> int:
        """Return -1, 0 or 1 as left sorts before, equal to, or after right."""
        ...
