"""
Key codecs and byte helpers.

BytesCodec implements TiKV's memcomparable bytes encoding: the value is cut
into groups of 8 bytes, each group is right-padded with 0x00 and followed by
a marker byte equal to 0xFF minus the number of pad bytes. Encoded values
sort in the same order as the raw values and are self-delimiting, which is
why TXN-mode region boundaries are stored this way.

Example:
    b"abc" -> 61 62 63 00 00 00 00 00 FA
    b""    -> 00 00 00 00 00 00 00 00 F7
"""

from tikv_region.errors import CodecError

ENC_GROUP_SIZE = 8
ENC_MARKER = 0xFF
ENC_PAD = 0x00

_PAD_GROUP = bytes([ENC_PAD] * ENC_GROUP_SIZE)


def compare_bytes(left: bytes, right: bytes) -> int:
    """
    Compare two byte strings lexicographically as unsigned bytes.

    A proper prefix sorts before the longer string.
    """
    # bytes ordering in Python is already unsigned lexicographic
    return (left > right) - (left < right)


def format_bytes(data: bytes) -> str:
    """Render bytes as \\xNN escapes for log lines and summaries."""
    return "".join(f"\\x{b:02x}" for b in data)


class BytesCodec:
    """Memcomparable bytes encoding used for TXN-mode keys."""

    def encode(self, value: bytes) -> bytes:
        out = bytearray()
        for offset in range(0, len(value) + 1, ENC_GROUP_SIZE):
            group = value[offset : offset + ENC_GROUP_SIZE]
            pad_count = ENC_GROUP_SIZE - len(group)
            out += group
            out += _PAD_GROUP[:pad_count]
            out.append(ENC_MARKER - pad_count)
        return bytes(out)

    def decode_prefix(self, data: bytes) -> tuple[bytes, bytes]:
        """
        Decode one encoded value from the front of data.

        Returns:
            Tuple of (decoded value, remaining bytes after the value).

        Raises:
            CodecError: If data is truncated, a marker is out of range, or
                padding bytes are not zero.
        """
        out = bytearray()
        pos = 0
        while True:
            group = data[pos : pos + ENC_GROUP_SIZE + 1]
            if len(group) < ENC_GROUP_SIZE + 1:
                raise CodecError("insufficient bytes to decode value", data)
            pos += ENC_GROUP_SIZE + 1

            marker = group[ENC_GROUP_SIZE]
            pad_count = ENC_MARKER - marker
            if pad_count > ENC_GROUP_SIZE:
                raise CodecError(f"invalid marker byte 0x{marker:02x}", data)

            real_size = ENC_GROUP_SIZE - pad_count
            out += group[:real_size]
            if pad_count:
                if group[real_size:ENC_GROUP_SIZE] != _PAD_GROUP[:pad_count]:
                    raise CodecError("invalid padding byte", data)
                return bytes(out), data[pos:]

    def decode(self, data: bytes) -> bytes:
        """Decode the first encoded value in data, ignoring any suffix."""
        value, _ = self.decode_prefix(data)
        return value


class RawKeyCodec:
    """Identity codec for RAW-mode keys, which are stored as written."""

    def encode(self, value: bytes) -> bytes:
        return bytes(value)

    def decode(self, data: bytes) -> bytes:
        return bytes(data)
