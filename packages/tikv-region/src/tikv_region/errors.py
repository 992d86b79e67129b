"""
Exception classes for region descriptor construction.

- RegionError: Base class for everything raised by this package
- InvalidRegionError: Region record cannot produce a routable descriptor
- CodecError: A region boundary is not a validly framed encoded key

Both construction errors are fatal for the record that triggered them and
name the region they came from. Nothing here retries; the metadata fetch
layer decides what to do next.
"""


class RegionError(Exception):
    """Base exception for region descriptor errors."""


class InvalidRegionError(RegionError):
    """
    Raised when a region record violates metadata invariants.

    The usual cause is a record with an empty peer list and no explicit
    leader, which means PD returned a corrupted region.

    Attributes:
        region_id: ID of the offending region
        reason: Short description of what is wrong with it
    """

    def __init__(self, region_id: int, reason: str) -> None:
        self.region_id = region_id
        self.reason = reason
        super().__init__(f"Invalid region {region_id}: {reason}")


class CodecError(RegionError):
    """
    Raised when bytes cannot be decoded as a memcomparable key.

    The codec itself knows nothing about regions, so region_id is None
    until region construction fills it in on the way out.

    Attributes:
        reason: What went wrong while decoding
        data: The bytes that failed to decode
        region_id: Region whose boundary failed, if known
    """

    def __init__(self, reason: str, data: bytes = b"", region_id: int | None = None) -> None:
        self.reason = reason
        self.data = data
        self.region_id = region_id
        super().__init__(reason, data)

    def __str__(self) -> str:
        message = f"{self.reason} (input: {self.data.hex()})"
        if self.region_id is not None:
            message = f"{message} in region {self.region_id}"
        return message
