"""
Client-side TiKV region descriptors.

This package provides the immutable value object a request router uses to
map keys to regions and address requests to region leaders. It includes:

- RegionDescriptor: Normalized key range, peers, epoch and leader
- Memcomparable key codec and byte comparator
- PD region payload types for input validation
- Settings for key mode and request defaults
- Factory functions building descriptors from PD payloads
"""

from tikv_region.codec import BytesCodec, RawKeyCodec, compare_bytes, format_bytes
from tikv_region.config import Settings
from tikv_region.errors import CodecError, InvalidRegionError, RegionError
from tikv_region.factory import create_region, create_regions
from tikv_region.models import (
    CommandPri,
    IsolationLevel,
    KeyMode,
    Peer,
    RegionEpoch,
    RegionId,
    RegionMeta,
    RegionVerID,
    RequestContext,
    StoreId,
)
from tikv_region.protocols import ByteComparatorProtocol, KeyCodecProtocol
from tikv_region.region import RegionDescriptor, decode_region
from tikv_region.types import (
    PDRegionEpoch,
    PDRegionPeer,
    PDRegionResponse,
    PDRegionsResponse,
)

__all__ = [
    # Descriptor
    "RegionDescriptor",
    "decode_region",
    # Value types
    "Peer",
    "RegionEpoch",
    "RegionMeta",
    "RegionVerID",
    "RequestContext",
    "IsolationLevel",
    "CommandPri",
    "KeyMode",
    "RegionId",
    "StoreId",
    # Codec
    "BytesCodec",
    "RawKeyCodec",
    "compare_bytes",
    "format_bytes",
    "KeyCodecProtocol",
    "ByteComparatorProtocol",
    # Errors
    "RegionError",
    "InvalidRegionError",
    "CodecError",
    # PD payload types
    "PDRegionPeer",
    "PDRegionEpoch",
    "PDRegionResponse",
    "PDRegionsResponse",
    # Configuration and factories
    "Settings",
    "create_region",
    "create_regions",
]
