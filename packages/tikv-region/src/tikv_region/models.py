"""
Internal value types for region routing.

These mirror the metapb/kvrpcpb records a TiKV client works with, but as
frozen dataclasses so they can be shared between threads and used as
dict keys. Pydantic models are reserved for PD API payloads (see types.py).
"""

from dataclasses import dataclass
from enum import Enum, IntEnum

RegionId = int
"""Unique identifier for a TiKV region (key range)."""

StoreId = int
"""Unique identifier for a TiKV store (node)."""


class IsolationLevel(IntEnum):
    """Transaction isolation level attached to requests (kvrpcpb numbering)."""

    SI = 0
    RC = 1
    RC_CHECK_TS = 2


class CommandPri(IntEnum):
    """Scheduling priority attached to requests (kvrpcpb numbering)."""

    NORMAL = 0
    LOW = 1
    HIGH = 2


class KeyMode(str, Enum):
    """
    How region boundaries are stored by PD.

    RAW regions carry keys exactly as clients wrote them. TXN regions wrap
    every boundary in the memcomparable bytes encoding, which has to be
    unwrapped before keys can be compared.
    """

    RAW = "RAW"
    TXN = "TXN"

    @classmethod
    def parse(cls, value: "str | KeyMode") -> "KeyMode":
        """Anything other than "raw" (any case) means encoded keys."""
        if isinstance(value, KeyMode):
            return value
        return cls.RAW if value.strip().upper() == "RAW" else cls.TXN


@dataclass(frozen=True)
class Peer:
    """
    One replica of a region.

    Attributes:
        id: Peer identifier; 0 means "no peer".
        store_id: Store (TiKV node) hosting the replica.
    """

    id: int
    store_id: StoreId


@dataclass(frozen=True)
class RegionEpoch:
    """
    Region version pair maintained by PD.

    Attributes:
        conf_ver: Bumped on membership change (peer added or removed).
        version: Bumped on range change (split or merge).
    """

    conf_ver: int = 0
    version: int = 0


@dataclass(frozen=True)
class RegionMeta:
    """
    Region record as reported by PD.

    After normalization start_key and end_key are comparable bytes.
    An empty end_key means the range is unbounded above.
    """

    id: RegionId
    start_key: bytes = b""
    end_key: bytes = b""
    region_epoch: RegionEpoch = RegionEpoch()
    peers: tuple[Peer, ...] = ()


@dataclass(frozen=True)
class RegionVerID:
    """Equality key used by region caches to spot stale descriptors."""

    id: RegionId
    conf_ver: int
    ver: int


@dataclass(frozen=True)
class RequestContext:
    """
    Addressing context attached to every request sent to a region.

    Attributes:
        region_id: Target region.
        peer: Peer expected to serve the request (the believed leader).
        region_epoch: Epoch the client believes is current.
        isolation_level: Transaction isolation level.
        priority: Command priority.
    """

    region_id: RegionId
    peer: Peer
    region_epoch: RegionEpoch
    isolation_level: IsolationLevel
    priority: CommandPri
