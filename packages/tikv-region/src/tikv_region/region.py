"""
Region descriptor: the client's immutable view of one TiKV region.

A RegionDescriptor bundles a region's key range, replica peers, epoch and
the peer currently believed to be leader. The request router uses it to:

1. Pick the region owning a key (contains)
2. Address the request (leader, get_context)
3. React to NotLeader responses (with_new_leader)

Descriptors are never mutated after construction. A leader change produces
a new descriptor that shares the normalized region record, so threads still
holding the old one keep a consistent view.

Key normalization happens once, in RegionDescriptor.create(). Callers must
pass keys to contains() in the same comparable form (already decoded).
"""

import logging
from dataclasses import dataclass, field, replace

from tikv_region.codec import BytesCodec, compare_bytes, format_bytes
from tikv_region.errors import CodecError, InvalidRegionError
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

logger = logging.getLogger(__name__)

_DEFAULT_CODEC = BytesCodec()


def decode_region(
    meta: RegionMeta,
    kv_mode: KeyMode | str = KeyMode.TXN,
    codec: KeyCodecProtocol | None = None,
) -> RegionMeta:
    """
    Normalize region boundaries into comparable bytes.

    RAW boundaries and empty boundaries are kept verbatim. Anything else is
    unwrapped with the codec (memcomparable BytesCodec by default).

    Raises:
        CodecError: If a non-empty boundary fails to decode in TXN mode.
            Its region_id is set to meta.id.
    """
    if KeyMode.parse(kv_mode) is KeyMode.RAW:
        return meta

    codec = codec or _DEFAULT_CODEC
    try:
        start_key = codec.decode(meta.start_key) if meta.start_key else meta.start_key
        end_key = codec.decode(meta.end_key) if meta.end_key else meta.end_key
    except CodecError as e:
        e.region_id = meta.id
        logger.warning("Region %d has an undecodable boundary: %s", meta.id, e.reason)
        raise
    return replace(meta, start_key=start_key, end_key=end_key)


@dataclass(frozen=True)
class RegionDescriptor:
    """
    Immutable routing descriptor for a single region.

    Build instances with RegionDescriptor.create(), which normalizes keys
    and resolves the default leader. The dataclass constructor itself
    assumes meta is already normalized and leader is already resolved.

    Attributes:
        meta: Normalized region record.
        leader: Peer requests are sent to.
        isolation_level: Isolation level attached to requests.
        command_priority: Priority attached to requests.
        comparator: Byte ordering used by contains().
    """

    meta: RegionMeta
    leader: Peer
    isolation_level: IsolationLevel = IsolationLevel.SI
    command_priority: CommandPri = CommandPri.NORMAL
    comparator: ByteComparatorProtocol = field(
        default=compare_bytes, repr=False, compare=False
    )
    _context: RequestContext = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # Built eagerly: the descriptor never changes, so neither does its context
        object.__setattr__(
            self,
            "_context",
            RequestContext(
                region_id=self.meta.id,
                peer=self.leader,
                region_epoch=self.meta.region_epoch,
                isolation_level=self.isolation_level,
                priority=self.command_priority,
            ),
        )

    @classmethod
    def create(
        cls,
        meta: RegionMeta,
        leader: Peer | None = None,
        isolation_level: IsolationLevel = IsolationLevel.SI,
        command_priority: CommandPri = CommandPri.NORMAL,
        kv_mode: KeyMode | str = KeyMode.TXN,
        codec: KeyCodecProtocol | None = None,
        comparator: ByteComparatorProtocol | None = None,
    ) -> "RegionDescriptor":
        """
        Build a descriptor from a region record reported by PD.

        Args:
            meta: Region record with boundaries as stored by PD.
            leader: Explicit leader. None or a peer with id 0 means
                "use the first peer in meta.peers".
            isolation_level: Isolation level for requests.
            command_priority: Priority for requests.
            kv_mode: RAW keeps boundaries as-is, TXN decodes them.
            codec: Codec for TXN boundaries (BytesCodec if omitted).
            comparator: Byte ordering for contains() (compare_bytes if
                omitted).

        Returns:
            A normalized, immutable descriptor.

        Raises:
            InvalidRegionError: If no leader is given and meta has no peers.
            CodecError: If a TXN boundary is not a valid encoded key.
        """
        if meta is None:
            raise ValueError("meta is None")

        normalized = decode_region(meta, kv_mode, codec)

        if leader is None or leader.id == 0:
            if not meta.peers:
                logger.warning("Region %d has an empty peer list", meta.id)
                raise InvalidRegionError(meta.id, "no peers available")
            # Preserve PD's peer order as the tie-break
            leader = meta.peers[0]

        logger.debug(
            "Normalized region %d (%s mode) with leader on store %d",
            meta.id,
            KeyMode.parse(kv_mode).value,
            leader.store_id,
        )
        return cls(
            meta=normalized,
            leader=leader,
            isolation_level=isolation_level,
            command_priority=command_priority,
            comparator=comparator or compare_bytes,
        )

    @property
    def id(self) -> RegionId:
        return self.meta.id

    @property
    def start_key(self) -> bytes:
        return self.meta.start_key

    @property
    def end_key(self) -> bytes:
        return self.meta.end_key

    @property
    def region_epoch(self) -> RegionEpoch:
        return self.meta.region_epoch

    @property
    def peers(self) -> tuple[Peer, ...]:
        return self.meta.peers

    def contains(self, key: bytes) -> bool:
        """
        Check whether key falls in [start_key, end_key).

        An empty end_key is treated as +infinity. The key must already be in
        the same decoded form as the stored boundaries.
        """
        compare = self.comparator
        return compare(self.meta.start_key, key) <= 0 and (
            not self.meta.end_key or compare(self.meta.end_key, key) > 0
        )

    def with_new_leader(self, leader_store_id: StoreId) -> "RegionDescriptor":
        """
        Switch the leader to the peer on a specific store.

        Returns:
            A new descriptor whose leader is the peer on leader_store_id, or
            this same descriptor if no peer lives on that store. Callers can
            detect the miss with an identity check.
        """
        for peer in self.meta.peers:
            if peer.store_id == leader_store_id:
                logger.debug(
                    "Region %d leader moved from store %d to store %d",
                    self.meta.id,
                    self.leader.store_id,
                    leader_store_id,
                )
                return replace(self, leader=peer)

        logger.debug(
            "Region %d has no peer on store %d, keeping leader on store %d",
            self.meta.id,
            leader_store_id,
            self.leader.store_id,
        )
        return self

    def get_context(self) -> RequestContext:
        """
        Return the request context for this descriptor.

        The context is built once at construction, so every call returns
        the same instance.
        """
        return self._context

    def version_identity(self) -> RegionVerID:
        """Project the (id, conf_ver, version) triple used by region caches."""
        epoch = self.meta.region_epoch
        return RegionVerID(id=self.meta.id, conf_ver=epoch.conf_ver, ver=epoch.version)

    get_ver_id = version_identity

    def is_valid(self) -> bool:
        return self.leader is not None and self.meta is not None

    def __str__(self) -> str:
        epoch = self.meta.region_epoch
        return (
            f"Region[{self.meta.id}] ConfVer[{epoch.conf_ver}] "
            f"Version[{epoch.version}] Store[{self.leader.store_id}] "
            f"KeyRange[{format_bytes(self.meta.start_key)}]:"
            f"[{format_bytes(self.meta.end_key)}]"
        )
