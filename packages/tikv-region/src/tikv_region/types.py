"""
PD region payload types.

Pydantic models for the region objects returned by the Placement Driver
HTTP API (GET /pd/api/v1/region/id/{id}, GET /pd/api/v1/regions). These are
external data and get validated here; internal code works with the frozen
dataclasses in tikv_region.models.

Notes:
- start_key/end_key arrive as uppercase hex strings, "" meaning unbounded
- In TXN mode those hex strings are memcomparable-encoded keys
- PD reports {} as leader while an election is in progress
"""

from pydantic import BaseModel, Field, field_validator

from tikv_region.models import Peer, RegionEpoch, RegionMeta


# =============================================================================
# Region Response Types
# =============================================================================
# Response structure:
# {"id": 2, "start_key": "7480...", "end_key": "", "epoch": {...},
#  "peers": [{"id": 3, "store_id": 1}], "leader": {"id": 3, "store_id": 1}}


class PDRegionPeer(BaseModel):
    """
    Region peer info.

    A peer is a replica of a region stored on a specific store. Both fields
    default to 0 so an empty object parses as "no peer".
    """

    id: int = 0
    store_id: int = 0

    def to_peer(self) -> Peer:
        return Peer(id=self.id, store_id=self.store_id)


class PDRegionEpoch(BaseModel):
    """Region epoch as reported by PD."""

    conf_ver: int = 0
    version: int = 0


class PDRegionResponse(BaseModel):
    """
    Response from GET /pd/api/v1/region/id/{id}.

    Example response:
    {
        "id": 7,
        "start_key": "62",
        "end_key": "64",
        "epoch": {"conf_ver": 5, "version": 3},
        "peers": [{"id": 1, "store_id": 10}, {"id": 2, "store_id": 20}],
        "leader": {"id": 2, "store_id": 20}
    }
    """

    id: int
    start_key: str = ""
    end_key: str = ""
    epoch: PDRegionEpoch = Field(default_factory=PDRegionEpoch)
    peers: list[PDRegionPeer] = Field(default_factory=list)
    leader: PDRegionPeer | None = None

    @field_validator("start_key", "end_key")
    @classmethod
    def _check_hex(cls, value: str) -> str:
        try:
            bytes.fromhex(value)
        except ValueError as e:
            raise ValueError(f"key is not a hex string: {value!r}") from e
        return value

    def to_meta(self) -> RegionMeta:
        """
        Convert to an un-normalized RegionMeta.

        Boundaries are hex-decoded only; memcomparable decoding is left to
        RegionDescriptor.create() which knows the key mode.
        """
        return RegionMeta(
            id=self.id,
            start_key=bytes.fromhex(self.start_key),
            end_key=bytes.fromhex(self.end_key),
            region_epoch=RegionEpoch(
                conf_ver=self.epoch.conf_ver, version=self.epoch.version
            ),
            peers=tuple(p.to_peer() for p in self.peers),
        )

    def leader_peer(self) -> Peer | None:
        """Return the reported leader, or None when PD reports none."""
        if self.leader is None or self.leader.id == 0:
            return None
        return self.leader.to_peer()


class PDRegionsResponse(BaseModel):
    """
    Response from GET /pd/api/v1/regions.

    Lists all regions in the cluster.
    """

    count: int
    regions: list[PDRegionResponse]
