"""
Factory functions for building region descriptors from PD payloads.

This is the seam between the metadata fetch layer (which owns HTTP and
retries) and the descriptor core. Construction failures are not caught here;
the caller logs them and decides whether to refetch.
"""

import logging
from typing import Any

from tikv_region.config import Settings
from tikv_region.protocols import KeyCodecProtocol
from tikv_region.region import RegionDescriptor
from tikv_region.types import PDRegionResponse, PDRegionsResponse

logger = logging.getLogger(__name__)


def create_region(
    payload: PDRegionResponse | dict[str, Any],
    settings: Settings | None = None,
    codec: KeyCodecProtocol | None = None,
) -> RegionDescriptor:
    """
    Create a region descriptor from a PD region payload.

    Args:
        payload: Parsed PDRegionResponse or the raw JSON dict from
            GET /pd/api/v1/region/id/{id}.
        settings: Key mode and request defaults. If None, settings are
            read from the environment.
        codec: Optional codec for TXN boundaries.

    Returns:
        Normalized RegionDescriptor. The leader is PD's reported leader
        when present, otherwise the first peer.

    Raises:
        pydantic.ValidationError: On malformed payload data.
        InvalidRegionError: If the region has no peers and no leader.
        CodecError: If a TXN boundary fails to decode.

    Example:
        region = create_region(response.json(), Settings(kv_mode="raw"))
        if region.contains(b"user_42"):
            send(region.get_context(), ...)
    """
    if settings is None:
        settings = Settings()

    if isinstance(payload, dict):
        payload = PDRegionResponse.model_validate(payload)

    region = RegionDescriptor.create(
        payload.to_meta(),
        leader=payload.leader_peer(),
        isolation_level=settings.isolation_level,
        command_priority=settings.command_priority,
        kv_mode=settings.kv_mode,
        codec=codec,
    )
    logger.debug("Created %s", region)
    return region


def create_regions(
    payload: PDRegionsResponse | dict[str, Any],
    settings: Settings | None = None,
    codec: KeyCodecProtocol | None = None,
) -> list[RegionDescriptor]:
    """
    Create descriptors for every region in a GET /pd/api/v1/regions payload.

    The first invalid region aborts the whole batch.
    """
    if settings is None:
        settings = Settings()

    if isinstance(payload, dict):
        payload = PDRegionsResponse.model_validate(payload)

    return [create_region(r, settings=settings, codec=codec) for r in payload.regions]
