"""Dependencies for the participants feature."""

from typing import Annotated

from fastapi import Depends

from dodge_radar.core.dependencies import AssetCacheDep, RiotClientDep
from .gateway import ParticipantGateway
from .service import ParticipantsService


def get_participant_gateway(client: RiotClientDep) -> ParticipantGateway:
    return ParticipantGateway(client)


def get_participants_service(
    client: RiotClientDep,
    gateway: Annotated[ParticipantGateway, Depends(get_participant_gateway)],
    assets: AssetCacheDep,
) -> ParticipantsService:
    """Get participants service with injected gateway and asset cache."""
    return ParticipantsService(client, gateway, assets)


ParticipantsServiceDep = Annotated[ParticipantsService, Depends(get_participants_service)]

__all__ = ["get_participant_gateway", "get_participants_service", "ParticipantsServiceDep"]
