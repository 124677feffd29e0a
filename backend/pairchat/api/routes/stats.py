from fastapi import APIRouter, Depends

from pairchat.api.dependencies import get_chat_hub
from pairchat.realtime.hub import ChatHub
from pairchat.schemas.chat import StatsRead

router = APIRouter()


@router.get("", response_model=StatsRead)
async def get_stats(hub: ChatHub = Depends(get_chat_hub)) -> StatsRead:
    return StatsRead.model_validate(await hub.stats())
