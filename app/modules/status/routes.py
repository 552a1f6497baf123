from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.config import Settings, get_settings
from app.core.limiter import limiter
from app.modules.status.service import StatusService

router = APIRouter(tags=["status"])


def get_status_service(settings: Settings = Depends(get_settings)) -> StatusService:
    return StatusService(settings)


@router.get("/health")
@limiter.exempt
async def health(service: StatusService = Depends(get_status_service)):
    """Check that the Supabase project is reachable with the configured key"""
    result = await service.check_store()
    return JSONResponse(status_code=200 if result["ok"] else 500, content=result)


@router.get("/twitch/status")
async def twitch_status(service: StatusService = Depends(get_status_service)):
    """Report whether the configured Twitch channel is live"""
    return await service.check_live()
