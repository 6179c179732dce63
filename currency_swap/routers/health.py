from fastapi import APIRouter, Depends

from currency_swap.core.config import Settings
from currency_swap.services.session import get_settings_dep

router = APIRouter(tags=["health"])


@router.get("/health", summary="Liveness probe")
async def health(settings: Settings = Depends(get_settings_dep)):
    return {"status": "ok", "version": settings.version}
