"""routes/system.py – /health"""
from datetime import datetime

from fastapi import APIRouter

from ..deps import get_lookup
from ..models import HealthResponse

router = APIRouter(tags=["System"])


@router.get("/health", response_model=HealthResponse)
async def health():
    lookup = get_lookup()
    return HealthResponse(
        status="ok",
        time=datetime.now().isoformat(),
        cities=lookup.count,
        data_state=lookup.data_state.value,
    )
